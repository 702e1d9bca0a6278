"""Tiling lookup and launching of kernels over rectangular index ranges."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

SUPPORTED_RANKS = (4, 3, 2)

# Name of the default (absent) work tag as it appears in kernel identifiers.
_DEFAULT_WORK_TAG = "v"


def iterate_range(start: Sequence[int], end: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every index tuple in the half-open box [start, end), last index fastest."""
    if len(start) != len(end):
        raise ValueError("start and end must have the same rank")
    return itertools.product(*(range(s, e) for s, e in zip(start, end)))


def _iterate_tiled(
    start: Sequence[int], end: Sequence[int], tiling: Sequence[int]
) -> Iterator[tuple[int, ...]]:
    """Yield every index of [start, end) once, visiting tile after tile."""
    steps = [max(int(t), 1) for t in tiling]
    origins = itertools.product(
        *(range(s, e, step) for s, e, step in zip(start, end, steps))
    )
    for origin in origins:
        yield from itertools.product(
            *(range(o, min(o + step, e)) for o, step, e in zip(origin, steps, end))
        )


class TuningTable:
    """Mapping from kernel identifiers to the tiling chosen for them."""

    def __init__(self) -> None:
        self.entries: dict[str, tuple[int, ...]] = {}

    def insert(self, key: str, tiling: Sequence[int]) -> None:
        self.entries[key] = tuple(int(t) for t in tiling)

    def get(self, key: str) -> tuple[int, ...]:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def clear(self) -> None:
        self.entries.clear()


class Tuner:
    """Launches functors over index ranges, remembering a tiling per kernel.

    When ``enabled`` is false every launch simply visits the whole range.
    When enabled, the tiling found for a kernel is cached per rank and reused;
    on the host the tiling covers the two innermost extents completely.
    """

    def __init__(self) -> None:
        self.enabled = False
        self.verbosity = 0
        self._tables = {rank: TuningTable() for rank in SUPPORTED_RANKS}

    def table(self, rank: int) -> TuningTable:
        """Return the tuning table for ``rank``."""
        try:
            return self._tables[rank]
        except KeyError:
            raise ValueError(f"unsupported rank {rank}") from None

    def kernel_uid(self, functor_id: str, start: Sequence[int], end: Sequence[int]) -> str:
        """Build the identifier under which a kernel's tiling is stored."""
        if len(start) != len(end):
            raise ValueError("start and end must have the same rank")
        rank = len(start)
        start_uid = "".join(f"{s}_" for s in start)
        end_uid = "".join(f"{e}_" for e in end)
        return (
            f"{functor_id}_{_DEFAULT_WORK_TAG}_rank_{rank}"
            f"_start_{start_uid}end_{end_uid}"
        )

    def launch_for(
        self,
        functor_id: str,
        start: Sequence[int],
        end: Sequence[int],
        functor: Callable[..., object],
    ) -> None:
        """Call ``functor(*index)`` for every index in [start, end)."""
        if len(start) != len(end):
            raise ValueError("start and end must have the same rank")
        if not self.enabled:
            for index in iterate_range(start, end):
                functor(*index)
            return

        rank = len(start)
        table = self.table(rank)
        uid = self.kernel_uid(functor_id, start, end)
        if uid in table:
            tiling = table.get(uid)
            if self.verbosity > 2:
                print(f"Tuning found for kernel {uid}, tiling: {' '.join(map(str, tiling))}")
        else:
            if self.verbosity > 2:
                print(f"Start tuning for kernel {uid}")
            best = [1] * rank
            best[rank - 1] = end[rank - 1] - start[rank - 1]
            best[rank - 2] = end[rank - 2] - start[rank - 2]
            tiling = tuple(best)
            if self.verbosity > 2:
                print(f"Best Tile size: {' '.join(map(str, tiling))}")
            table.insert(uid, tiling)

        for index in _iterate_tiled(start, end, tiling):
            functor(*index)

    def write_cache(self, path: str | Path) -> None:
        """Write all stored tilings to ``path``, one kernel per line."""
        with open(path, "w", encoding="utf-8") as cache:
            for rank in SUPPORTED_RANKS:
                table = self._tables[rank]
                for key in table:
                    values = "".join(f"{v} " for v in table.get(key))
                    cache.write(f"{rank} {key} {values}\n")
        if self.verbosity > 0:
            print(f"Tuning hash table written to {path}")

    def read_cache(self, path: str | Path) -> None:
        """Load tilings previously written by :meth:`write_cache`."""
        with open(path, encoding="utf-8") as cache:
            for line in cache:
                fields = line.split()
                if not fields:
                    continue
                rank = int(fields[0])
                if rank not in SUPPORTED_RANKS:
                    raise ValueError(f"unsupported rank {rank}")
                if len(fields) < 2 + rank:
                    raise ValueError(f"malformed cache line: {line.rstrip()!r}")
                key = fields[1]
                tiling = tuple(int(v) for v in fields[2 : 2 + rank])
                if self.verbosity > 2:
                    print(f"Tuning found for kernel {key}, tiling: {' '.join(map(str, tiling))}")
                self._tables[rank].insert(key, tiling)
        if self.verbosity > 0:
            print(f"Tuning hash table read from {path}")