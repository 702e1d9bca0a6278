"""Metropolis updates of gauge fields with the Wilson plaquette action."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from klft.gauge_field import GaugeField
from klft.staple import staple
from klft.tuner import iterate_range

Propose = Callable[[np.random.Generator, float], np.ndarray]
Restore = Callable[[np.ndarray], np.ndarray]
Measure = Callable[[GaugeField, int], object]


@dataclass
class MetropolisParams:
    """Lattice, gauge group and update settings of a Metropolis run."""

    dimensions: tuple[int, ...]
    nc: int
    n_sweep: int
    n_hits: int
    beta: float
    delta: float

    def __post_init__(self) -> None:
        self.dimensions = tuple(int(d) for d in self.dimensions)
        if self.n_hits <= 0:
            raise ValueError("n_hits must be positive")
        if self.n_sweep < 0:
            raise ValueError("n_sweep must not be negative")

    def describe(self) -> str:
        lines = [
            "Metropolis Parameters:",
            f"  Ndims: {len(self.dimensions)}",
            f"  Nc: {self.nc}",
            "  Dimensions: " + " ".join(str(d) for d in self.dimensions),
            f"  nSweep: {self.n_sweep}",
            f"  nHits: {self.n_hits}",
            f"  beta: {self.beta:f}",
            f"  delta: {self.delta:f}",
        ]
        return "\n".join(lines) + "\n"


def sublattice_parities(rank: int) -> list[tuple[bool, ...]]:
    """The ``2**rank`` odd/even patterns, one per sublattice."""
    if rank <= 0:
        raise ValueError("rank must be positive")
    return [
        tuple(bool((i >> j) & 1) for j in range(rank)) for i in range(2**rank)
    ]


def _check_params(field: GaugeField, params: MetropolisParams) -> None:
    if params.dimensions != field.dimensions:
        raise ValueError(
            f"parameters describe lattice {params.dimensions}, field has {field.dimensions}"
        )
    if params.nc != field.nc:
        raise ValueError(f"parameters describe Nc={params.nc}, field has Nc={field.nc}")


def _real_trace(matrix: np.ndarray) -> float:
    return float(matrix.diagonal().sum().real)


def sweep_metropolis(
    field: GaugeField,
    params: MetropolisParams,
    rng: np.random.Generator,
    propose: Propose,
    restore: Restore,
) -> float:
    """Update every link ``n_hits`` times and return the acceptance rate.

    ``propose(rng, delta)`` draws a random group element near the identity and
    ``restore(matrix)`` projects a product back onto the group.
    """
    _check_params(field, params)
    rank = field.rank
    half = [d // 2 for d in field.dimensions]
    start = [0] * rank
    accepted = 0
    for parity in sublattice_parities(rank):
        for idx in iterate_range(start, half):
            site = tuple(2 * i + int(p) for i, p in zip(idx, parity))
            for mu in range(rank):
                around = staple(field, site, mu)
                for _ in range(params.n_hits):
                    r = propose(rng, params.delta)
                    u_old = field[site, mu].copy()
                    u_new = u_old @ r
                    ds = -(params.beta / field.nc) * (
                        _real_trace(u_new @ around) - _real_trace(u_old @ around)
                    )
                    accept = ds < 0.0
                    if not accept:
                        accept = rng.uniform(0.0, 1.0) < math.exp(-ds)
                    if accept:
                        field[site, mu] = restore(u_new)
                        accepted += 1
    norm = float(np.prod(field.dimensions)) * rank * params.n_hits
    return accepted / norm


def run_metropolis(
    field: GaugeField,
    params: MetropolisParams,
    rng: np.random.Generator,
    propose: Propose,
    restore: Restore,
    measure: Measure | None = None,
) -> list[float]:
    """Run ``n_sweep`` sweeps, measuring after each; return the acceptance rates."""
    _check_params(field, params)
    rates = []
    for step in itertools.count():
        if step >= params.n_sweep:
            break
        rates.append(sweep_metropolis(field, params, rng, propose, restore))
        if measure is not None:
            measure(field, step)
    return rates


def _as_dimensions(dimensions: Sequence[int]) -> tuple[int, ...]:
    return tuple(int(d) for d in dimensions)