"""Descriptors that pick the field layout for a lattice rank and gauge group."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from klft.gauge_field import GaugeField
from klft.sun_field import SUNField

SUPPORTED_RANKS = (2, 3, 4)


class GaugeFieldKind(enum.Enum):
    """Boundary treatment of a gauge field."""

    STANDARD = "Standard"
    PTBC = "PTBC"


class SpinorFieldKind(enum.Enum):
    """Discretisation of a spinor field."""

    STANDARD = "Standard"
    STAGGERED = "Staggered"


def _check(rank: int, nc: int) -> tuple[int, int]:
    rank = int(rank)
    nc = int(nc)
    if rank not in SUPPORTED_RANKS:
        raise ValueError(f"unsupported rank {rank}; expected one of {SUPPORTED_RANKS}")
    if nc <= 0:
        raise ValueError("nc must be positive")
    return rank, nc


@dataclass(frozen=True)
class GaugeFieldType:
    """Rank, colour count and kind of a gauge field."""

    rank: int
    nc: int
    kind: GaugeFieldKind = GaugeFieldKind.STANDARD

    def matches(self, field: object) -> bool:
        """Whether ``field`` is a gauge field of this type."""
        return (
            self.kind is GaugeFieldKind.STANDARD
            and isinstance(field, GaugeField)
            and field.rank == self.rank
            and field.nc == self.nc
        )


@dataclass(frozen=True)
class SUNFieldType:
    """Rank and colour count of a field of colour matrices."""

    rank: int
    nc: int

    def _dimensions(self, dimensions: Sequence[int]) -> tuple[int, ...]:
        dims = tuple(int(d) for d in dimensions)
        if len(dims) != self.rank:
            raise ValueError(f"expected {self.rank} extents, got {len(dims)}")
        return dims

    def filled(self, dimensions: Sequence[int], value: complex) -> SUNField:
        """Field of this type with every matrix entry set to ``value``."""
        return SUNField.filled(self._dimensions(dimensions), self.nc, value)

    def from_matrix(self, dimensions: Sequence[int], matrix: object) -> SUNField:
        """Field of this type with ``matrix`` at every site."""
        mat = np.asarray(matrix, dtype=complex)
        if mat.shape != (self.nc, self.nc):
            raise ValueError(f"expected a {self.nc}x{self.nc} matrix, got shape {mat.shape}")
        return SUNField.from_matrix(self._dimensions(dimensions), mat)

    def matches(self, field: object) -> bool:
        """Whether ``field`` is a matrix field of this type."""
        return isinstance(field, SUNField) and field.rank == self.rank and field.nc == self.nc


def gauge_field_type(
    rank: int, nc: int, kind: GaugeFieldKind = GaugeFieldKind.STANDARD
) -> GaugeFieldType:
    """Gauge field type for a lattice of ``rank`` dimensions and ``nc`` colours."""
    rank, nc = _check(rank, nc)
    if not isinstance(kind, GaugeFieldKind):
        raise TypeError("kind must be a GaugeFieldKind")
    return GaugeFieldType(rank, nc, kind)


def sun_field_type(rank: int, nc: int) -> SUNFieldType:
    """Matrix field type for a lattice of ``rank`` dimensions and ``nc`` colours."""
    rank, nc = _check(rank, nc)
    return SUNFieldType(rank, nc)