"""Gauge fields: one colour matrix per lattice site and direction."""

from __future__ import annotations

import numbers
from collections.abc import Sequence

import numpy as np

SUPPORTED_RANKS = (2, 3, 4)


def _dimensions(dimensions: Sequence[int]) -> tuple[int, ...]:
    dims = tuple(int(d) for d in dimensions)
    if len(dims) not in SUPPORTED_RANKS:
        raise ValueError(f"unsupported rank {len(dims)}; expected one of {SUPPORTED_RANKS}")
    if any(d <= 0 for d in dims):
        raise ValueError("lattice extents must be positive")
    return dims


def _is_integer(value: object) -> bool:
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(value, bool)


class GaugeField:
    """Link variables on a 2, 3 or 4 dimensional periodic lattice.

    The number of directions equals the rank of the lattice. Each link is an
    ``nc`` x ``nc`` complex matrix. Links are addressed either as
    ``field[site, mu]`` with ``site`` a sequence of coordinates, or as
    ``field[i0, ..., mu]`` with the coordinates written out.
    """

    def __init__(self, dimensions: Sequence[int], nc: int, links: object) -> None:
        self.dimensions = _dimensions(dimensions)
        self.nc = int(nc)
        if self.nc <= 0:
            raise ValueError("nc must be positive")
        array = np.array(links, dtype=complex)
        expected = (*self.dimensions, len(self.dimensions), self.nc, self.nc)
        if array.shape != expected:
            raise ValueError(f"links have shape {array.shape}, expected {expected}")
        self.links = array

    @classmethod
    def filled(cls, dimensions: Sequence[int], nc: int, value: complex) -> GaugeField:
        """Field with every entry of every link set to ``value``."""
        dims = _dimensions(dimensions)
        shape = (*dims, len(dims), nc, nc)
        return cls(dims, nc, np.full(shape, value, dtype=complex))

    @classmethod
    def from_matrix(cls, dimensions: Sequence[int], matrix: object) -> GaugeField:
        """Field with the same matrix on every link."""
        dims = _dimensions(dimensions)
        mat = np.asarray(matrix, dtype=complex)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise ValueError("matrix must be square")
        nc = mat.shape[0]
        return cls(dims, nc, np.broadcast_to(mat, (*dims, len(dims), nc, nc)))

    @classmethod
    def random(
        cls, dimensions: Sequence[int], nc: int, rng: np.random.Generator
    ) -> GaugeField:
        """Field whose entries have real and imaginary parts uniform in [-1, 1)."""
        dims = _dimensions(dimensions)
        draws = rng.uniform(-1.0, 1.0, size=(*dims, len(dims), nc, nc, 2))
        return cls(dims, nc, draws[..., 0] + 1j * draws[..., 1])

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    def _index(self, key: object) -> tuple[int, ...]:
        if not isinstance(key, tuple):
            raise TypeError("index a gauge field with (site, mu) or (i0, ..., mu)")
        if len(key) == 2 and not _is_integer(key[0]):
            site, mu = key
            coordinates = tuple(site)  # type: ignore[arg-type]
        else:
            *coordinates_list, mu = key
            coordinates = tuple(coordinates_list)
        if not all(_is_integer(c) for c in coordinates) or not _is_integer(mu):
            raise TypeError("site coordinates and direction must be integers")
        coordinates = tuple(int(c) for c in coordinates)
        mu = int(mu)  # type: ignore[arg-type]
        if len(coordinates) != self.rank:
            raise IndexError(
                f"site must have {self.rank} coordinates, got {len(coordinates)}"
            )
        for coordinate, extent in zip(coordinates, self.dimensions):
            if not 0 <= coordinate < extent:
                raise IndexError(f"site {coordinates} outside lattice {self.dimensions}")
        if not 0 <= mu < self.rank:
            raise IndexError(f"direction {mu} outside 0..{self.rank - 1}")
        return (*coordinates, mu)

    def __getitem__(self, key: object) -> np.ndarray:
        """The link matrix at ``key``; changes to it change the field."""
        return self.links[self._index(key)]

    def __setitem__(self, key: object, value: object) -> None:
        matrix = np.asarray(value, dtype=complex)
        if matrix.shape != (self.nc, self.nc):
            raise ValueError(
                f"expected a {self.nc}x{self.nc} matrix, got shape {matrix.shape}"
            )
        self.links[self._index(key)] = matrix

    def copy(self) -> GaugeField:
        """An independent copy of the field."""
        return GaugeField(self.dimensions, self.nc, self.links.copy())

    def __repr__(self) -> str:
        return f"GaugeField(dimensions={self.dimensions}, nc={self.nc})"