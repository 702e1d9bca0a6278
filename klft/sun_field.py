"""Fields holding one colour matrix per lattice site."""

from __future__ import annotations

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


class SUNField:
    """An ``nc`` x ``nc`` complex matrix at every site of a 2, 3 or 4 dimensional lattice."""

    def __init__(self, dimensions: Sequence[int], nc: int, values: object) -> None:
        self.dimensions = _dimensions(dimensions)
        self.nc = int(nc)
        if self.nc <= 0:
            raise ValueError("nc must be positive")
        array = np.array(values, dtype=complex)
        expected = (*self.dimensions, self.nc, self.nc)
        if array.shape != expected:
            raise ValueError(f"values have shape {array.shape}, expected {expected}")
        self.values = array

    @classmethod
    def filled(cls, dimensions: Sequence[int], nc: int, value: complex) -> SUNField:
        """Field with every matrix entry at every site set to ``value``."""
        dims = _dimensions(dimensions)
        return cls(dims, nc, np.full((*dims, nc, nc), value, dtype=complex))

    @classmethod
    def from_matrix(cls, dimensions: Sequence[int], matrix: object) -> SUNField:
        """Field with the same matrix at every site."""
        dims = _dimensions(dimensions)
        mat = np.asarray(matrix, dtype=complex)
        if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
            raise ValueError("matrix must be square")
        nc = mat.shape[0]
        return cls(dims, nc, np.broadcast_to(mat, (*dims, nc, nc)))

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    def _site(self, site: Sequence[int]) -> tuple[int, ...]:
        index = tuple(int(i) for i in site)
        if len(index) != self.rank:
            raise IndexError(f"site must have {self.rank} coordinates, got {len(index)}")
        for coordinate, extent in zip(index, self.dimensions):
            if not 0 <= coordinate < extent:
                raise IndexError(f"site {index} outside lattice {self.dimensions}")
        return index

    def __getitem__(self, site: Sequence[int]) -> np.ndarray:
        """The matrix at ``site``; changes to it change the field."""
        return self.values[self._site(site)]

    def __setitem__(self, site: Sequence[int], value: object) -> None:
        matrix = np.asarray(value, dtype=complex)
        if matrix.shape != (self.nc, self.nc):
            raise ValueError(f"expected a {self.nc}x{self.nc} matrix, got shape {matrix.shape}")
        self.values[self._site(site)] = matrix

    def __repr__(self) -> str:
        return f"SUNField(dimensions={self.dimensions}, nc={self.nc})"