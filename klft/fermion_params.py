"""Parameters of fermion actions and of the Dirac operator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class DiracParams:
    """Lattice extents, gamma matrices and hopping parameter of a Dirac operator."""

    dimensions: tuple[int, ...]
    gammas: np.ndarray
    gamma5: np.ndarray
    kappa: float

    def __post_init__(self) -> None:
        gammas = np.asarray(self.gammas, dtype=complex)
        gamma5 = np.asarray(self.gamma5, dtype=complex)
        if gamma5.ndim != 2 or gamma5.shape[0] != gamma5.shape[1]:
            raise ValueError("gamma5 must be a square matrix")
        if gammas.shape != (4, *gamma5.shape):
            raise ValueError("expected four gamma matrices matching gamma5")
        object.__setattr__(self, "dimensions", tuple(int(d) for d in self.dimensions))
        object.__setattr__(self, "gammas", gammas)
        object.__setattr__(self, "gamma5", gamma5)
        object.__setattr__(self, "kappa", float(self.kappa))

    @property
    def gamma_id(self) -> np.ndarray:
        """Identity matrix in the spinor representation."""
        return np.eye(self.gamma5.shape[0], dtype=complex)


@dataclass
class FermionParams:
    """Settings of a fermion monomial."""

    rank: int
    nc: int
    rep_dim: int
    kappa: float
    tol: float
    fermion_type: str = "Wilson"
    solver: str = ""

    def describe(self) -> str:
        lines = [
            "Fermion Parameter:",
            f"  Fermion Type: {self.fermion_type}",
            f"  Solver: {self.solver}",
            f"  Rank: {self.rank}",
            f"  Nc: {self.nc}",
            f"  RepDim: {self.rep_dim}",
            f"  Kappa: {self.kappa:f}",
            f"  Tolerance: {self.tol:f}",
        ]
        return "\n".join(lines) + "\n"


def _as_dimensions(dimensions: Sequence[int]) -> tuple[int, ...]:
    return tuple(int(d) for d in dimensions)