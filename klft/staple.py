"""Periodic neighbour lookup, plaquette staples and open boundaries for gauge fields."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from klft.gauge_field import GaugeField


def shift_site(
    site: Sequence[int], mu: int, step: int, dimensions: Sequence[int]
) -> tuple[int, ...]:
    """Return ``site`` moved by ``step`` along ``mu`` with periodic wrapping."""
    if len(site) != len(dimensions):
        raise ValueError("site and dimensions must have the same rank")
    if not 0 <= mu < len(dimensions):
        raise ValueError(f"direction {mu} outside 0..{len(dimensions) - 1}")
    shifted = [int(c) for c in site]
    shifted[mu] = (shifted[mu] + step) % int(dimensions[mu])
    return tuple(shifted)


def _dagger(matrix: np.ndarray) -> np.ndarray:
    return matrix.conj().T


def _check_direction(field: GaugeField, mu: int) -> int:
    mu = int(mu)
    if not 0 <= mu < field.rank:
        raise ValueError(f"direction {mu} outside 0..{field.rank - 1}")
    return mu


def staple(field: GaugeField, site: Sequence[int], mu: int) -> np.ndarray:
    """Sum of the staples around the link ``(site, mu)``.

    For every direction ``nu != mu`` the forward staple
    ``U(x+mu, nu) U(x+nu, mu)^dagger U(x, nu)^dagger`` and the backward staple
    ``U(x+mu-nu, nu)^dagger U(x-nu, mu)^dagger U(x-nu, nu)`` are added.
    """
    mu = _check_direction(field, mu)
    dims = field.dimensions
    x = tuple(int(c) for c in site)
    # Validates the site against the lattice.
    field[x, mu]
    total = np.zeros((field.nc, field.nc), dtype=complex)
    x_pmu = shift_site(x, mu, 1, dims)
    for nu in range(field.rank):
        if nu == mu:
            continue
        x_pnu = shift_site(x, nu, 1, dims)
        total += field[x_pmu, nu] @ _dagger(field[x_pnu, mu]) @ _dagger(field[x, nu])
    for nu in range(field.rank):
        if nu == mu:
            continue
        x_pmu_mnu = shift_site(x_pmu, nu, -1, dims)
        x_mnu = shift_site(x, nu, -1, dims)
        total += (
            _dagger(field[x_pmu_mnu, nu])
            @ _dagger(field[x_mnu, mu])
            @ field[x_mnu, nu]
        )
    return total


def open_bc(field: GaugeField, mu: int) -> None:
    """Cut the lattice open along ``mu``.

    Every link in direction ``mu`` that leaves the last slice of the lattice
    along ``mu`` has all its entries set to machine epsilon.
    """
    mu = _check_direction(field, mu)
    index: list[object] = [slice(None)] * field.rank
    index[mu] = field.dimensions[mu] - 1
    index.append(mu)
    field.links[tuple(index)] = complex(np.finfo(float).eps, 0.0)