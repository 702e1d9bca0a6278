import itertools

import numpy as np
import pytest

from klft.gauge_field import GaugeField
from klft.staple import open_bc, shift_site, staple


def _random_unitary(rng, nc):
    z = rng.normal(size=(nc, nc)) + 1j * rng.normal(size=(nc, nc))
    q, r = np.linalg.qr(z)
    d = np.diag(r)
    return q * (d / np.abs(d))


def _random_unitary_field(dims, nc, seed):
    rng = np.random.default_rng(seed)
    links = np.empty((*dims, len(dims), nc, nc), dtype=complex)
    for idx in itertools.product(*(range(d) for d in dims)):
        for mu in range(len(dims)):
            links[(*idx, mu)] = _random_unitary(rng, nc)
    return GaugeField(dims, nc, links)


def test_shift_site_wraps_forward_and_backward():
    dims = (4, 4, 4, 4)
    assert shift_site((0, 3, 3, 1), 1, 1, dims) == (0, 0, 3, 1)
    assert shift_site((0, 3, 3, 1), 0, -1, dims) == (3, 3, 3, 1)


@pytest.mark.parametrize("mu", [0, 1, 2])
def test_shift_site_round_trip(mu):
    dims = (3, 5, 2)
    for site in itertools.product(*(range(d) for d in dims)):
        assert shift_site(shift_site(site, mu, 1, dims), mu, -1, dims) == site


def test_shift_site_rejects_bad_direction():
    with pytest.raises(ValueError):
        shift_site((0, 0), 2, 1, (4, 4))
    with pytest.raises(ValueError):
        shift_site((0, 0, 0), 0, 1, (4, 4))


@pytest.mark.parametrize("dims", [(4, 4), (3, 4, 5), (2, 3, 2, 3)])
@pytest.mark.parametrize("nc", [1, 2, 3])
def test_identity_field_staple(dims, nc):
    field = GaugeField.from_matrix(dims, np.eye(nc))
    rank = len(dims)
    for mu in range(rank):
        result = staple(field, (0,) * rank, mu)
        np.testing.assert_allclose(result, 2 * (rank - 1) * np.eye(nc))


@pytest.mark.parametrize("dims,nc", [((4, 4), 2), ((3, 3, 3), 3), ((2, 3, 2, 2), 2)])
def test_staple_gauge_covariance(dims, nc):
    field = _random_unitary_field(dims, nc, seed=1234)
    rng = np.random.default_rng(99)
    sites = list(itertools.product(*(range(d) for d in dims)))
    g = {site: _random_unitary(rng, nc) for site in sites}
    transformed = field.copy()
    for site in sites:
        for mu in range(len(dims)):
            neighbour = shift_site(site, mu, 1, dims)
            transformed[site, mu] = g[site] @ field[site, mu] @ g[neighbour].conj().T
    for site in sites[:5]:
        for mu in range(len(dims)):
            before = staple(field, site, mu)
            after = staple(transformed, site, mu)
            neighbour = shift_site(site, mu, 1, dims)
            np.testing.assert_allclose(
                after, g[neighbour] @ before @ g[site].conj().T, atol=1e-12
            )
            np.testing.assert_allclose(
                (transformed[site, mu] @ after).diagonal().sum(),
                (field[site, mu] @ before).diagonal().sum(),
                atol=1e-12,
            )


def test_staple_leaves_field_unchanged():
    field = _random_unitary_field((3, 3, 3), 2, seed=7)
    before = field.links.copy()
    staple(field, (1, 2, 0), 2)
    np.testing.assert_array_equal(field.links, before)


def test_staple_rejects_bad_direction_and_site():
    field = GaugeField.from_matrix((4, 4), np.eye(2))
    with pytest.raises(ValueError):
        staple(field, (0, 0), 2)
    with pytest.raises(IndexError):
        staple(field, (4, 0), 0)


@pytest.mark.parametrize("dims", [(4, 3), (3, 4, 2), (2, 3, 4, 2)])
def test_open_bc_sets_boundary_links(dims):
    for mu in range(len(dims)):
        field = GaugeField.from_matrix(dims, np.eye(2))
        open_bc(field, mu)
        eps = np.finfo(float).eps
        for site in itertools.product(*(range(d) for d in dims)):
            for nu in range(len(dims)):
                link = field[site, nu]
                if nu == mu and site[mu] == dims[mu] - 1:
                    np.testing.assert_array_equal(link, np.full((2, 2), eps))
                else:
                    np.testing.assert_array_equal(link, np.eye(2))


def test_open_bc_rejects_bad_direction():
    field = GaugeField.from_matrix((4, 4, 4), np.eye(1))
    with pytest.raises(ValueError):
        open_bc(field, 3)