import numpy as np
import pytest

from klft.spinor import Spinor, apply_gamma, apply_gamma_right

I = 1j

# Chiral-basis Euclidean gamma matrices with small exact entries.
SIGMA = [
    np.array([[0, 1], [1, 0]], dtype=complex),
    np.array([[0, -I], [I, 0]], dtype=complex),
    np.array([[1, 0], [0, -1]], dtype=complex),
]
ZERO2 = np.zeros((2, 2), dtype=complex)
ID2 = np.eye(2, dtype=complex)


def _block(a, b, c, d):
    return np.block([[a, b], [c, d]])


GAMMA0 = _block(ZERO2, ID2, ID2, ZERO2)
GAMMA1 = _block(ZERO2, -I * SIGMA[0], I * SIGMA[0], ZERO2)
GAMMA2 = _block(ZERO2, -I * SIGMA[1], I * SIGMA[1], ZERO2)
GAMMA3 = _block(ZERO2, -I * SIGMA[2], I * SIGMA[2], ZERO2)
GAMMA5 = GAMMA0 @ GAMMA1 @ GAMMA2 @ GAMMA3


def _indexed_spinor():
    s = Spinor.zeros(3, 4)
    for i in range(3):
        for j in range(4):
            s[i, j] = complex(i * 4 + j, 0.0)
    return s


def test_zero_times_one_spinor_is_zero():
    assert 0 * Spinor.ones(3, 4) == Spinor.zeros(3, 4)


def test_difference_with_itself_is_zero():
    ospinor = Spinor.ones(3, 4)
    assert Spinor.zeros(3, 4) == ospinor - ospinor


def test_scalar_multiplication_matches_addition():
    ospinor = Spinor.ones(3, 4)
    assert 2 * ospinor == ospinor + ospinor
    assert ospinor * 2.0 == ospinor + ospinor


def test_gamma5_equals_product_of_gammas_on_spinor():
    s = _indexed_spinor()
    lhs = apply_gamma(GAMMA5, s)
    rhs = apply_gamma(
        GAMMA0, apply_gamma(GAMMA1, apply_gamma(GAMMA2, apply_gamma(GAMMA3, s)))
    )
    assert lhs == rhs


def test_gamma_right_matches_transposed_left():
    s = _indexed_spinor()
    assert np.allclose(
        apply_gamma(GAMMA2, s).data, apply_gamma_right(s, GAMMA2.T).data
    )


def test_identity_gamma_leaves_spinor_unchanged():
    s = _indexed_spinor()
    assert apply_gamma_right(s, np.eye(4)) == s
    assert apply_gamma(np.eye(4), s) == s


def test_gamma_of_wrong_size_raises():
    with pytest.raises(ValueError):
        apply_gamma(np.eye(3), Spinor.ones(3, 4))


def test_colour_matrix_from_left_and_its_inverse():
    rng = np.random.default_rng(7)
    s = Spinor.random(3, 4, rng, 0.0, 1.0)
    q, _ = np.linalg.qr(rng.normal(size=(3, 3)) + 1j * rng.normal(size=(3, 3)))
    back = q.conj().T * (q * s)
    assert np.allclose(back.data, s.data)


def test_identity_link_keeps_spinor():
    s = _indexed_spinor()
    assert np.eye(3) * s == s
    assert s * np.eye(3) == s


def test_right_link_equals_left_transposed_link():
    rng = np.random.default_rng(3)
    s = Spinor.random(2, 4, rng, 0.0, 1.0)
    u = rng.normal(size=(2, 2)) + 1j * rng.normal(size=(2, 2))
    assert np.allclose((s * u).data, (u.T * s).data)


def test_spinor_product_trace_is_inner_product():
    rng = np.random.default_rng(11)
    a = Spinor.random(3, 4, rng, 0.0, 1.0)
    b = Spinor.random(3, 4, rng, 0.0, 1.0)
    matrix = a * b.conj()
    assert matrix.shape == (3, 3)
    assert np.isclose(matrix.diagonal().sum(), b.inner(a))


def test_sqnorm_of_ones():
    assert Spinor.ones(3, 4).sqnorm() == 12.0


def test_sqnorm_equals_self_inner_product():
    rng = np.random.default_rng(5)
    s = Spinor.random(3, 4, rng, 0.0, 1.0 / 1.41)
    assert np.isclose(s.sqnorm(), s.inner(s).real)
    assert abs(s.inner(s).imag) < 1e-12


def test_conj_is_involution():
    rng = np.random.default_rng(2)
    s = Spinor.random(2, 4, rng, 0.0, 1.0)
    assert s.conj().conj() == s
    assert np.allclose(s.conj().data, np.conj(s.data))


def test_random_is_reproducible_with_seed():
    a = Spinor.random(3, 4, np.random.default_rng(1234), 0.0, 1.0)
    b = Spinor.random(3, 4, np.random.default_rng(1234), 0.0, 1.0)
    assert a == b
    assert a.shape == (3, 4)


def test_format_lists_components():
    text = Spinor.ones(1, 2).format("S")
    assert text.startswith("S:\n  Color 0:\n")
    assert "    [1] = ( 1.00000000000000000000,  0.00000000000000000000 i)" in text


def test_multiplying_by_string_raises():
    with pytest.raises(TypeError):
        Spinor.ones(2, 4) * "x"


def test_adding_mismatched_shapes_raises():
    with pytest.raises(ValueError):
        Spinor.ones(2, 4) + Spinor.ones(3, 4)


def test_one_dimensional_data_rejected():
    with pytest.raises(ValueError):
        Spinor([1.0, 2.0])


def test_equality_with_other_type_is_false():
    assert (Spinor.ones(1, 1) == 1.0) is False