"""Colour-spin vectors and their algebra with gauge links and gamma matrices."""

from __future__ import annotations

import numbers
from collections.abc import Iterator

import numpy as np


def _as_square(matrix: object, size: int, what: str) -> np.ndarray:
    array = np.asarray(matrix, dtype=complex)
    if array.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} {what}, got shape {array.shape}")
    return array


class Spinor:
    """A field value with ``nc`` colour and ``nd`` Dirac components.

    Multiplication follows these rules:

    * ``scalar * s`` and ``s * scalar`` scale every component;
    * ``U * s`` applies a colour matrix ``U`` from the left;
    * ``s * U`` applies a colour matrix from the right;
    * ``a * b`` for two spinors gives the colour matrix
      ``sum_k a[i, k] * b[j, k]`` with no implicit conjugation.

    Gamma matrices act on the Dirac index through :func:`apply_gamma`
    and :func:`apply_gamma_right`.
    """

    # Let numpy hand binary operations over to this class.
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: object) -> None:
        array = np.array(data, dtype=complex)
        if array.ndim != 2:
            raise ValueError("spinor data must be a two-dimensional (colour, dirac) array")
        self.data = array

    @classmethod
    def zeros(cls, nc: int, nd: int) -> Spinor:
        """Spinor with every component zero."""
        return cls(np.zeros((nc, nd), dtype=complex))

    @classmethod
    def ones(cls, nc: int, nd: int) -> Spinor:
        """Spinor with every component one."""
        return cls(np.ones((nc, nd), dtype=complex))

    @classmethod
    def random(
        cls, nc: int, nd: int, rng: np.random.Generator, mean: float, var: float
    ) -> Spinor:
        """Spinor whose real and imaginary parts are drawn from ``normal(mean, var)``."""
        draws = rng.normal(mean, var, size=(nc, nd, 2))
        return cls(draws[..., 0] + 1j * draws[..., 1])

    @property
    def nc(self) -> int:
        return self.data.shape[0]

    @property
    def nd(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.data.shape  # type: ignore[return-value]

    def _check_same_shape(self, other: Spinor) -> None:
        if self.shape != other.shape:
            raise ValueError(f"spinor shapes differ: {self.shape} and {other.shape}")

    def __add__(self, other: object) -> Spinor:
        if not isinstance(other, Spinor):
            return NotImplemented
        self._check_same_shape(other)
        return Spinor(self.data + other.data)

    def __sub__(self, other: object) -> Spinor:
        if not isinstance(other, Spinor):
            return NotImplemented
        self._check_same_shape(other)
        return Spinor(self.data - other.data)

    def __neg__(self) -> Spinor:
        return Spinor(-self.data)

    def __mul__(self, other: object) -> Spinor | np.ndarray:
        if isinstance(other, Spinor):
            self._check_same_shape(other)
            return self.data @ other.data.T
        if isinstance(other, numbers.Number):
            return Spinor(self.data * complex(other))  # type: ignore[arg-type]
        if isinstance(other, (np.ndarray, list, tuple)):
            link = _as_square(other, self.nc, "colour matrix")
            return Spinor(link.T @ self.data)
        return NotImplemented

    def __rmul__(self, other: object) -> Spinor:
        if isinstance(other, numbers.Number):
            return Spinor(complex(other) * self.data)  # type: ignore[arg-type]
        if isinstance(other, (np.ndarray, list, tuple)):
            link = _as_square(other, self.nc, "colour matrix")
            return Spinor(link @ self.data)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spinor):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    def __getitem__(self, index: tuple[int, int]) -> complex:
        return complex(self.data[index])

    def __setitem__(self, index: tuple[int, int], value: complex) -> None:
        self.data[index] = value

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Spinor({self.data.tolist()!r})"

    def conj(self) -> Spinor:
        """Component-wise complex conjugate."""
        return Spinor(np.conj(self.data))

    def sqnorm(self) -> float:
        """Sum of the squared moduli of all components."""
        return float(np.sum(self.data.real**2 + self.data.imag**2))

    def inner(self, other: Spinor) -> complex:
        """The product ``self^dagger other``."""
        self._check_same_shape(other)
        return complex(np.vdot(self.data, other.data))

    def format(self, name: str = "Spinor") -> str:
        """Multi-line listing of all components, colour by colour."""
        lines = [f"{name}:"]
        for c, row in enumerate(self.data):
            lines.append(f"  Color {c}:")
            for d, value in enumerate(row):
                lines.append(f"    [{d}] = ({value.real: .20f}, {value.imag: .20f} i)")
        return "\n".join(lines) + "\n"


def apply_gamma(gamma: object, spinor: Spinor) -> Spinor:
    """Apply a gamma matrix to the Dirac index: ``c[i, j] = sum_k g[j, k] s[i, k]``."""
    matrix = _as_square(gamma, spinor.nd, "gamma matrix")
    return Spinor(spinor.data @ matrix.T)


def apply_gamma_right(spinor: Spinor, gamma: object) -> Spinor:
    """Multiply by a gamma matrix from the right: ``c[i, j] = sum_k s[i, k] g[k, j]``."""
    matrix = _as_square(gamma, spinor.nd, "gamma matrix")
    return Spinor(spinor.data @ matrix)