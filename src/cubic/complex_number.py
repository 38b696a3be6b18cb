"""Minimal complex arithmetic for combining real cube roots with the cube roots of
unity.

Complex numbers are represented as pairs ``(real, imag)`` of double precision
values. Inside compiled code they are plain tuples of type
``UniTuple(float64, 2)``, on the Python side the named tuple :class:`ComplexNumber`
wraps the same pair.

Only the three operations needed by
:mod:`~cubic.cubic_polynomial` are provided: construction, multiplication and
addition. Values are never modified in place, every operation returns a new pair.

"""

from __future__ import annotations

from typing import NamedTuple

import numba as nb

from ._core import NUMBA_CACHE, NUMBA_FAST_MATH

__all__ = [
    "COMPLEX_TYPE",
    "ComplexNumber",
    "make_complex",
    "complex_times",
    "complex_plus",
]


COMPLEX_TYPE = nb.types.UniTuple(nb.f8, 2)
"""Numba type of a complex number ``(real, imag)`` in compiled functions."""


_COMPILE_KWARGS = dict(fastmath=NUMBA_FAST_MATH, cache=NUMBA_CACHE)
"""Keyword arguments for compiling functions in this module."""


@nb.njit(COMPLEX_TYPE(nb.f8, nb.f8), **_COMPILE_KWARGS)
def make_complex(real: float, imag: float) -> tuple[float, float]:
    """Construct the complex number ``real + imag i``."""
    return (real, imag)


@nb.njit(COMPLEX_TYPE(COMPLEX_TYPE, COMPLEX_TYPE), **_COMPILE_KWARGS)
def complex_times(
    a: tuple[float, float], b: tuple[float, float]
) -> tuple[float, float]:
    """Product of two complex numbers.

    .. math::

        (x + yi)(u + vi) = (xu - yv) + (xv + yu)i

    Parameters:
        a: First factor ``(x, y)``.
        b: Second factor ``(u, v)``.

    Returns:
        The product as a new pair.

    """
    return (a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])


@nb.njit(COMPLEX_TYPE(COMPLEX_TYPE, COMPLEX_TYPE), **_COMPILE_KWARGS)
def complex_plus(
    a: tuple[float, float], b: tuple[float, float]
) -> tuple[float, float]:
    """Sum of two complex numbers, :math:`(x + u) + (y + v)i`."""
    return (a[0] + b[0], a[1] + b[1])


class ComplexNumber(NamedTuple):
    """Immutable complex number returned as root by :mod:`~cubic.solver`.

    The arithmetic operators delegate to the compiled functions of this module, such
    that results are identical to the values computed inside the solver.

    Note:
        Being a tuple, instances compare and hash by their two components. The
        operators ``*`` and ``+`` are complex multiplication and addition, not tuple
        repetition and concatenation. Operands other than :class:`ComplexNumber`
        raise a :class:`TypeError`, since returning ``NotImplemented`` would let
        Python fall back to the tuple operations.

    """

    real: float
    """Real part."""

    imag: float
    """Imaginary part."""

    def _pair(self) -> tuple[float, float]:
        # Compiled signatures expect floats, not integers.
        return (float(self.real), float(self.imag))

    def __mul__(self, other: object) -> ComplexNumber:  # type: ignore[override]
        if not isinstance(other, ComplexNumber):
            raise TypeError(
                f"cannot multiply ComplexNumber and {type(other).__name__}"
            )
        return ComplexNumber(*complex_times(self._pair(), other._pair()))

    def __add__(self, other: object) -> ComplexNumber:  # type: ignore[override]
        if not isinstance(other, ComplexNumber):
            raise TypeError(f"cannot add ComplexNumber and {type(other).__name__}")
        return ComplexNumber(*complex_plus(self._pair(), other._pair()))

    # Both operations are commutative.
    __rmul__ = __mul__
    __radd__ = __add__

    @property
    def is_real(self) -> bool:
        """True if the imaginary part is exactly zero."""
        return self.imag == 0.0

    def to_complex(self) -> complex:
        """Convert to the builtin :class:`complex`."""
        return complex(self.real, self.imag)
