"""Closed-form solution of real cubic polynomials, compiled with numba.

The base formulation of the cubic polynomial is

.. math::
    c_3 x^3 + c_2 x^2 + c_1 x + c_0 = 0, \\quad c_3 \\neq 0,

which is normalized to

.. math::
    x^3 + p x^2 + q x + r = 0,

and reduced (depressed) by the substitution :math:`x = x' - p/3` to

.. math::
    x'^3 + a x' + b = 0.

The sign of :math:`t = b^2/4 + a^3/27` decides the branch:

- :math:`t < 0`: three distinct real roots, computed with the trigonometric method
  (:func:`three_real_roots`).
- :math:`t \\geq 0`: Cardano's formula with real cube roots and the primitive cube
  roots of unity (:func:`cardano_roots`). This yields one real root and a pair of
  complex conjugate roots, or real roots of which at least two coincide for
  :math:`t = 0`.

All three roots are always returned, as an array with ``shape=(3, 2)`` where each
row contains ``(real, imag)`` of one root. The order of the rows is the order in
which the formulas produce them. No sorting is applied.

Note:
    The implementation is valid for real coefficients only. Numerical conditioning
    is that of a straightforward evaluation in double precision.

See also:

    - https://en.wikipedia.org/wiki/Cubic_equation
    - CRC Standard Mathematical Tables, 27th edition, p. 9

"""

from __future__ import annotations

import numba as nb
import numpy as np

from ._core import NUMBA_CACHE, NUMBA_FAST_MATH, OMEGA, OMEGA_SQUARED
from .complex_number import complex_plus, complex_times, make_complex

__all__ = [
    "normalize",
    "get_a",
    "get_b",
    "discriminant",
    "get_root_case",
    "signed_cube_root",
    "three_real_roots",
    "cardano_roots",
    "calculate_roots",
]


_COMPILE_KWARGS = dict(fastmath=NUMBA_FAST_MATH, cache=NUMBA_CACHE)
"""Keyword arguments for compiling functions in this module."""


_COMPILE_DECORATOR = nb.njit
"""Decorator for compiling functions in this module."""


@_COMPILE_DECORATOR(
    nb.types.UniTuple(nb.f8, 3)(nb.f8, nb.f8, nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def normalize(c3: float, c2: float, c1: float, c0: float) -> tuple[float, ...]:
    """Divide the polynomial by its leading coefficient.

    Parameters:
        c3: Coefficient of the cubic term. Must not be zero.
        c2: Coefficient of the quadratic term.
        c1: Coefficient of the linear term.
        c0: Coefficient of the constant term.

    Returns:
        The coefficients ``(p, q, r)`` of the normalized polynomial
        :math:`x^3 + p x^2 + q x + r`.

    """
    return (c2 / c3, c1 / c3, c0 / c3)


@_COMPILE_DECORATOR(
    nb.f8(nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def get_a(p: float, q: float) -> float:
    """Calculate the linear coefficient of the depressed cubic.

    .. math::

        a = q - \\frac{p^2}{3}

    Parameters:
        p: Coefficient of the quadratic term in the normalized polynomial.
        q: Coefficient of the linear term in the normalized polynomial.

    Returns:
        The coefficient a.

    """
    return q - p * p / 3.0


@_COMPILE_DECORATOR(
    nb.f8(nb.f8, nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def get_b(p: float, q: float, r: float) -> float:
    """Calculate the constant coefficient of the depressed cubic.

    .. math::

        b = \\frac{2 p^3 - 9 p q + 27 r}{27}

    Parameters:
        p: Coefficient of the quadratic term in the normalized polynomial.
        q: Coefficient of the linear term in the normalized polynomial.
        r: Coefficient of the constant term in the normalized polynomial.

    Returns:
        The coefficient b.

    """
    return (2.0 * p * p * p - 9.0 * p * q + 27.0 * r) / 27.0


@_COMPILE_DECORATOR(
    nb.f8(nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def discriminant(a: float, b: float) -> float:
    """Calculate the quantity deciding the nature of the roots.

    .. math::

        t = \\frac{b^2}{4} + \\frac{a^3}{27}

    Note:
        This is the classical discriminant of the depressed cubic scaled by
        :math:`-1/108`. Hence negative values indicate three distinct real roots.

    Parameters:
        a: Linear coefficient of the depressed cubic.
        b: Constant coefficient of the depressed cubic.

    Returns:
        The quantity t.

    """
    return b * b / 4.0 + a * a * a / 27.0


@_COMPILE_DECORATOR(
    nb.i4(nb.f8, nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def get_root_case(p: float, q: float, r: float) -> int:
    """Determine the case for the roots of the normalized cubic polynomial.

    The cases are:

        - 3: Three distinct real roots.
        - 2: Only real roots, at least two of them coincide.
        - 1: One real root and two complex conjugate roots.

    Parameters:
        p: Coefficient of the quadratic term in the normalized polynomial.
        q: Coefficient of the linear term in the normalized polynomial.
        r: Coefficient of the constant term in the normalized polynomial.

    Returns:
        An integer indicating the case (1, 2 or 3).

    """
    t = discriminant(get_a(p, q), get_b(p, q, r))

    if t < 0.0:
        return 3
    elif t > 0.0:
        return 1
    else:
        return 2


@_COMPILE_DECORATOR(
    nb.f8(nb.f8),
    **_COMPILE_KWARGS,
)
def signed_cube_root(x: float) -> float:
    """Real cube root of a real number of any sign.

    .. math::

        \\sqrt[3]{x} = \\operatorname{sign}(x) \\lvert x \\rvert^{1/3}

    The fractional power is only ever applied to the non-negative magnitude, since
    powers of negative bases with fractional exponents are not real valued.

    """
    return np.sign(x) * np.abs(x) ** (1.0 / 3.0)


@_COMPILE_DECORATOR(
    nb.f8[:, :](nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def three_real_roots(a: float, b: float) -> np.ndarray:
    """Compute the three distinct real roots of the depressed cubic using the
    trigonometric method.

    Valid only if :func:`discriminant` is negative, which implies ``a < 0``.

    See also:
        https://en.wikipedia.org/wiki/
        Cubic_equation#Trigonometric_and_hyperbolic_solutions

    Parameters:
        a: Linear coefficient of the depressed cubic.
        b: Constant coefficient of the depressed cubic.

    Returns:
        A numpy array with ``shape=(3, 2)`` containing the roots of the depressed
        cubic as rows ``(real, 0.)``, for the angle offsets 0, 2 pi and 4 pi in this
        order.

    """
    # -a > 0 and hence rho > 0
    rho = (-a) ** 1.5 / np.sqrt(27.0)
    # rounding can push the ratio marginally out of [-1, 1]
    c = min(max(b / rho / 2.0, -1.0), 1.0)
    theta = np.arccos(c)
    rho = -2.0 * rho ** (1.0 / 3.0)

    roots = np.zeros((3, 2))
    roots[0, 0] = np.cos(theta / 3.0) * rho
    roots[1, 0] = np.cos((2.0 * np.pi + theta) / 3.0) * rho
    roots[2, 0] = np.cos((4.0 * np.pi + theta) / 3.0) * rho
    return roots


@_COMPILE_DECORATOR(
    nb.f8[:, :](nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def cardano_roots(b: float, t: float) -> np.ndarray:
    """Compute the roots of the depressed cubic with Cardano's formula.

    Valid if :func:`discriminant` is non-negative. The real cube roots

    .. math::

        l = -\\sqrt[3]{\\frac{b}{2} + \\sqrt{t}}, \\quad
        m = -\\sqrt[3]{\\frac{b}{2} - \\sqrt{t}}

    are combined with the primitive cube roots of unity :math:`\\omega` and
    :math:`\\omega^2`:

    .. math::

        x_1 = l + m, \\quad
        x_2 = \\omega l + \\omega^2 m, \\quad
        x_3 = \\omega^2 l + \\omega m.

    Parameters:
        b: Constant coefficient of the depressed cubic.
        t: Value of :func:`discriminant` for the depressed cubic.

    Returns:
        A numpy array with ``shape=(3, 2)`` containing the roots
        :math:`x_1, x_2, x_3` of the depressed cubic as rows ``(real, imag)``.
        The first root is always real.

    """
    t = np.sqrt(t)

    l = -signed_cube_root(b / 2.0 + t)  # noqa: E741
    m = -signed_cube_root(b / 2.0 - t)

    cl = make_complex(l, 0.0)
    cm = make_complex(m, 0.0)

    x2 = complex_plus(complex_times(OMEGA, cl), complex_times(OMEGA_SQUARED, cm))
    x3 = complex_plus(complex_times(OMEGA_SQUARED, cl), complex_times(OMEGA, cm))

    roots = np.zeros((3, 2))
    roots[0, 0] = l + m
    roots[1, 0] = x2[0]
    roots[1, 1] = x2[1]
    roots[2, 0] = x3[0]
    roots[2, 1] = x3[1]
    return roots


@_COMPILE_DECORATOR(
    nb.f8[:, :](nb.f8, nb.f8, nb.f8),
    **_COMPILE_KWARGS,
)
def calculate_roots(p: float, q: float, r: float) -> np.ndarray:
    """Calculate the three roots of a normalized cubic polynomial represented by its
    coefficients :math:`p, q, r`.

    Parameters:
        p: Coefficient of the quadratic term in the normalized polynomial.
        q: Coefficient of the linear term in the normalized polynomial.
        r: Coefficient of the constant term in the normalized polynomial.

    Returns:
        A numpy array with ``shape=(3, 2)``, one root ``(real, imag)`` per row.

    """
    a = get_a(p, q)
    b = get_b(p, q, r)
    t = discriminant(a, b)

    if t < 0.0:
        roots = three_real_roots(a, b)
    else:
        roots = cardano_roots(b, t)

    # Reverting the change of variable x = x' - p/3.
    shift = p / 3.0
    for i in range(3):
        roots[i, 0] -= shift
    return roots
