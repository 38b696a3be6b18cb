"""Python interface to the compiled cubic solver.

This module validates the coefficients of a cubic polynomial

.. math::
    c_3 x^3 + c_2 x^2 + c_1 x + c_0 = 0,

normalizes them and calls :func:`~cubic.cubic_polynomial.calculate_roots`.
The roots are returned as :class:`~cubic.complex_number.ComplexNumber`, in the order
produced by the formulas of the respective branch.

Example:

    >>> import cubic
    >>> [round(r.real, 12) for r in cubic.solve_cubic(1.0, -6.0, 11.0, -6.0)]
    [1.0, 3.0, 2.0]

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import IntEnum

from .complex_number import ComplexNumber
from .cubic_polynomial import (
    calculate_roots,
    discriminant,
    get_a,
    get_b,
    get_root_case,
    normalize,
)
from .errors import DomainError
from .utils.logging import time_logger

__all__ = ["RootCase", "CubicRoots", "solve", "solve_cubic"]

logger = logging.getLogger(__name__)

module_sections = ["solver"]


class RootCase(IntEnum):
    """Nature of the roots, as decided by the sign of the discriminant
    :math:`t = b^2/4 + a^3/27` of the depressed cubic.

    The values coincide with :func:`~cubic.cubic_polynomial.get_root_case`.

    """

    ONE_REAL = 1
    """:math:`t > 0`: One real root and two complex conjugate roots."""

    MULTIPLE_REAL = 2
    """:math:`t = 0`: Real roots, at least two of them coincide."""

    THREE_REAL = 3
    """:math:`t < 0`: Three distinct real roots."""


@dataclass(frozen=True)
class CubicRoots:
    """Result of :func:`solve`, containing the roots and the intermediate quantities
    of the computation."""

    roots: tuple[ComplexNumber, ComplexNumber, ComplexNumber]
    """The three roots, in the order of the formulas."""

    a: float
    """Linear coefficient of the depressed cubic."""

    b: float
    """Constant coefficient of the depressed cubic."""

    t: float
    """Discriminant-like quantity :math:`b^2/4 + a^3/27`."""

    case: RootCase
    """Nature of the roots."""

    def __iter__(self):
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def __getitem__(self, index: int) -> ComplexNumber:
        return self.roots[index]


def _validate(c3: float, c2: float, c1: float, c0: float) -> None:
    """Raise a :class:`~cubic.errors.DomainError` if the coefficients do not describe
    a cubic polynomial."""
    for name, value in zip(("c3", "c2", "c1", "c0"), (c3, c2, c1, c0)):
        if not math.isfinite(value):
            raise DomainError(f"coefficient {name} is not finite: {value}")
    if c3 == 0:
        raise DomainError("sorry buddy, that's a quadratic.")


@time_logger(sections=module_sections)
def solve(c3: float, c2: float, c1: float, c0: float) -> CubicRoots:
    """Calculate the three roots of :math:`c_3 x^3 + c_2 x^2 + c_1 x + c_0`.

    Parameters:
        c3: Coefficient of the cubic term.
        c2: Coefficient of the quadratic term.
        c1: Coefficient of the linear term.
        c0: Coefficient of the constant term.

    Raises:
        DomainError: If ``c3`` is zero or any coefficient is not finite.

    Returns:
        The roots together with the depressed coefficients, the discriminant and the
        case of the roots.

    """
    c3, c2, c1, c0 = float(c3), float(c2), float(c1), float(c0)
    _validate(c3, c2, c1, c0)

    p, q, r = normalize(c3, c2, c1, c0)
    a = get_a(p, q)
    b = get_b(p, q, r)
    t = discriminant(a, b)
    case = RootCase(get_root_case(p, q, r))

    logger.debug(f"Normalized coefficients: p={p!r}, q={q!r}, r={r!r}")
    logger.debug(f"Depressed cubic: a={a!r}, b={b!r}, t={t!r} ({case.name})")

    values = calculate_roots(p, q, r)
    roots = tuple(ComplexNumber(float(x), float(y)) for x, y in values)

    return CubicRoots(roots=roots, a=a, b=b, t=t, case=case)  # type: ignore[arg-type]


def solve_cubic(
    c3: float, c2: float, c1: float, c0: float
) -> tuple[ComplexNumber, ComplexNumber, ComplexNumber]:
    """Shortcut for :func:`solve` returning only the three roots."""
    return solve(c3, c2, c1, c0).roots
