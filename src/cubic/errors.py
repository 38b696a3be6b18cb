"""Exceptions raised by the cubic package.

All exceptions derive from :class:`CubicError`, which carries the exit code used by
the command line program. They are raised where the problem is detected and only
caught in :func:`cubic.cli.main`.

"""

from __future__ import annotations

__all__ = ["CubicError", "UsageError", "ParseError", "DomainError"]


class CubicError(Exception):
    """Base class of all errors of this package.

    Every error terminates a command line invocation with :attr:`exit_code` and
    without any output of roots.

    """

    exit_code: int = 1
    """Exit status of the command line program for this error."""


class UsageError(CubicError):
    """The command line was called with the wrong number of coefficients or with an
    unknown option."""


class ParseError(CubicError, ValueError):
    """A command line argument is not a valid real number literal."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"cannot parse {argument}")
        self.argument: str = argument
        """The offending argument as given on the command line."""


class DomainError(CubicError, ValueError):
    """The coefficients do not describe a cubic polynomial.

    Such cases include:

    - a vanishing leading coefficient, the polynomial is at most quadratic,
    - coefficients which are not finite numbers.

    """
