"""The ``cubic`` command line program.

Usage::

    cubic [--verbose] [--config FILE] c3 c2 c1 c0

Prints the three roots of ``c3 x^3 + c2 x^2 + c1 x + c0 = 0``, one per line. Real
parts are printed with 16 significant digits, followed by ``+ y i`` or ``- y i`` if
the imaginary part is not zero.

Coefficients are read like the ``%lf`` conversion of ``scanf`` reads them: the
longest prefix forming a decimal number is used, and the remainder of the argument
is ignored. Negative coefficients need no special treatment on the command line,
``cubic 1 -6 11 -6`` works as expected.

Every error terminates the program with exit code 1 and a message on stderr, before
any root is printed.

"""

from __future__ import annotations

import argparse
import configparser
import logging
import re
import sys
from typing import Optional, Sequence, TextIO

import cubic

from .complex_number import ComplexNumber
from .errors import CubicError, ParseError, UsageError
from .solver import solve_cubic
from .utils.logging import time_logger

__all__ = [
    "NUMBER_PATTERN",
    "USAGE",
    "build_parser",
    "format_root",
    "load_config",
    "main",
    "parse_coefficient",
    "parse_coefficients",
]

logger = logging.getLogger(__name__)

module_sections = ["cli"]

NUMBER_PATTERN = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
"""Decimal floating point literal: optional sign, digits with an optional decimal
point and fraction, and an optional exponent. Leading white space is skipped."""

USAGE = "syntax: cubic c3 c2 c1 c0\nIndicate missing terms with zeroes."
"""Message printed if the number of coefficients is wrong."""

NUM_COEFFICIENTS = 4


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser raising :class:`~cubic.errors.UsageError` instead of exiting
    with status 2."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Create the parser of the command line.

    Coefficients are collected as strings and converted by :func:`parse_coefficients`,
    such that the count is checked before any of them is parsed.

    """
    parser = _ArgumentParser(
        prog="cubic",
        usage="%(prog)s [--verbose] [--config FILE] c3 c2 c1 c0",
        description=(
            "Closed-form roots of the cubic equation c3 x^3 + c2 x^2 + c1 x + c0 = 0."
        ),
        epilog="Indicate missing terms with zeroes.",
    )
    parser.add_argument(
        "coefficients",
        nargs="*",
        metavar="c",
        help="Coefficients c3 c2 c1 c0, leading coefficient first.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log the steps of the computation to stderr.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help=(
            "Configuration file read in addition to cubic.cfg in the working "
            "directory."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {cubic.__version__}",
    )
    return parser


def _mark_positionals(argv: Sequence[str]) -> list[str]:
    """Insert ``--`` in front of the first argument which is a number literal.

    Without the marker, argparse may take negative numbers like ``-1e3`` for options.
    As a consequence, options have to precede the coefficients.

    """
    argv = list(argv)
    for i, arg in enumerate(argv):
        if arg == "--":
            break
        if NUMBER_PATTERN.fullmatch(arg.rstrip()):
            return argv[:i] + ["--"] + argv[i:]
    return argv


def parse_coefficient(argument: str) -> float:
    """Convert a single command line argument to a float.

    Parameters:
        argument: The argument as given on the command line.

    Raises:
        ParseError: If the argument does not start with a number literal.

    Returns:
        The value of the longest number literal at the start of ``argument``.

    """
    match = NUMBER_PATTERN.match(argument)
    if match is None:
        raise ParseError(argument)
    return float(match.group())


@time_logger(sections=module_sections)
def parse_coefficients(arguments: Sequence[str]) -> tuple[float, float, float, float]:
    """Convert the positional arguments to the four coefficients.

    Parameters:
        arguments: Positional command line arguments.

    Raises:
        UsageError: If not exactly four arguments are given.
        ParseError: For the first argument which is no number.

    Returns:
        The coefficients ``(c3, c2, c1, c0)``.

    """
    if len(arguments) != NUM_COEFFICIENTS:
        raise UsageError(USAGE)
    c3, c2, c1, c0 = (parse_coefficient(arg) for arg in arguments)
    return c3, c2, c1, c0


def format_root(root: ComplexNumber) -> str:
    """Format a root as ``x``, ``x + y i`` or ``x - y i``.

    The imaginary part is only printed if it is not exactly zero.

    """
    line = f"{root.real:.16g}"
    if root.imag != 0:
        sign = " - " if root.imag < 0 else " + "
        line += f"{sign}{abs(root.imag):.16g} i"
    return line


@time_logger(sections=module_sections)
def print_roots(roots: Sequence[ComplexNumber], stream: TextIO) -> None:
    """Write one line per root to ``stream``."""
    stream.write("".join(f"{format_root(root)}\n" for root in roots))


def load_config(path: str) -> None:
    """Merge the sections of a configuration file into :data:`cubic.config`.

    Raises:
        UsageError: If the file can not be read or parsed.

    """
    cfg = configparser.ConfigParser()
    try:
        found = cfg.read(path)
    except configparser.Error as err:
        raise UsageError(f"cannot read configuration file {path}: {err}") from err
    if not found:
        raise UsageError(f"cannot read configuration file {path}")
    cubic.config.update(dict(cfg))
    logger.debug(f"Read configuration file {path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the ``cubic`` console script.

    Parameters:
        argv: Command line arguments without the program name. Defaults to
            ``sys.argv[1:]``.

    Returns:
        The exit status, 0 on success and 1 on any error.

    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = build_parser().parse_args(_mark_positionals(argv))
        if args.verbose:
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("cubic").setLevel(logging.DEBUG)
        if args.config is not None:
            load_config(args.config)

        coefficients = parse_coefficients(args.coefficients)
        logger.debug(f"Parsed coefficients c3, c2, c1, c0 = {coefficients}")
        roots = solve_cubic(*coefficients)
    except UsageError as err:
        logger.info(f"Invalid usage: {err}")
        if str(err) != USAGE:
            print(f"cubic: {err}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return err.exit_code
    except CubicError as err:
        logger.info(f"Aborted: {err}")
        print(f"cubic: {err}", file=sys.stderr)
        return err.exit_code

    print_roots(roots, sys.stdout)
    return 0
