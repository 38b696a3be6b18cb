"""Testing module for the ``cubic`` command line program in :mod:`cubic.cli`."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pytest

import cubic
from cubic import ComplexNumber, ParseError, UsageError
from cubic.cli import (
    USAGE,
    format_root,
    main,
    parse_coefficient,
    parse_coefficients,
)


def _run(argv: list[str], capsys: pytest.CaptureFixture) -> tuple[int, str, str]:
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _parse_line(line: str) -> complex:
    """Inverse of :func:`format_root` for testing purposes."""
    if line.endswith(" i"):
        sign = -1.0 if " - " in line else 1.0
        real, imag = line[:-2].replace(" - ", " + ").split(" + ")
        return complex(float(real), sign * float(imag))
    return complex(float(line), 0.0)


@pytest.mark.parametrize(
    ["argument", "value"],
    [
        ("1", 1.0),
        ("-6", -6.0),
        ("+2.5", 2.5),
        ("-.5e-1", -0.05),
        ("1e3", 1000.0),
        ("3.", 3.0),
        ("  7", 7.0),
        # Like a scanner, trailing characters are ignored.
        ("1.5abc", 1.5),
        ("2e", 2.0),
        ("4,5", 4.0),
    ],
)
def test_parse_coefficient(argument: str, value: float) -> None:
    assert parse_coefficient(argument) == value


@pytest.mark.parametrize("argument", ["x", "", ".", "-", "e5", "inf", "nan", "--1"])
def test_parse_coefficient_fails(argument: str) -> None:
    with pytest.raises(ParseError) as err:
        parse_coefficient(argument)
    assert err.value.argument == argument
    assert str(err.value) == f"cannot parse {argument}"


def test_parse_coefficients() -> None:
    assert parse_coefficients(["1", "-6", "11", "-6"]) == (1.0, -6.0, 11.0, -6.0)

    with pytest.raises(UsageError):
        parse_coefficients(["1", "2", "3"])
    with pytest.raises(UsageError):
        parse_coefficients(["1", "2", "3", "4", "5"])

    # Errors are reported in argument order.
    with pytest.raises(ParseError) as err:
        parse_coefficients(["1", "a", "b", "2"])
    assert err.value.argument == "a"


@pytest.mark.parametrize(
    ["root", "line"],
    [
        (ComplexNumber(2.0, 0.0), "2"),
        (ComplexNumber(-1.0, -np.sqrt(3.0)), "-1 - 1.732050807568877 i"),
        (ComplexNumber(-1.0, np.sqrt(3.0)), "-1 + 1.732050807568877 i"),
        (ComplexNumber(0.1, -0.0), "0.1"),
        (ComplexNumber(1.0 / 3.0, 0.0), "0.3333333333333333"),
        (ComplexNumber(1e-20, 2.5e30), "1e-20 + 2.5e+30 i"),
    ],
)
def test_format_root(root: ComplexNumber, line: str) -> None:
    assert format_root(root) == line


def test_cube_roots_of_eight(capsys: pytest.CaptureFixture) -> None:
    """Golden output for x**3 = 8."""
    code, out, err = _run(["1", "0", "0", "-8"], capsys)
    assert code == 0
    assert err == ""
    assert out == "2\n-1 - 1.732050807568877 i\n-1 + 1.732050807568877 i\n"


def test_three_real_roots(capsys: pytest.CaptureFixture) -> None:
    """(x-1)(x-2)(x-3) gives three lines without imaginary parts."""
    code, out, _ = _run(["1", "-6", "11", "-6"], capsys)
    assert code == 0

    lines = out.splitlines()
    assert len(lines) == 3
    assert out.endswith("\n") and not out.endswith("\n\n")
    assert all(" i" not in line for line in lines)
    np.testing.assert_allclose(
        [float(line) for line in lines], [1.0, 3.0, 2.0], atol=1e-12, rtol=0.0
    )


def test_triple_zero_root(capsys: pytest.CaptureFixture) -> None:
    """Golden output for x**3 = 0, including the sign of the first zero."""
    code, out, _ = _run(["1", "0", "0", "0"], capsys)
    assert code == 0
    assert out == "-0\n0\n0\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["2", "-3", "0.5", "7"],
        ["-1e3", "1", "-1", "1"],
        ["0.5", "1e-3", "-2.5e2", "+4"],
        ["--", "-1", "-1", "-1", "-1"],
    ],
)
def test_output_are_roots(argv: list[str], capsys: pytest.CaptureFixture) -> None:
    """The printed values are the roots of the polynomial on the command line."""
    code, out, _ = _run(argv, capsys)
    assert code == 0

    c3, c2, c1, c0 = (float(a) for a in argv if a != "--")
    x = np.array([_parse_line(line) for line in out.splitlines()])
    assert x.shape == (3,)
    residual = np.abs(((c3 * x + c2) * x + c1) * x + c0)
    scale = np.abs(c3) * np.abs(x) ** 3 + np.abs(c0) + 1.0
    assert np.all(residual <= 1e-9 * scale)


def test_quadratic_is_rejected(capsys: pytest.CaptureFixture) -> None:
    code, out, err = _run(["0", "1", "2", "3"], capsys)
    assert code == 1
    assert out == ""
    assert err == "cubic: sorry buddy, that's a quadratic.\n"


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5"]])
def test_wrong_number_of_arguments(
    argv: list[str], capsys: pytest.CaptureFixture
) -> None:
    code, out, err = _run(argv, capsys)
    assert code == 1
    assert out == ""
    assert err == USAGE + "\n"


def test_unparsable_argument(capsys: pytest.CaptureFixture) -> None:
    code, out, err = _run(["1", "two", "three", "4"], capsys)
    assert code == 1
    assert out == ""
    assert err == "cubic: cannot parse two\n"

    # The count is checked before the values.
    code, out, err = _run(["one", "2", "3"], capsys)
    assert code == 1
    assert err == USAGE + "\n"


def test_non_finite_coefficient(capsys: pytest.CaptureFixture) -> None:
    """Overflowing literals are parsed, but rejected by the solver."""
    code, out, err = _run(["1", "1e999", "0", "0"], capsys)
    assert code == 1
    assert out == ""
    assert "not finite" in err


def test_unknown_option(capsys: pytest.CaptureFixture) -> None:
    code, out, err = _run(["--bogus", "1", "2", "3", "4"], capsys)
    assert code == 1
    assert out == ""
    assert "--bogus" in err
    assert USAGE in err


def test_verbose(capsys: pytest.CaptureFixture, caplog: pytest.LogCaptureFixture):
    """Logging goes to stderr, the roots stay alone on stdout."""
    code, out, _ = _run(["--verbose", "1", "0", "0", "-8"], capsys)
    assert code == 0
    assert out.count("\n") == 3
    assert "Parsed coefficients" in caplog.text
    assert "Depressed cubic" in caplog.text

    logging.getLogger("cubic").setLevel(logging.NOTSET)


def test_config_option(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """A configuration file given on the command line activates the timing logger."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cubic, "config", dict(cubic.config))

    cfg = tmp_path / "timing.cfg"
    cfg.write_text("[logging]\nactive: True\nsections: cli\n")

    with caplog.at_level(logging.INFO, logger="Timer"):
        code, out, _ = _run(["--config", str(cfg), "1", "0", "0", "-8"], capsys)
    assert code == 0
    assert out.count("\n") == 3
    assert "Calling parse_coefficients" in caplog.text
    assert "Finished print_roots" in caplog.text
    # The solver section is not active.
    assert "Calling solve" not in caplog.text


def test_missing_config_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    monkeypatch.setattr(cubic, "config", dict(cubic.config))
    missing = str(tmp_path / "missing.cfg")
    code, out, err = _run(["-c", missing, "1", "0", "0", "-8"], capsys)
    assert code == 1
    assert out == ""
    assert "missing.cfg" in err


def test_version(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exit_info:
        main(["--version"])
    assert exit_info.value.code == 0
    assert cubic.__version__ in capsys.readouterr().out
