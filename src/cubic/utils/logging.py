""" Timing logger for the cubic package.

Logging of timings is controlled by the configuration file cubic.cfg, which should be
placed in the current working directory (where the python script or the command line
program is started). All related information is located in a section in the cfg-file
with heading logging; see sample file below.

By default, timing is switched off. It can be turned on by setting the keyword
'active' to True.

All decorated functions are classified as relevant for one of the following
categories

    all: Used to log all functions.
    solver: Validation and computation of the roots.
    cli: Parsing of the command line and printing of the roots.

Example logging section of cubic.cfg:

    [logging]
    # Activate logging. Without this, the rest of the section has no effect
    active: True
    # To log all functions, there is no need for more information.

    # To only log specific sections, use e.g.
    sections: solver
    # multiple sections are separated by commas:
    sections: solver, cli

The configuration is looked up whenever a decorated function is called, hence changes
to ``cubic.config`` (for instance by the ``--config`` option of the command line
program) take effect immediately.

"""
from __future__ import annotations

import functools
import logging
import time
from typing import Callable, Sequence

import cubic

__all__ = ["time_logger"]


TIMING_LOG_FILE = "CubicTimings.log"
"""Name of the file the timings are written to."""

logger = logging.getLogger(__name__)

t_logger = logging.getLogger("Timer")
t_logger.setLevel(logging.INFO)


def _active_sections() -> tuple[bool, list[str]]:
    """Read the logging section of the current configuration.

    Returns:
        A flag whether timing is active, and the list of active sections.

    """
    try:
        config = cubic.config["logging"]
        raw_sections = config.get("sections", "all")
        active_sections = [s.strip().lower() for s in raw_sections.split(",")]
        logger_is_active = config.getboolean("active", fallback=False)
    except KeyError:
        active_sections = ["all"]
        logger_is_active = False
    except ValueError:
        logger.warning(
            "Invalid value for 'active' in section [logging] of cubic.cfg. "
            "Timing stays off."
        )
        logger_is_active = False
    return logger_is_active, active_sections


def _ensure_handler() -> None:
    """Add the file handler to the timer logger, once timing is used."""
    if not t_logger.hasHandlers():
        time_handler = logging.FileHandler(TIMING_LOG_FILE)
        time_handler.setLevel(logging.INFO)
        time_formatter = logging.Formatter("%(message)s")
        time_handler.setFormatter(time_formatter)
        t_logger.addHandler(time_handler)


def time_logger(sections: Sequence[str]) -> Callable[[Callable], Callable]:
    """A decorator that measures ellapsed time for a function.

    Parameters:
        sections: Categories the decorated function belongs to.

    """

    # The double nested function is needed to allow decorators with arguments.
    def inner_func(func):
        @functools.wraps(func)
        def log_time(*args, **kwargs):
            logger_is_active, active_sections = _active_sections()
            if not logger_is_active:
                # Shortcut if logging is not activated.
                return func(*args, **kwargs)
            elif "all" in active_sections or any(
                [s in active_sections for s in sections]
            ):
                _ensure_handler()

                name = f"{func.__name__} in module {func.__module__}."

                t_logger.log(level=logging.INFO, msg=f"Calling {name}")

                start_time = time.perf_counter()
                value = func(*args, **kwargs)
                run_time = time.perf_counter() - start_time

                t_logger.log(
                    level=logging.INFO,
                    msg=f"Finished {name} Elapsed time: {run_time:.8f} s",
                )

                return value
            else:
                return func(*args, **kwargs)

        return log_time

    return inner_func
