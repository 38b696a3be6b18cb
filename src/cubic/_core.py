"""This private module contains central settings and constants for the entire
package.

Changes here should be done with much care.

"""

from __future__ import annotations

import logging

import numpy as np

import cubic

__all__ = [
    "NUMBA_CACHE",
    "NUMBA_FAST_MATH",
    "OMEGA",
    "OMEGA_SQUARED",
]

logger = logging.getLogger(__name__)


def _read_flag(section: str, key: str, default: bool) -> bool:
    """Read a boolean flag from the configuration read at import of the package.

    Parameters:
        section: Name of the section in ``cubic.cfg``.
        key: Name of the flag in the section.
        default: Value returned if the section or the key is not configured, or if
            the configured value is not a boolean.

    Returns:
        The configured flag, or ``default``.

    """
    try:
        return cubic.config[section].getboolean(key, fallback=default)
    except KeyError:
        return default
    except ValueError:
        logger.warning(
            f"Invalid value for '{key}' in section [{section}] of cubic.cfg. "
            f"Using default {default}."
        )
        return default


NUMBA_CACHE: bool = _read_flag("numba", "cache", True)
"""Flag to instruct the numba compiler to cache (!and use cached!) functions.

This might cause some confusion in the developing process due to some lack in numba's
caching functionality.
(Does not recognize changes in nested functions and hence does not trigger
re-compilation).

Can be switched off with ``cache: False`` in the ``[numba]`` section of
``cubic.cfg``.

See Also:
    https://numba.readthedocs.io/en/stable/user/jit.html#cache

"""

NUMBA_FAST_MATH: bool = _read_flag("numba", "fastmath", False)
"""Flag to instruct the numba compiler to use it's ``fastmath`` functions.

To be used with care, due to loss in precision. Root values are no longer
reproducible bit by bit when it is switched on.

See Also:
    https://numba.readthedocs.io/en/stable/reference/jit-compilation.html#numba.jit

"""

OMEGA: tuple[float, float] = (-0.5, float(np.sqrt(3.0)) / 2.0)
"""Primitive cube root of unity :math:`\\omega = e^{2 \\pi i / 3}` as
``(real, imag)``."""

OMEGA_SQUARED: tuple[float, float] = (-0.5, -float(np.sqrt(3.0)) / 2.0)
"""The second primitive cube root of unity :math:`\\omega^2 = \\bar{\\omega}` as
``(real, imag)``."""
