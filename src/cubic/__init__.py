"""   Cubic.

Closed-form roots of real cubic polynomials. Contains the following modules:

complex_number: Minimal complex value type used to combine cube roots with the
    cube roots of unity.

cubic_polynomial: Compiled kernels of the Cardano and trigonometric solutions.

solver: Validating Python interface returning typed roots.

cli: The ``cubic`` command line program.

utils: Timing logger and other minor helpers.


isort:skip_file

"""

import configparser
import os
from pathlib import Path


__version__ = "1.0.0"

# Try to read the config file from the directory where python process was launched
try:
    cwd = Path(os.getcwd())
    pth = cwd / Path("cubic.cfg")
    cfg = configparser.ConfigParser()
    cfg.read(pth)
    config = dict(cfg)
except (OSError, configparser.Error):
    # the assumption is that no configurations are given
    config = {}

# ------------------------------------
# Simplified namespaces.

from cubic.errors import CubicError, UsageError, ParseError, DomainError
from cubic.utils.logging import time_logger

from cubic import complex_number, cubic_polynomial
from cubic.complex_number import ComplexNumber
from cubic.cubic_polynomial import calculate_roots, signed_cube_root
from cubic.solver import CubicRoots, RootCase, solve, solve_cubic
