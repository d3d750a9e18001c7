"""
.. This module acts as the top-level API documentation.

.. module: rootfinder

Bisection, false position, Newton-Raphson and secant root finding for
functions of one real variable, with full iteration traces.

.. autosummary::
    :toctree: generated/

    numeric
    util

"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 9)

from .numeric import ExpressionError, derivative, parse_function
from .numeric.solve import (find_root, RootResult, RunParameters,
                            IterationRecord, SolverError)
