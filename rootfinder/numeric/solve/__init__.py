"""
=========================================
Solvers (:mod:`rootfinder.numeric.solve`)
=========================================

.. currentmodule:: rootfinder.numeric.solve

Root finding methods for a scalar function of one real variable.  Each
method returns the root or raises a `SolverError`; `find_root` runs any
of them by name and returns a `RootResult` instead.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    false_position
    find_root
    method_name
    newton_raphson
    secant

Records
-------

.. autosummary::
    :toctree:

    IterationLog
    IterationRecord
    RootResult
    RunParameters

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidPrecondition
    DivergedOutsideBracket
    Exhausted
    EvaluationFailure

"""

from .exception import (SolverError, InvalidPrecondition,
                        DivergedOutsideBracket, Exhausted, EvaluationFailure)
from .records import (IterationLog, IterationRecord, RootResult,
                      RunParameters, DEFAULT_MAX_ITERATIONS,
                      DEFAULT_TOLERANCE, METHOD_NAMES)
from .bisect_root import bisect_root
from .false_position import false_position
from .newton_raphson import newton_raphson
from .secant import secant
from .find_root import find_root, method_name
