"""
Single entry point running any of the root finding methods by name,
returning a `RootResult` rather than raising on failure.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Union

from rootfinder.numeric.expression import ExpressionError, parse_function
from rootfinder.numeric.solve.bisect_root import bisect_root
from rootfinder.numeric.solve.exception import EvaluationFailure, SolverError
from rootfinder.numeric.solve.false_position import false_position
from rootfinder.numeric.solve.newton_raphson import newton_raphson
from rootfinder.numeric.solve.records import (
    DISPLAY_NAMES, IterationLog, RootResult, RunParameters)
from rootfinder.numeric.solve.secant import secant

logger = logging.getLogger(__name__)

# Accepted spellings, after lower-casing and removing '_', '-' and ' '.
_METHOD_ALIASES = {
    'bisection': 'bisection',
    'bisect': 'bisection',
    'falseposition': 'false_position',
    'regulafalsi': 'false_position',
    'newtonraphson': 'newton_raphson',
    'newton': 'newton_raphson',
    'secant': 'secant',
}

_BRACKET_METHODS = {
    'bisection': bisect_root,
    'false_position': false_position,
    'secant': secant,
}


# ======================================================================

def method_name(method: str) -> str:
    """
    Return the canonical name for `method`, e.g. ``'falsePosition'`` ->
    ``'false_position'``.

    Raises
    ------
    ValueError
        If `method` is not a known root finding method.
    """
    key = str(method).lower()
    for ch in '_- ':
        key = key.replace(ch, '')
    try:
        return _METHOD_ALIASES[key]
    except KeyError:
        raise ValueError(f"Invalid method '{method}'.") from None


# ----------------------------------------------------------------------

def find_root(method: str, func: Union[Callable[[float], float], str],
              params: RunParameters = None, *, verbose: bool = False,
              **kwargs) -> RootResult:
    """
    Run a root finding method and return the result together with the
    complete iteration trace.

    Failures of the method (`SolverError`) and errors raised while
    evaluating `func` do not propagate.  They give a `RootResult` with
    ``root=None`` and the diagnostic in `error`, and are logged as
    warnings.

    Examples
    --------
    >>> res = find_root('bisection', 'x^2 - 4', a=0, b=3, tolerance=1e-4)
    >>> res.converged, round(res.root, 4)
    (True, 2.0)

    Parameters
    ----------
    method : str
        One of ``'bisection'``, ``'falsePosition'``, ``'newtonRaphson'``
        or ``'secant'``.  Snake case and some common alternate names are
        also accepted.
    func : Callable[[float], float] or str
        Function to solve, or an equation string in `x` to be compiled
        by `parse_function`.
    params : RunParameters, optional
        Run values.  If omitted, `kwargs` are used to build one.
    verbose : bool, default = False
        If True, print progress statements.
    kwargs :
        Fields of `RunParameters` (`a`, `b`, `initial_guess`,
        `tolerance`, `max_iterations`) when `params` is not given.

    Returns
    -------
    RootResult
        Converged root, or ``None`` with the diagnostic error.

    Raises
    ------
    ValueError
        On invalid input detected before the run starts: unknown method,
        both `params` and `kwargs` given, invalid tolerance / iteration
        limit, or missing `a`, `b` or `initial_guess` for the method.
    """
    name = method_name(method)

    if params is None:
        params = RunParameters(**kwargs)
    elif kwargs:
        raise ValueError("Give either 'params' or keyword arguments, "
                         "not both.")

    if name == 'newton_raphson':
        if params.initial_guess is None:
            raise ValueError(f"{DISPLAY_NAMES[name]} requires "
                             f"'initial_guess'.")
    elif params.a is None or params.b is None:
        raise ValueError(f"{DISPLAY_NAMES[name]} requires 'a' and 'b'.")

    log = IterationLog(name, verbose=verbose)
    try:
        if isinstance(func, str):
            func = parse_function(func)

        if name == 'newton_raphson':
            root = newton_raphson(func, params.initial_guess,
                                  ftol=params.tolerance,
                                  maxits=params.max_iterations, log=log,
                                  verbose=verbose)
        else:
            root = _BRACKET_METHODS[name](
                func, params.a, params.b, ftol=params.tolerance,
                maxits=params.max_iterations, log=log, verbose=verbose)

    except SolverError as exc:
        logger.warning("%s method failed: %s", DISPLAY_NAMES[name], exc)
        return RootResult(name, None, log.records, exc)

    except (ExpressionError, ArithmeticError, ValueError,
            TypeError) as exc:
        error = EvaluationFailure(
            f"{DISPLAY_NAMES[name]} failed: error evaluating function.",
            details=str(exc), records=log.records)
        error.__cause__ = exc
        logger.warning("%s", error)
        return RootResult(name, None, log.records, error)

    logger.info("%s method converged to %s after %d iteration(s).",
                DISPLAY_NAMES[name], root, len(log))
    return RootResult(name, root, log.records)
