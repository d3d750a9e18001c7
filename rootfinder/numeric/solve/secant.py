"""
Secant method for computing roots of non-linear scalar functions.
"""
from __future__ import annotations

from collections.abc import Callable

from rootfinder.numeric.solve.exception import Exhausted, InvalidPrecondition
from rootfinder.numeric.solve.records import (
    DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, IterationLog, check_limits)


# ----------------------------------------------------------------------------

def secant(func: Callable[[float], float], a: float, b: float, *,
           ftol: float = DEFAULT_TOLERANCE,
           maxits: int = DEFAULT_MAX_ITERATIONS,
           log: IterationLog = None, verbose: bool = False) -> float:
    r"""
    Find a zero of `func` using the secant method, starting from the two
    points `a` and `b`.  Unlike bisection or false position the points
    need not bracket the root.  After each step the oldest point is
    discarded: :math:`a \leftarrow b`, :math:`b \leftarrow x_r`.

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    a, b : float
        Initial points.
    ftol : float, default = 1e-6
        End search when :math:`|f(x_r)| < f_{tol}`.
    maxits : int, default = 20
        Maximum number of iterations.
    log : IterationLog, optional
        Log receiving one record per iteration.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    root : float
        Best estimate of root found.

    Raises
    ------
    InvalidPrecondition
        If ``func(a) == func(b)`` at any iteration.
    Exhausted
        If `maxits` is reached before a solution is found.
    """
    maxits = check_limits(ftol, maxits)
    if log is None:
        log = IterationLog('secant', verbose=verbose)
    if verbose:
        print("Secant Root:")

    for _ in range(maxits):
        f_a, f_b = func(a), func(b)
        if f_a == f_b:
            # Level state, secant step is undefined.
            raise InvalidPrecondition(
                "secant() failed: division by zero or no convergence.",
                details=f"f({a}) = f({b}) = {f_a}", a=a, b=b,
                records=log.records)

        root = b - f_b * (b - a) / (f_b - f_a)
        f_root = func(root)
        log.add(root, f_root, a=a, b=b, f_a=f_a, f_b=f_b)

        if abs(f_root) < ftol:
            return root

        a, b = b, root

    raise Exhausted("secant() failed to converge:",
                    details=f"Reached {maxits} iteration limit.",
                    a=a, b=b, x=log.last.root, records=log.records)
