"""
False position (regula falsi) method for a root of a scalar function on
a bracketing interval.
"""
from __future__ import annotations

from collections.abc import Callable

from rootfinder.numeric.solve.exception import (
    DivergedOutsideBracket, Exhausted, InvalidPrecondition)
from rootfinder.numeric.solve.records import (
    DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, IterationLog, check_limits)


# ----------------------------------------------------------------------------

def false_position(func: Callable[[float], float], a: float, b: float, *,
                   ftol: float = DEFAULT_TOLERANCE,
                   maxits: int = DEFAULT_MAX_ITERATIONS,
                   log: IterationLog = None, verbose: bool = False) -> float:
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [a,
    b]` by the false position method.  Each new estimate is where the
    straight line through :math:`(a, f(a))` and :math:`(b, f(b))` crosses
    zero:

    .. math:: x_r = \frac{a f(b) - b f(a)}{f(b) - f(a)}

    The interval is then narrowed in the same way as bisection.

    Examples
    --------
    >>> f = lambda x: x**3 - x - 2
    >>> round(false_position(f, 1, 2), 6)
    1.52138

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    a, b : float
        Each end of the search interval.
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
        If ``func(a) == func(b)`` at any iteration (the interpolating
        line has no crossing).
    DivergedOutsideBracket
        If an estimate falls outside the updated interval.  This stops
        runs that have stalled or produced a non-finite estimate.
    Exhausted
        If `maxits` is reached before a solution is found.
    """
    maxits = check_limits(ftol, maxits)
    if log is None:
        log = IterationLog('false_position', verbose=verbose)
    if verbose:
        print("False Position Root:")

    for _ in range(maxits):
        f_a, f_b = func(a), func(b)
        if f_a == f_b:
            raise InvalidPrecondition(
                "false_position() failed: division by zero or no "
                "convergence.", details=f"f({a}) = f({b}) = {f_a}",
                a=a, b=b, records=log.records)

        root = (a * f_b - b * f_a) / (f_b - f_a)
        f_root = func(root)
        log.add(root, f_root, a=a, b=b, f_a=f_a, f_b=f_b)

        if abs(f_root) < ftol:
            return root

        if f_root * f_a < 0:
            b = root
        else:
            a = root

        # Checked against the interval after the update.
        if not (a <= root <= b or b <= root <= a):
            raise DivergedOutsideBracket(
                "false_position() failed: root estimate outside the "
                "interval [a, b].", a=a, b=b, x=root, records=log.records)

    raise Exhausted("false_position() failed to converge:",
                    details=f"Reached {maxits} iteration limit.",
                    a=a, b=b, x=log.last.root, records=log.records)
