"""
Bisection method for a root of a scalar function on a bracketing
interval.
"""
from __future__ import annotations

from collections.abc import Callable

from rootfinder.numeric.solve.exception import Exhausted, InvalidPrecondition
from rootfinder.numeric.solve.records import (
    DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, IterationLog, check_limits)


# ----------------------------------------------------------------------------

def bisect_root(func: Callable[[float], float], a: float, b: float, *,
                ftol: float = DEFAULT_TOLERANCE,
                maxits: int = DEFAULT_MAX_ITERATIONS,
                log: IterationLog = None, verbose: bool = False) -> float:
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [a,
    b]` by the bisection method. For bisection to work :math:`f(x)` must
    change sign across the interval, i.e. ``func(a)`` and ``func(b)`` must
    not have the same sign.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> bisect_root(f, 1, 2, maxits=25)  # This will take 17 iterations.
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect_root(f, 0, 1, maxits=10)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    a, b : float
        Each end of the search interval, in any order.
    ftol : float, default = 1e-6
        End search when :math:`|f(x)| < f_{tol}`.
    maxits : int, default = 20
        Maximum number of iterations.
    log : IterationLog, optional
        Log receiving one record per iteration.  A private log is used if
        not supplied.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    root : float
        Best estimate of root found i.e. :math:`f(root) \approx 0`.

    Raises
    ------
    InvalidPrecondition
        If ``func(a)`` and ``func(b)`` have the same sign.
    Exhausted
        If `maxits` is reached before a solution is found.
    """
    maxits = check_limits(ftol, maxits)
    if log is None:
        log = IterationLog('bisection', verbose=verbose)
    if verbose:
        print("Bisecting Root:")

    for _ in range(maxits):
        f_a, f_b = func(a), func(b)
        if f_a * f_b > 0:
            raise InvalidPrecondition(
                "bisect_root() failed: endpoints have the same sign.",
                details=f"f({a}) = {f_a}, f({b}) = {f_b}",
                a=a, b=b, records=log.records)

        # Compute midpoint.
        root = a + (b - a) / 2
        f_root = func(root)
        log.add(root, f_root, a=a, b=b, f_a=f_a, f_b=f_b)

        # Check stopping criteria.
        if abs(f_root) < ftol:
            return root

        # Check which side root is on, narrow interval.
        if f_root * f_a < 0:
            b = root
        else:
            a = root

    raise Exhausted("bisect_root() failed to converge:",
                    details=f"Reached {maxits} iteration limit.",
                    a=a, b=b, x=log.last.root, records=log.records)
