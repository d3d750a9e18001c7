"""
Find a zero of a real scalar function using the Newton-Raphson method,
where the derivative is estimated numerically by central difference
rather than being supplied.
"""
from __future__ import annotations

from collections.abc import Callable

from rootfinder.numeric.differentiate import DEFAULT_EPS, derivative
from rootfinder.numeric.solve.exception import Exhausted, InvalidPrecondition
from rootfinder.numeric.solve.records import (
    DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, IterationLog, check_limits)


# ---------------------------------------------------------------------------

def newton_raphson(func: Callable[[float], float], x0: float, *,
                   ftol: float = DEFAULT_TOLERANCE,
                   maxits: int = DEFAULT_MAX_ITERATIONS,
                   eps: float = DEFAULT_EPS, log: IterationLog = None,
                   verbose: bool = False) -> float:
    r"""
    Find a zero of `func` starting from `x0` using Newton-Raphson steps
    :math:`x_{n+1} = x_n - f(x_n) / f'(x_n)`.

    Examples
    --------
    >>> round(newton_raphson(lambda x: x**2 - 2, 1.0), 6)
    1.414214

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0 : float
        Initial guess.
    ftol : float, default = 1e-6
        End search when :math:`|f(x_{n+1})| < f_{tol}`.
    maxits : int, default = 20
        Maximum number of iterations.
    eps : float, default = 1e-6
        Step used for the central difference derivative estimate.
    log : IterationLog, optional
        Log receiving one record per iteration.  Records carry no
        bracket values.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    root : float
        Best estimate of root found.

    Raises
    ------
    InvalidPrecondition
        If the derivative estimate is exactly zero.  This is checked
        before the step is taken, so no record is added for that
        iteration.
    Exhausted
        If `maxits` is reached before a solution is found.
    """
    maxits = check_limits(ftol, maxits)
    if log is None:
        log = IterationLog('newton_raphson', verbose=verbose)
    if verbose:
        print("Newton-Raphson Root:")

    root = x0
    for _ in range(maxits):
        fval = func(root)
        fder = derivative(func, root, eps)

        if fder == 0:
            # Reached a level state -> df/dx = 0.
            raise InvalidPrecondition(
                "newton_raphson() failed: derivative is zero.",
                details=f"f'({root}) = 0", x=root, records=log.records)

        root = root - fval / fder
        f_root = func(root)
        log.add(root, f_root)

        if abs(f_root) < ftol:
            return root

    raise Exhausted("newton_raphson() failed to converge:",
                    details=f"Reached {maxits} iteration limit.",
                    x=root, records=log.records)
