"""
Numeric Differentiation (:mod:`rootfinder.numeric.differentiate`)
=================================================================

.. currentmodule:: rootfinder.numeric.differentiate

Finite difference approximations of derivatives of scalar functions.
"""
from collections.abc import Callable

DEFAULT_EPS = 1e-6


# ======================================================================

def derivative(func: Callable[[float], float], x: float,
               eps: float = DEFAULT_EPS) -> float:
    r"""
    Approximate :math:`f'(x)` using a central difference:

    .. math:: f'(x) \approx \frac{f(x + \epsilon) - f(x - \epsilon)}
              {2\epsilon}

    Examples
    --------
    >>> round(derivative(lambda x: x ** 2, 3.0), 6)
    6.0

    Parameters
    ----------
    func : Callable[[float], float]
        Function to differentiate.  Any exception raised by `func` is
        passed through.
    x : float
        Point at which the derivative is required.
    eps : float, default = 1e-6
        Step either side of `x`.  Too large a step biases the estimate;
        too small a step loses precision through cancellation.

    Returns
    -------
    float
        Derivative estimate.

    Raises
    ------
    ValueError
        If `eps` is not positive.
    """
    if not eps > 0:
        raise ValueError(f"eps must be positive, got {eps}.")
    return (func(x + eps) - func(x - eps)) / (2 * eps)
