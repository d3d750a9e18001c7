"""
Numeric (:mod:`rootfinder.numeric`)
===================================

.. currentmodule:: rootfinder.numeric

Numeric functions used throughout rootfinder.

.. autosummary::
    :toctree:

    solve
    differentiate
    expression

"""
from .differentiate import derivative
from .expression import ExpressionError, parse_function
