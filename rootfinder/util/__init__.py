"""
===================================
Utilities (:mod:`rootfinder.util`)
===================================

.. currentmodule:: rootfinder.util

Display of root finding results.

.. autosummary::
    :toctree:

    format_root
    format_table

"""

from .display import format_root, format_table, DEFAULT_DIGITS
