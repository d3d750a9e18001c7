"""
Text display of root finding results and iteration records.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from rootfinder.numeric.solve.records import IterationRecord, RootResult

DEFAULT_DIGITS = 6

TABLE_HEADINGS = ('Method', 'Iteration', 'a', 'b', 'Root', 'f(a)', 'f(b)',
                  'f(root)')


# ======================================================================

def format_root(result: RootResult, digits: int = DEFAULT_DIGITS) -> str:
    """
    Text for the outcome of a run: the root to `digits` decimal places,
    or ``'Failed to converge'``.

    >>> format_root(RootResult('bisection', 2.0))
    '2.000000'
    >>> format_root(RootResult('bisection', None))
    'Failed to converge'
    """
    if not result.converged:
        return "Failed to converge"
    return f"{result.root:.{digits}f}"


def format_table(records: Iterable[IterationRecord],
                 digits: int = DEFAULT_DIGITS) -> str:
    """
    Text table of iteration records with columns `TABLE_HEADINGS`.
    Values that are not available for a method (e.g. the bracket of
    Newton-Raphson) are left blank.
    """
    rows = [list(TABLE_HEADINGS)]
    for rec in records:
        rows.append([rec.display_name, str(rec.iteration),
                     _cell(rec.a, digits), _cell(rec.b, digits),
                     _cell(rec.root, digits), _cell(rec.f_a, digits),
                     _cell(rec.f_b, digits), _cell(rec.f_root, digits)])

    widths = [max(len(row[i]) for row in rows)
              for i in range(len(TABLE_HEADINGS))]
    lines = []
    for row in rows:
        # Method name left aligned, numbers right aligned.
        cells = [row[0].ljust(widths[0])]
        cells += [s.rjust(w) for s, w in zip(row[1:], widths[1:])]
        lines.append('  '.join(cells).rstrip())
    return '\n'.join(lines)


def _cell(value: Optional[float], digits: int) -> str:
    return '' if value is None else f"{value:.{digits}f}"
