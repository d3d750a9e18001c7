"""
Iteration records and run containers shared by all root finding
methods.

Every method appends exactly one `IterationRecord` per completed pass
to an `IterationLog`.  Records are frozen and the log only grows, so
the trace of a run cannot be altered once written.
"""
from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from rootfinder.numeric.solve.exception import SolverError

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-6
DEFAULT_MAX_ITERATIONS = 20

METHOD_NAMES = ('bisection', 'false_position', 'newton_raphson', 'secant')

DISPLAY_NAMES = {
    'bisection': 'Bisection',
    'false_position': 'False Position',
    'newton_raphson': 'Newton-Raphson',
    'secant': 'Secant',
}


# ======================================================================

@dataclass(frozen=True)
class IterationRecord:
    """
    State of a single iteration.  Bracket fields (`a`, `b`, `f_a`,
    `f_b`) are ``None`` for single-point methods (Newton-Raphson).
    """
    method: str
    iteration: int
    root: float
    f_root: float
    a: Optional[float] = None
    b: Optional[float] = None
    f_a: Optional[float] = None
    f_b: Optional[float] = None

    @property
    def bracketed(self) -> bool:
        return self.a is not None and self.b is not None

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES.get(self.method, self.method)


# ----------------------------------------------------------------------

class IterationLog:
    """
    Append-only, ordered trace of the iterations for one method run.
    Iteration numbers are assigned here (starting at 1) so that they are
    always contiguous.

    Parameters
    ----------
    method : str
        Name of the method producing the records.
    verbose : bool, default = False
        If True, print each record as it is added.
    """

    def __init__(self, method: str, verbose: bool = False):
        if method not in METHOD_NAMES:
            raise ValueError(f"Unknown method '{method}'.")
        self.method = method
        self.verbose = verbose
        self._records: list[IterationRecord] = []

    def __iter__(self) -> Iterator[IterationRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # -- Public Methods ------------------------------------------------

    def add(self, root: float, f_root: float, *, a: float = None,
            b: float = None, f_a: float = None,
            f_b: float = None) -> IterationRecord:
        """
        Append a new record with the next iteration number and return
        it.
        """
        rec = IterationRecord(self.method, len(self._records) + 1,
                              root=root, f_root=f_root, a=a, b=b,
                              f_a=f_a, f_b=f_b)
        self._records.append(rec)

        logger.debug("%s iteration %d: a=%s, b=%s, root=%s, f(root)=%s",
                     rec.display_name, rec.iteration, a, b, root, f_root)
        if self.verbose:
            if rec.bracketed:
                print(f"... Iteration {rec.iteration}: "
                      f"x = [{a}, {root}, {b}], f = [{f_a}, {f_root}, "
                      f"{f_b}]")
            else:
                print(f"... Iteration {rec.iteration}: x = {root}, "
                      f"f = {f_root}")
        return rec

    @property
    def last(self) -> Optional[IterationRecord]:
        return self._records[-1] if self._records else None

    @property
    def records(self) -> tuple[IterationRecord, ...]:
        return tuple(self._records)


# ======================================================================

@dataclass(frozen=True)
class RunParameters:
    """
    Caller supplied values for one run.  `a` and `b` are used by the
    bracket / two-point methods, `initial_guess` by Newton-Raphson.

    Raises
    ------
    ValueError
        If `tolerance` is not positive or `max_iterations` is less than
        one.
    """
    a: Optional[float] = None
    b: Optional[float] = None
    initial_guess: Optional[float] = None
    tolerance: float = DEFAULT_TOLERANCE
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self):
        check_limits(self.tolerance, self.max_iterations)


def check_limits(ftol: float, maxits: int) -> int:
    """
    Check that the convergence tolerance and iteration limit are usable,
    returning `maxits` as an ``int``.
    """
    if not ftol > 0:
        raise ValueError(f"Tolerance must be positive, got {ftol}.")

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("Iteration limit must be greater than 0.")
    return maxits


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class RootResult:
    """
    Outcome of a single run.  `root` is only set when the run
    converged; otherwise `error` holds the diagnostic.  `records` is the
    complete iteration trace in either case.
    """
    method: str
    root: Optional[float]
    records: tuple[IterationRecord, ...] = ()
    error: Optional[SolverError] = None

    @property
    def converged(self) -> bool:
        return self.root is not None

    @property
    def iterations(self) -> int:
        return len(self.records)
