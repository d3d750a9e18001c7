# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when a root finding method fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific method being used.  All methods attach
    `records`, the iteration records produced up to the failure.
    """
    default_flag: int = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  If omitted, the class `default_flag` is used.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        if flag is None:
            flag = self.default_flag
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is None:
                continue
            if k == 'records':
                v = f"{len(v)} iteration(s)"
            error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidPrecondition(SolverError):
    """
    A method-specific mathematical condition is violated, e.g. bracket
    endpoints of the same sign, equal function values where a division
    is required or a zero derivative.  Detected before the offending
    update is attempted.
    """
    default_flag = 1


class DivergedOutsideBracket(SolverError):
    """
    The false position estimate escaped the interval `[a, b]` after the
    bracket update.
    """
    default_flag = 2


class Exhausted(SolverError):
    """The iteration limit was reached without convergence."""
    default_flag = 3


class EvaluationFailure(SolverError):
    """
    The function being solved raised an error when evaluated.  The
    original exception is available as ``__cause__``.
    """
    default_flag = 4
