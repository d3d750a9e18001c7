"""
Expressions (:mod:`rootfinder.numeric.expression`)
==================================================

.. currentmodule:: rootfinder.numeric.expression

Conversion of user-entered equation strings such as ``"x^2 - 4"`` or
``"Math.cos(x) - x"`` into callable scalar functions of `x`.

The string is parsed into a Python syntax tree, which is then compiled
into nested closures.  Only the node types, names and functions listed
here are accepted; nothing is passed to ``eval``.  Evaluation is done
in NumPy double precision with floating point errors raised, so domain
errors such as ``log(-1)`` or ``1/x`` at zero become exceptions rather
than silent NaN / inf values.
"""
from __future__ import annotations

import ast
import operator
from collections.abc import Callable

import numpy as np


# ======================================================================

class ExpressionError(ValueError):
    """
    Raised when an expression cannot be parsed or cannot be evaluated
    at a given point.
    """


# Functions available to expressions, with the number of arguments.
_FUNCTIONS: dict[str, tuple[Callable, int]] = {
    'sin': (np.sin, 1), 'cos': (np.cos, 1), 'tan': (np.tan, 1),
    'asin': (np.arcsin, 1), 'acos': (np.arccos, 1), 'atan': (np.arctan, 1),
    'sinh': (np.sinh, 1), 'cosh': (np.cosh, 1), 'tanh': (np.tanh, 1),
    'exp': (np.exp, 1), 'log': (np.log, 1), 'ln': (np.log, 1),
    'log10': (np.log10, 1), 'log2': (np.log2, 1), 'sqrt': (np.sqrt, 1),
    'cbrt': (np.cbrt, 1), 'abs': (np.abs, 1), 'pow': (np.power, 2),
}

_CONSTANTS = {'pi': np.pi, 'e': np.e}

# Namespaces that may prefix a function or constant, e.g. Math.sin(x).
_PREFIXES = frozenset({'Math', 'math', 'np', 'numpy'})

_BINARY_OPS = {
    ast.Add: operator.add, ast.Sub: operator.sub,
    ast.Mult: operator.mul, ast.Div: operator.truediv,
    ast.Mod: operator.mod, ast.Pow: operator.pow,
}

_UNARY_OPS = {ast.UAdd: operator.pos, ast.USub: operator.neg}

_Compiled = Callable[[np.float64], np.float64]


# ----------------------------------------------------------------------

def parse_function(expr: str, var: str = 'x') -> Callable[[float], float]:
    """
    Convert an equation string into a function of one variable.

    Examples
    --------
    >>> f = parse_function("x^2 - 4")
    >>> f(3.0)
    5.0
    >>> g = parse_function("Math.cos(x) - x")
    >>> g(0.0)
    1.0

    Parameters
    ----------
    expr : str
        Expression using the variable, numbers, ``+ - * / % ** ^``,
        parentheses, the constants ``pi`` and ``e`` and the functions
        ``sin cos tan asin acos atan sinh cosh tanh exp log ln log10 log2
        sqrt cbrt abs pow``.
    var : str, default = 'x'
        Name of the independent variable.

    Returns
    -------
    Callable[[float], float]
        The function.  It raises `ExpressionError` if evaluation fails
        (e.g. division by zero, overflow or a domain error).  The
        original text is available as the ``expr`` attribute.

    Raises
    ------
    ExpressionError
        If `expr` is empty, is not valid syntax or uses anything not
        listed above.
    """
    if not isinstance(expr, str) or not expr.strip():
        raise ExpressionError("Expression cannot be empty.")

    # '^' is taken as a power, with the same precedence as '**'.
    text = expr.strip().replace('^', '**')
    try:
        tree = ast.parse(text, mode='eval')
    except SyntaxError as exc:
        raise ExpressionError(f"Invalid expression '{expr}': "
                              f"{exc.msg}") from exc
    except (RecursionError, MemoryError) as exc:
        raise ExpressionError(f"Expression '{expr}' is nested too "
                              f"deeply.") from exc

    try:
        compiled = _compile(tree.body, var)
    except RecursionError as exc:
        raise ExpressionError(f"Expression '{expr}' is nested too "
                              f"deeply.") from exc

    def func(x: float) -> float:
        try:
            with np.errstate(divide='raise', over='raise',
                             invalid='raise', under='ignore'):
                value = compiled(np.float64(x))
        except (ArithmeticError, ValueError, TypeError,
                RecursionError) as exc:
            raise ExpressionError(f"Error evaluating '{expr}' at "
                                  f"{var} = {x}: {exc}") from exc
        return float(value)

    func.expr = expr
    return func


# ----------------------------------------------------------------------

def _compile(node: ast.AST, var: str) -> _Compiled:
    """Recursively convert a syntax tree node into a closure."""
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(
                node.value, (int, float)):
            raise ExpressionError(f"Unsupported constant "
                                  f"{node.value!r}.")
        try:
            value = np.float64(node.value)
        except OverflowError as exc:
            raise ExpressionError("Numeric constant too large.") from exc
        return lambda x: value

    if isinstance(node, (ast.Name, ast.Attribute)):
        name = _plain_name(node)
        if name == var:
            return lambda x: x
        try:
            value = np.float64(_CONSTANTS[name.lower()])
        except KeyError:
            raise ExpressionError(f"Unknown name '{name}'.") from None
        return lambda x: value

    if isinstance(node, ast.UnaryOp):
        try:
            op = _UNARY_OPS[type(node.op)]
        except KeyError:
            raise ExpressionError(f"Unsupported operator "
                                  f"'{type(node.op).__name__}'.") from None
        operand = _compile(node.operand, var)
        return lambda x: op(operand(x))

    if isinstance(node, ast.BinOp):
        try:
            op = _BINARY_OPS[type(node.op)]
        except KeyError:
            raise ExpressionError(f"Unsupported operator "
                                  f"'{type(node.op).__name__}'.") from None
        left, right = _compile(node.left, var), _compile(node.right, var)
        return lambda x: op(left(x), right(x))

    if isinstance(node, ast.Call):
        name = _plain_name(node.func)
        try:
            fn, n_args = _FUNCTIONS[name]
        except KeyError:
            raise ExpressionError(f"Unknown function '{name}'.") from None
        if node.keywords or len(node.args) != n_args:
            raise ExpressionError(f"Function '{name}' takes {n_args} "
                                  f"positional argument(s).")
        args = [_compile(arg, var) for arg in node.args]
        return lambda x: fn(*[arg(x) for arg in args])

    raise ExpressionError(f"Unsupported syntax "
                          f"'{type(node).__name__}'.")


def _plain_name(node: ast.AST) -> str:
    """
    Name of a bare identifier, or an identifier qualified by one of the
    allowed namespace prefixes (``Math.PI`` -> ``'PI'``).
    """
    if isinstance(node, ast.Name):
        return node.id
    if (isinstance(node, ast.Attribute) and
            isinstance(node.value, ast.Name) and
            node.value.id in _PREFIXES):
        return node.attr
    raise ExpressionError(f"Unsupported name '{ast.unparse(node)}'.")
