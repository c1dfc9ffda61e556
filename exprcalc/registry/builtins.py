"""
Built-in symbols installed into every new calculator.

Author: xwest
"""

from typing import Callable

import numpy as np
from scipy.special import gamma

from ..numeric import Number, to_number
from .symbol_table import SymbolRegistry


# Parsed from text so they carry full extended precision
DEFAULT_CONSTANTS = {
    "pi": np.longdouble("3.14159265358979323846264338327950288"),
    "e": np.longdouble("2.71828182845904523536028747135266250"),
}

# Binary operator precedence levels
DEFAULT_PRIORITIES = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 3,
    "^": 3,
}


# Truncated operands must fit in a signed 64-bit integer
INT64_LIMIT = Number(2) ** 63

# n! overflows even an 80-bit long double past this
FACTORIAL_PRODUCT_LIMIT = 1754


def truncated_remainder(a: Number, b: Number) -> Number:
    """
    Remainder of both operands truncated toward zero to 64-bit integers.

    Operands that are not finite or whose truncation falls outside the
    int64 range give nan.
    """
    left = np.trunc(a)
    right = np.trunc(b)
    if not (abs(left) < INT64_LIMIT and abs(right) < INT64_LIMIT):
        return Number(np.nan)
    return to_number(np.fmod(left.astype(np.int64), right.astype(np.int64)))


def factorial(a: Number) -> Number:
    """
    Factorial, extended to non-integers as Gamma(a + 1).

    Non-negative integers are multiplied out in Number so the result
    keeps full precision and range. Everything else goes through scipy's
    gamma, which works in float64.
    """
    if np.isfinite(a) and a >= 0 and a == np.trunc(a):
        if a > FACTORIAL_PRODUCT_LIMIT:
            return Number(np.inf)
        return to_number(np.prod(np.arange(1, int(a) + 1, dtype=Number)))
    return to_number(gamma(np.float64(a + 1)))


DEFAULT_OPERATORS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
    "%": truncated_remainder,
}

DEFAULT_FUNCTIONS = {
    "+": np.positive,
    "-": np.negative,
    "abs": np.abs,
    "log2": np.log2,
    "lg": np.log10,
    "log10": np.log10,
    "ln": np.log,
    "sqrt": np.sqrt,
}

FORWARD_TRIG = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
}

INVERSE_TRIG = {
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
}


def forward_trig(func: Callable[[Number], Number], is_radians: Callable[[], bool]):
    """Wrap a trig function so degree-mode arguments are converted first."""
    def handler(a: Number) -> Number:
        return func(a if is_radians() else np.deg2rad(a))
    handler.__name__ = func.__name__
    return handler


def inverse_trig(func: Callable[[Number], Number], is_radians: Callable[[], bool]):
    """Wrap an inverse trig function so degree-mode results are converted back."""
    def handler(a: Number) -> Number:
        result = func(a)
        return result if is_radians() else np.rad2deg(result)
    handler.__name__ = func.__name__
    return handler


def install_builtins(registry: SymbolRegistry, is_radians: Callable[[], bool]) -> SymbolRegistry:
    """
    Register the default constants, functions and operators.

    Args:
        registry: Registry to populate
        is_radians: Returns the angle mode of the evaluation in progress

    Returns:
        The same registry, for chaining
    """
    for symbol, value in DEFAULT_CONSTANTS.items():
        registry.add_constant(symbol, value)

    for symbol, handler in DEFAULT_OPERATORS.items():
        registry.add_operator(symbol, handler, DEFAULT_PRIORITIES[symbol])

    for symbol, handler in DEFAULT_FUNCTIONS.items():
        registry.add_function(symbol, handler)
    registry.add_function("!", factorial, postfix=True)

    for symbol, func in FORWARD_TRIG.items():
        registry.add_function(symbol, forward_trig(func, is_radians))
    for symbol, func in INVERSE_TRIG.items():
        registry.add_function(symbol, inverse_trig(func, is_radians))

    return registry
