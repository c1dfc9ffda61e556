"""
Numeric domain for exprcalc.

Every literal, intermediate value and result is a ``numpy.longdouble``.
Literal text is kept as text in the expression tree and in the constant
table; this module converts between the two representations.

Author: xwest
"""

import re
from typing import Union

import numpy as np


Number = np.longdouble

# Unsigned decimal numeral: digits with at most one decimal point
NUMERAL_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+')


def is_numeral(text: str) -> bool:
    """Check whether text is a valid unsigned decimal numeral."""
    return bool(text) and NUMERAL_PATTERN.fullmatch(text) is not None


def parse_numeral(text: str) -> Number:
    """Convert numeral text to a Number. Caller validates with is_numeral."""
    return np.longdouble(text)


def format_number(value: Union[int, float, np.floating]) -> str:
    """
    Render a value as literal text without losing precision.

    Never uses exponent notation and never ends on a bare decimal point,
    so the result tokenizes as a single numeral (negative values keep
    their leading '-').
    """
    return np.format_float_positional(np.longdouble(value), unique=True, trim='-')


def to_number(value: Union[int, float, np.number]) -> Number:
    """Coerce a handler result to the numeric domain."""
    return np.longdouble(value)
