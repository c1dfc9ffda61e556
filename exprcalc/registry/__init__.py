"""
exprcalc Symbol Registry Package

Holds every constant, function and operator a calculator knows about,
together with operator precedence and the longest-match-first order
the tokenizer uses.

Author: xwest
"""

from .symbol_table import (
    SymbolRegistry, SymbolKind, UnaryHandler, BinaryHandler, DELIMITERS
)
from .builtins import (
    install_builtins, DEFAULT_CONSTANTS, DEFAULT_FUNCTIONS, DEFAULT_OPERATORS,
    DEFAULT_PRIORITIES, factorial, truncated_remainder
)

__all__ = [
    "SymbolRegistry",
    "SymbolKind",
    "UnaryHandler",
    "BinaryHandler",
    "DELIMITERS",
    "install_builtins",
    "DEFAULT_CONSTANTS",
    "DEFAULT_FUNCTIONS",
    "DEFAULT_OPERATORS",
    "DEFAULT_PRIORITIES",
    "factorial",
    "truncated_remainder",
]
