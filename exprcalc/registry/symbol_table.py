"""
Symbol registry shared by the tokenizer, parser and evaluator.

Holds the constants, unary functions and binary operators known to a
calculator, the precedence of each binary operator, and the order in
which the tokenizer tries symbols against the input.

Matching order rules:
- Longer symbols are tried before shorter ones
- Among symbols of equal length, the most recently registered is tried first

Author: xwest
"""

import logging
import numbers
from enum import Enum
from typing import Callable, Dict, List, Optional, Set, Tuple, Union

import numpy as np

from ..numeric import Number, format_number

logger = logging.getLogger(__name__)


UnaryHandler = Callable[[Number], Union[Number, float]]
BinaryHandler = Callable[[Number, Number], Union[Number, float]]

# Grouping delimiters are always recognized and cannot be rebound
DELIMITERS = ("(", ")")


class SymbolKind(Enum):
    """Kinds of symbols in the registry."""
    DELIMITER = "delimiter"
    CONSTANT = "constant"
    FUNCTION = "function"
    OPERATOR = "operator"


class SymbolRegistry:
    """
    Mutable table of every symbol a calculator understands.

    Registration replaces earlier bindings instead of failing. A symbol
    may be both a function and an operator (prefix '-' and infix '-'),
    but a constant never shares its text with either: whichever was
    registered last wins and the other binding is dropped.
    """

    def __init__(self):
        self._constants: Dict[str, str] = {}
        self._functions: Dict[str, UnaryHandler] = {}
        self._operators: Dict[str, BinaryHandler] = {}
        self._priorities: Dict[str, int] = {}
        self._postfix: Set[str] = set()
        self._tokens: List[str] = []

        for delimiter in DELIMITERS:
            self._insert_token(delimiter)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_operator(self, symbol: str, handler: BinaryHandler, precedence: int):
        """
        Register or replace a binary operator.

        Args:
            symbol: Operator text, e.g. '+' or 'mod'
            handler: Callable taking (left, right) and returning a number
            precedence: Binding power, higher binds tighter (built-ins use 1-3).
                An operator with precedence 0 is registered but never binds.
        """
        symbol = self._normalize(symbol)
        self._check_handler(handler)
        if not isinstance(precedence, numbers.Integral) or isinstance(precedence, bool) or precedence < 0:
            raise ValueError(f"Operator precedence must be a non-negative integer, got {precedence!r}")
        precedence = int(precedence)

        self._drop_constant(symbol)
        self._operators[symbol] = handler
        self._priorities[symbol] = precedence
        self._insert_token(symbol)
        logger.debug("registered operator %r with precedence %d", symbol, precedence)

    def add_function(self, symbol: str, handler: UnaryHandler, postfix: bool = False):
        """
        Register or replace a unary function or prefix operator.

        With postfix=True the symbol may also follow its operand ('3!').
        A symbol stays postfix once marked, even if its handler is replaced.
        """
        symbol = self._normalize(symbol)
        self._check_handler(handler)

        self._drop_constant(symbol)
        self._functions[symbol] = handler
        if postfix:
            self._postfix.add(symbol)
        self._insert_token(symbol)
        logger.debug("registered function %r%s", symbol, " (postfix)" if postfix else "")

    def add_constant(self, symbol: str, value: Union[int, float, np.floating]):
        """
        Register or replace a named constant.

        The value is stored as numeral text which the tokenizer substitutes
        wherever the symbol appears.
        """
        symbol = self._normalize(symbol)

        for table, kind in ((self._functions, "function"), (self._operators, "operator")):
            if symbol in table:
                logger.warning("constant %r replaces %s of the same name", symbol, kind)
                del table[symbol]
        self._priorities.pop(symbol, None)
        self._postfix.discard(symbol)

        self._constants[symbol] = format_number(value)
        self._insert_token(symbol)
        logger.debug("registered constant %r = %s", symbol, self._constants[symbol])

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def match(self, source: str, pos: int) -> Optional[str]:
        """Return the registered symbol found at source[pos:], or None."""
        for symbol in reversed(self._tokens):
            if source.startswith(symbol, pos):
                return symbol
        return None

    def priority(self, symbol: str) -> int:
        """Precedence of a binary operator; 0 for anything that is not one."""
        return self._priorities.get(symbol, 0)

    def operator(self, symbol: str) -> Optional[BinaryHandler]:
        return self._operators.get(symbol)

    def function(self, symbol: str) -> Optional[UnaryHandler]:
        return self._functions.get(symbol)

    def constant_text(self, symbol: str) -> Optional[str]:
        return self._constants.get(symbol)

    def is_constant(self, symbol: str) -> bool:
        return symbol in self._constants

    def is_function(self, symbol: str) -> bool:
        return symbol in self._functions

    def is_operator(self, symbol: str) -> bool:
        return symbol in self._operators

    def is_postfix(self, symbol: str) -> bool:
        return symbol in self._postfix

    def kinds(self, symbol: str) -> List[SymbolKind]:
        """All kinds a symbol is currently registered as."""
        symbol = symbol.lower()
        result = []
        if symbol in DELIMITERS:
            result.append(SymbolKind.DELIMITER)
        if symbol in self._constants:
            result.append(SymbolKind.CONSTANT)
        if symbol in self._functions:
            result.append(SymbolKind.FUNCTION)
        if symbol in self._operators:
            result.append(SymbolKind.OPERATOR)
        return result

    @property
    def symbols(self) -> Tuple[str, ...]:
        """Matching order, lowest priority first (the tokenizer scans from the end)."""
        return tuple(self._tokens)

    def __contains__(self, symbol: str) -> bool:
        return symbol.lower() in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _normalize(self, symbol: str) -> str:
        if not isinstance(symbol, str) or not symbol or any(c.isspace() for c in symbol):
            raise ValueError(f"Invalid symbol: {symbol!r}")
        symbol = symbol.lower()
        if symbol in DELIMITERS:
            raise ValueError(f"'{symbol}' is a grouping delimiter and cannot be rebound")
        return symbol

    @staticmethod
    def _check_handler(handler):
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")

    def _drop_constant(self, symbol: str):
        if symbol in self._constants:
            logger.warning("symbol %r replaces the constant of the same name", symbol)
            del self._constants[symbol]

    def _insert_token(self, symbol: str):
        """Place symbol after every entry that is not longer than it."""
        if symbol in self._tokens:
            self._tokens.remove(symbol)

        index = len(self._tokens)
        while index > 0 and len(self._tokens[index - 1]) > len(symbol):
            index -= 1
        self._tokens.insert(index, symbol)
