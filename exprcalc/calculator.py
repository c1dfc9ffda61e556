"""
exprcalc Calculator - the public entry point

Ties the registry, tokenizer, parser and evaluator together. A
Calculator owns one registry which callers may extend between
evaluations; each evaluation gets a fresh state of its own.

A Calculator is meant for a single owner on a single thread: nothing
here is locked, so the registry must not change while an evaluation is
running.

Author: xwest
"""

import logging
from typing import List, Optional, Tuple, Union

import numpy as np

from .config import CalculatorConfig
from .context import EvaluationContext
from .errors import State, Diagnostic, ExpressionError
from .evaluator import Evaluator
from .lexer import Tokenizer, Token
from .numeric import Number
from .parser import Parser, ExpressionNode
from .registry import SymbolRegistry, UnaryHandler, BinaryHandler, install_builtins

logger = logging.getLogger(__name__)


class Calculator:
    """
    Evaluates arithmetic expressions over an extensible symbol set.

    Example:
        calc = Calculator()
        value, state = calc.evaluate("2 + 3 * 4")      # 14, State.OK
        calc.add_function("exp", np.exp)
        value, state = calc.evaluate("exp(1)")
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self.registry = SymbolRegistry()
        self._context = EvaluationContext(radians=self.config.radians)

        if self.config.install_builtins:
            install_builtins(self.registry, self._is_radians)
        for symbol, value in self.config.extra_constants.items():
            self.registry.add_constant(symbol, value)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, text: str, radians: Optional[bool] = None) -> Tuple[Number, State]:
        """
        Evaluate an expression.

        Args:
            text: Expression, case-insensitive
            radians: Angle mode for trig functions; config.radians if None

        Returns:
            (value, state). The value is meaningless unless state is OK.
        """
        tree = self.parse(text, radians)

        if not self._context.is_ok():
            return Number(0), self._context.state

        value = Evaluator(self.registry, self._context).evaluate(tree)
        logger.debug("evaluated %r = %s (%s)", text, value, self._context.state.name)
        return value, self._context.state

    def parse(self, text: str, radians: Optional[bool] = None) -> ExpressionNode:
        """Parse an expression without evaluating it. Resets the state."""
        self._context = EvaluationContext(
            radians=self.config.radians if radians is None else radians
        )
        return Parser(text.lower(), self.registry, self._context).parse()

    def tokenize(self, text: str) -> List[Token]:
        """Split an expression into tokens. Resets the state."""
        self._context = EvaluationContext(radians=self.config.radians)
        return Tokenizer(text.lower(), self.registry, self._context).tokenize()

    def get_state(self) -> State:
        """Outcome of the most recent evaluate/parse/tokenize call."""
        return self._context.state

    def is_ok(self) -> bool:
        return self._context.is_ok()

    @property
    def diagnostic(self) -> Optional[Diagnostic]:
        """Details of the most recent failure, or None."""
        return self._context.diagnostic

    # ------------------------------------------------------------------
    # Extension
    # ------------------------------------------------------------------

    def add_operator(self, symbol: str, handler: BinaryHandler, precedence: int):
        """Register a binary operator; see SymbolRegistry.add_operator."""
        self.registry.add_operator(symbol, handler, precedence)

    def add_function(self, symbol: str, handler: UnaryHandler, postfix: bool = False):
        """Register a unary function or prefix operator; see SymbolRegistry.add_function."""
        self.registry.add_function(symbol, handler, postfix)

    def add_constant(self, symbol: str, value: Union[int, float, np.floating]):
        """Register a named constant; see SymbolRegistry.add_constant."""
        self.registry.add_constant(symbol, value)

    def _is_radians(self) -> bool:
        return self._context.radians


def evaluate_string(text: str, radians: bool = True,
                    calculator: Optional[Calculator] = None) -> Number:
    """
    Convenience function to evaluate an expression.

    Args:
        text: Expression text
        radians: Angle mode for trig functions
        calculator: Calculator to use (a default one if omitted)

    Returns:
        The value of the expression

    Raises:
        ExpressionError: If the expression cannot be evaluated
    """
    calculator = calculator or Calculator()
    value, state = calculator.evaluate(text, radians)

    if state != State.OK:
        raise ExpressionError(calculator.diagnostic)

    return value
