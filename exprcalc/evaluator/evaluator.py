"""
exprcalc Tree Evaluator

Reduces an ExpressionNode tree to a number, bottom-up, dispatching each
node to the handler registered for its token.

Author: xwest
"""

import numpy as np
from typing import Optional

from ..context import EvaluationContext
from ..errors import (
    create_unknown_binary_diagnostic, create_unknown_unary_diagnostic,
    create_unknown_expression_diagnostic
)
from ..numeric import Number, is_numeral, parse_numeral, to_number
from ..parser import ExpressionNode
from ..registry import SymbolRegistry


class Evaluator:
    """
    Tree-walking evaluator.

    Lookup failures are recorded on the context and yield 0 as a filler
    value; the caller must check the context before trusting a result.
    Arithmetic domain errors follow IEEE rules (1/0 is inf, sqrt(-1) is
    nan) and are not failures.
    """

    def __init__(self, registry: SymbolRegistry, context: Optional[EvaluationContext] = None):
        self.registry = registry
        self.context = context if context is not None else EvaluationContext()

    def evaluate(self, node: ExpressionNode) -> Number:
        """Evaluate a tree. Recursion depth follows the tree depth."""
        with np.errstate(all="ignore"):
            return self._evaluate(node)

    def _evaluate(self, node: ExpressionNode) -> Number:
        args = [self._evaluate(arg) for arg in node.arguments]

        if len(args) == 2:
            handler = self.registry.operator(node.token)
            if handler is None:
                self.context.fail(create_unknown_binary_diagnostic(node.token))
                return Number(0)
            return to_number(handler(args[0], args[1]))

        if len(args) == 1:
            handler = self.registry.function(node.token)
            if handler is None:
                self.context.fail(create_unknown_unary_diagnostic(node.token))
                return Number(0)
            return to_number(handler(args[0]))

        if len(args) == 0:
            if not is_numeral(node.token):
                self.context.fail(create_unknown_expression_diagnostic(node.token))
                return Number(0)
            return parse_numeral(node.token)

        raise ValueError(f"Expression node '{node.token}' has {len(args)} arguments")
