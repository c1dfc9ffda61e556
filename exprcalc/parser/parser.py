"""
exprcalc Precedence-Climbing Parser

Builds an ExpressionNode tree from the token stream. Binary operators
are handled by precedence climbing; grouping, prefix functions and
postfix operators by plain recursive descent.

Grammar, informally:

    binary  := simple (op binary(prec(op)))*     while prec(op) > min
    simple  := number postfix*
             | '(' binary ')' postfix*
             | prefix simple

An operator binds only if its precedence is strictly greater than the
current minimum, so chains of equal precedence associate to the left:
2^3^2 is (2^3)^2 and 8-4-2 is (8-4)-2.

Author: xwest
"""

import logging
from typing import Optional

from ..context import EvaluationContext
from ..errors import create_unexpected_end_diagnostic, create_unclosed_paren_diagnostic
from ..lexer import Tokenizer, Token, TokenKind
from ..registry import SymbolRegistry
from .ast_nodes import ExpressionNode

logger = logging.getLogger(__name__)


class Parser:
    """
    Parser for a single expression.

    Failures are recorded on the evaluation context; once one has been
    recorded the parser stops descending and returns placeholder nodes,
    which the caller must not evaluate.
    """

    def __init__(self, source: str, registry: SymbolRegistry,
                 context: Optional[EvaluationContext] = None):
        """
        Initialize the parser.

        Args:
            source: Expression text, already case-folded
            registry: Symbols and operator precedence
            context: Where failures are recorded (a private one if omitted)
        """
        self.registry = registry
        self.context = context if context is not None else EvaluationContext()
        self.tokenizer = Tokenizer(source, registry, self.context)

    def parse(self) -> ExpressionNode:
        """
        Parse the whole expression.

        Input left over after a complete expression (an unmatched ')' or
        a second operand) is not consumed and not reported.
        """
        tree = self._parse_binary_expression(0)
        if self.context.is_ok():
            logger.debug("parsed %r as %s", self.tokenizer.source, tree)
        return tree

    def _parse_binary_expression(self, min_priority: int) -> ExpressionNode:
        """Parse operators binding tighter than min_priority."""
        lhs = self._parse_simple_expression()

        while self.context.is_ok():
            op = self.tokenizer.next_token()
            priority = self.registry.priority(op.text) if op.is_symbol else 0

            if priority <= min_priority:
                self.tokenizer.rewind(op)
                break

            rhs = self._parse_binary_expression(priority)
            lhs = ExpressionNode(op.text, [lhs, rhs])

        return lhs

    def _parse_simple_expression(self) -> ExpressionNode:
        """Parse a numeral, a parenthesised group or a prefix application."""
        token = self.tokenizer.next_token()

        if not self.context.is_ok():
            return ExpressionNode()

        if token.kind == TokenKind.END:
            self.context.fail(create_unexpected_end_diagnostic(token.offset))
            return ExpressionNode()

        if token.is_number:
            return self._parse_postfix(self._number_node(token))

        if token.text == "(":
            return self._parse_grouping()

        operand = self._parse_simple_expression()
        return ExpressionNode(token.text, [operand])

    def _parse_grouping(self) -> ExpressionNode:
        """Parse the rest of '( ... )' once the '(' has been consumed."""
        expr = self._parse_binary_expression(0)
        if not self.context.is_ok():
            return ExpressionNode()

        closing = self.tokenizer.next_token()
        if closing.text != ")":
            self.context.fail(create_unclosed_paren_diagnostic(closing.lexeme, closing.offset))
            return ExpressionNode()

        return self._parse_postfix(expr)

    def _parse_postfix(self, operand: ExpressionNode) -> ExpressionNode:
        """Apply any postfix operators that follow operand ('3!!')."""
        while True:
            token = self.tokenizer.next_token()
            if not (token.is_symbol and self.registry.is_postfix(token.text)):
                self.tokenizer.rewind(token)
                return operand
            operand = ExpressionNode(token.text, [operand])

    @staticmethod
    def _number_node(token: Token) -> ExpressionNode:
        # Negative constants expand to '-' applied to their magnitude
        if token.text.startswith("-"):
            return ExpressionNode("-", [ExpressionNode(token.text[1:])])
        return ExpressionNode(token.text)
