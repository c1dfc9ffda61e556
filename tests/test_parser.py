"""
Test suite for the exprcalc parser.

Tests cover:
- Precedence and associativity of binary operators
- Grouping, prefix functions and postfix operators
- Syntax errors and their positions
- Tree shape invariants

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprcalc.context import EvaluationContext
from exprcalc.errors import State
from exprcalc.parser import Parser, ExpressionNode
from exprcalc.registry import SymbolRegistry, install_builtins


class TestParser(unittest.TestCase):
    """Test cases for the parser."""

    def setUp(self):
        """Set up test fixtures."""
        self.registry = install_builtins(SymbolRegistry(), lambda: True)
        self.context = EvaluationContext()

    def _parse(self, source: str) -> ExpressionNode:
        return Parser(source, self.registry, self.context).parse()

    def _shape(self, source: str) -> str:
        tree = self._parse(source)
        self.assertTrue(self.context.is_ok(), f"Unexpected failure: {self.context.diagnostic}")
        return str(tree)

    def test_single_number(self):
        """A numeral parses to a leaf."""
        tree = self._parse("42")
        self.assertTrue(tree.is_leaf)
        self.assertEqual(tree.token, "42")

    def test_multiplication_binds_tighter(self):
        self.assertEqual(self._shape("2+3*4"), "(+ 2 (* 3 4))")
        self.assertEqual(self._shape("2*3+4"), "(+ (* 2 3) 4)")

    def test_grouping_overrides_precedence(self):
        self.assertEqual(self._shape("(2+3)*4"), "(* (+ 2 3) 4)")
        self.assertEqual(self._shape("((7))"), "7")

    def test_equal_precedence_associates_left(self):
        """Operators of the same level, '^' included, chain to the left."""
        self.assertEqual(self._shape("8-4-2"), "(- (- 8 4) 2)")
        self.assertEqual(self._shape("8/4/2"), "(/ (/ 8 4) 2)")
        self.assertEqual(self._shape("2^3^2"), "(^ (^ 2 3) 2)")

    def test_mixed_levels(self):
        self.assertEqual(self._shape("1+2*3^2-4"), "(- (+ 1 (* 2 (^ 3 2))) 4)")

    def test_prefix_functions(self):
        """Functions apply to the following simple expression."""
        self.assertEqual(self._shape("sin(0)"), "(sin 0)")
        self.assertEqual(self._shape("sqrt 4 + 1"), "(+ (sqrt 4) 1)")
        self.assertEqual(self._shape("--3"), "(- (- 3))")

    def test_unary_minus_binds_tightest(self):
        """Prefix operators apply before any binary operator."""
        self.assertEqual(self._shape("-2^2"), "(^ (- 2) 2)")
        self.assertEqual(self._shape("2^-1"), "(^ 2 (- 1))")

    def test_postfix_factorial(self):
        """'!' may follow its operand, and still works as a prefix."""
        self.assertEqual(self._shape("3!"), "(! 3)")
        self.assertEqual(self._shape("3!!"), "(! (! 3))")
        self.assertEqual(self._shape("(1+2)!"), "(! (+ 1 2))")
        self.assertEqual(self._shape("-3!"), "(- (! 3))")
        self.assertEqual(self._shape("2*3!"), "(* 2 (! 3))")
        self.assertEqual(self._shape("!3"), "(! 3)")

    def test_postfix_attaches_to_nearest_operand(self):
        """A postfix symbol after 'f(x)' applies to the group, not to f(x)."""
        self.assertEqual(self._shape("sqrt(4)!"), "(sqrt (! 4))")
        self.assertEqual(self._shape("sin(0)!"), "(sin (! 0))")
        self.assertEqual(self._shape("(sqrt(4))!"), "(! (sqrt 4))")

    def test_negative_constant_becomes_negation(self):
        """A constant with a negative value parses as '-' over its magnitude."""
        self.registry.add_constant("neg", -2.5)
        self.assertEqual(self._shape("neg*2"), "(* (- 2.5) 2)")

    def test_trailing_input_is_left_alone(self):
        """Leftovers after a complete expression are not an error."""
        self.assertEqual(self._shape("2 3"), "2")
        self.assertEqual(self._shape("1)"), "1")

    def test_empty_input(self):
        self._parse("")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)

    def test_missing_right_operand(self):
        self._parse("2+")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)

    def test_dangling_prefix(self):
        self._parse("-")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)

    def test_unclosed_paren(self):
        """Missing ')' is reported at the end of input."""
        self._parse("(1+2")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)
        self.assertEqual(self.context.diagnostic.offset, 4)
        self.assertIn("')'", self.context.diagnostic.message)

    def test_wrong_closing_token(self):
        """Something other than ')' after a group is invalid."""
        self._parse("(1 2)")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)
        self.assertEqual(self.context.diagnostic.token, "2")

    def test_unknown_symbol_in_operator_position(self):
        self._parse("1 @ 2")
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)
        self.assertEqual(self.context.diagnostic.offset, 2)

    def test_stray_close_paren_is_a_prefix(self):
        """')' at the start parses as an (unknown) prefix application."""
        tree = self._parse(")5")
        self.assertTrue(self.context.is_ok())
        self.assertEqual(tree.token, ")")
        self.assertEqual(tree.arity, 1)

    def test_arity_invariant(self):
        """Every node has 0, 1 or 2 arguments."""
        tree = self._parse("-(1+2)*sqrt(3)!^2 % 5")

        def check(node):
            self.assertIn(node.arity, (0, 1, 2))
            for child in node.children():
                check(child)

        check(tree)
        self.assertGreater(tree.depth(), 2)

    def test_custom_operator_precedence(self):
        """Registered operators take part in precedence climbing."""
        self.registry.add_operator("avg", lambda a, b: (a + b) / 2, 1)
        self.registry.add_operator("**", lambda a, b: a ** b, 4)
        self.assertEqual(self._shape("1+1 avg 4"), "(avg (+ 1 1) 4)")
        self.assertEqual(self._shape("2*3**2"), "(* 2 (** 3 2))")

    def test_zero_precedence_operator_never_binds(self):
        """An operator registered at precedence 0 ends the expression."""
        self.registry.add_operator("~", lambda a, b: a, 0)
        self.assertEqual(self._shape("1 ~ 2"), "1")
        self.assertEqual(self._shape("1+2 ~ 3"), "(+ 1 2)")


if __name__ == "__main__":
    unittest.main()
