"""
Test suite for the exprcalc tokenizer.

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
from exprcalc.lexer import Tokenizer, TokenKind
from exprcalc.registry import SymbolRegistry, install_builtins


class TestTokenizer(unittest.TestCase):
    """Test cases for the tokenizer."""

    def setUp(self):
        """Set up test fixtures."""
        self.registry = install_builtins(SymbolRegistry(), lambda: True)
        self.context = EvaluationContext()

    def _tokenizer(self, source: str) -> Tokenizer:
        return Tokenizer(source, self.registry, self.context)

    def _texts(self, source: str):
        return [token.text for token in self._tokenizer(source).tokenize()]

    def test_numbers_and_operators(self):
        """Simple expression splits into numerals and symbols."""
        tokens = self._tokenizer("12+3.5*(4)").tokenize()
        self.assertEqual(
            [(t.kind, t.text) for t in tokens],
            [
                (TokenKind.NUMBER, "12"),
                (TokenKind.SYMBOL, "+"),
                (TokenKind.NUMBER, "3.5"),
                (TokenKind.SYMBOL, "*"),
                (TokenKind.SYMBOL, "("),
                (TokenKind.NUMBER, "4"),
                (TokenKind.SYMBOL, ")"),
                (TokenKind.END, ""),
            ]
        )
        self.assertTrue(self.context.is_ok())

    def test_whitespace_is_skipped(self):
        """Whitespace between and around tokens is ignored."""
        self.assertEqual(self._texts("  1 \t+\n 2  "), ["1", "+", "2", ""])

    def test_offsets(self):
        """Each token records where it started."""
        tokens = self._tokenizer("1 + sqrt 4").tokenize()
        self.assertEqual([t.offset for t in tokens], [0, 2, 4, 9, 10])

    def test_longest_symbol_wins(self):
        """'asin' is one token, not 'a' followed by 'sin'."""
        self.assertEqual(self._texts("asin(1)"), ["asin", "(", "1", ")", ""])
        self.assertEqual(self._texts("log2 8"), ["log2", "8", ""])

    def test_constant_is_expanded(self):
        """Constants become numerals but keep their source lexeme."""
        token = self._tokenizer("pi").next_token()
        self.assertEqual(token.kind, TokenKind.NUMBER)
        self.assertEqual(token.lexeme, "pi")
        self.assertTrue(token.text.startswith("3.14159"))
        self.assertIn("->", str(token))

    def test_trailing_point_is_invalid(self):
        """'1.' is rejected."""
        token = self._tokenizer("1.").next_token()
        self.assertEqual(token.kind, TokenKind.NUMBER)
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)
        self.assertEqual(self.context.diagnostic.offset, 0)

    def test_second_decimal_point_ends_numeral(self):
        """'1.2.3' reads '1.2' and then fails on '.3'."""
        tokens = self._tokenizer("1.2.3").tokenize()
        self.assertEqual(tokens[0].text, "1.2")
        self.assertEqual(tokens[1].kind, TokenKind.INVALID)
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)

    def test_unknown_symbol(self):
        """Input that matches nothing is invalid syntax."""
        tokenizer = self._tokenizer("1 @ 2")
        tokenizer.next_token()
        token = tokenizer.next_token()
        self.assertEqual(token.kind, TokenKind.INVALID)
        self.assertEqual(token.text, "")
        self.assertEqual(tokenizer.pos, 2)
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)
        self.assertEqual(self.context.diagnostic.token, "@")

    def test_end_of_input(self):
        """Empty and blank input produce END without failing."""
        self.assertEqual(self._tokenizer("").next_token().kind, TokenKind.END)
        self.assertEqual(self._tokenizer("   ").next_token().kind, TokenKind.END)
        self.assertTrue(self.context.is_ok())

    def test_rewind_restores_position(self):
        """A rewound token is read again, even when its text was substituted."""
        tokenizer = self._tokenizer("2 pi")
        tokenizer.next_token()
        peeked = tokenizer.next_token()
        tokenizer.rewind(peeked)
        self.assertEqual(tokenizer.next_token(), peeked)
        self.assertEqual(tokenizer.next_token().kind, TokenKind.END)

    def test_unicode_digits_are_not_numerals(self):
        """Only ASCII digits start a numeral."""
        self._tokenizer("²").next_token()
        self.assertEqual(self.context.state, State.INVALID_SYNTAX)


if __name__ == "__main__":
    unittest.main()
