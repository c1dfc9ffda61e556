"""
exprcalc Tokenizer - reads numerals and registered symbols from an expression

The tokenizer is pulled one token at a time by the parser, which may
push the last token back with rewind() when it turns out not to be the
operator it was looking for.

Author: xwest
"""

import re
from typing import List, Optional

from ..context import EvaluationContext
from ..errors import create_trailing_point_diagnostic, create_unknown_symbol_diagnostic
from ..registry import SymbolRegistry
from .tokens import Token, TokenKind


class Tokenizer:
    """
    Cursor over an expression string.

    Numerals are recognized first; everything else must match a symbol
    in the registry, trying the registry's matching order from the
    highest-priority end. Constants are expanded to their numeral text.
    """

    # At most one decimal point; a trailing point is caught afterwards
    number_pattern = re.compile(r'[0-9]+(?:\.[0-9]*)?')

    def __init__(self, source: str, registry: SymbolRegistry,
                 context: Optional[EvaluationContext] = None):
        """
        Initialize the tokenizer.

        Args:
            source: Expression text, already case-folded by the caller
            registry: Symbols to recognize
            context: Where failures are recorded (a private one if omitted)
        """
        self.source = source
        self.registry = registry
        self.context = context if context is not None else EvaluationContext()
        self.pos = 0

    def next_token(self) -> Token:
        """Consume and return the next token."""
        self._skip_whitespace()

        if self.pos >= len(self.source):
            return Token(TokenKind.END, "", "", self.pos)

        start = self.pos

        match = self.number_pattern.match(self.source, start)
        if match:
            lexeme = match.group(0)
            self.pos = match.end()
            if lexeme.endswith('.'):
                self.context.fail(create_trailing_point_diagnostic(lexeme, start))
            return Token(TokenKind.NUMBER, lexeme, lexeme, start)

        symbol = self.registry.match(self.source, start)
        if symbol is None:
            self.context.fail(create_unknown_symbol_diagnostic(self.source[start:], start))
            return Token(TokenKind.INVALID, "", "", start)

        self.pos = start + len(symbol)

        constant = self.registry.constant_text(symbol)
        if constant is not None:
            return Token(TokenKind.NUMBER, constant, symbol, start)

        return Token(TokenKind.SYMBOL, symbol, symbol, start)

    def rewind(self, token: Token):
        """Un-consume token so the next call to next_token returns it again."""
        self.pos = token.offset

    def tokenize(self) -> List[Token]:
        """
        Read every remaining token.

        Stops at the first END or INVALID token, which is included.
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.is_end:
                return tokens

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self.pos += 1
