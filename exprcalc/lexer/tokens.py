"""
Token definitions for the exprcalc tokenizer.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenKind(Enum):
    """Kinds of lexemes the tokenizer produces."""
    NUMBER = auto()     # 42, 3.14, or a constant already expanded to its numeral
    SYMBOL = auto()     # any registered operator, function or delimiter
    END = auto()        # no input left
    INVALID = auto()    # input that matches nothing registered


@dataclass(frozen=True)
class Token:
    """
    A single lexeme read from the input.

    text is what the parser works with; lexeme is what was actually in
    the input. They differ only for constants ('pi' -> '3.14159...').
    """
    kind: TokenKind
    text: str
    lexeme: str
    offset: int     # Position of the first character in the input

    def __str__(self) -> str:
        if self.text != self.lexeme:
            return f"{self.kind.name}({self.lexeme!r} -> {self.text!r})"
        return f"{self.kind.name}({self.text!r})"

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    @property
    def is_symbol(self) -> bool:
        return self.kind == TokenKind.SYMBOL

    @property
    def is_end(self) -> bool:
        """True for END and INVALID, neither of which carries usable text."""
        return self.kind in (TokenKind.END, TokenKind.INVALID)
