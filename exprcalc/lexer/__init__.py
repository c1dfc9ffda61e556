"""
exprcalc Lexer Package

Turns expression text into numerals and registered symbols, one token
at a time, with single-token rewind for the parser.

Author: xwest
"""

from .tokens import Token, TokenKind
from .lexer import Tokenizer

__all__ = [
    "Tokenizer",
    "Token",
    "TokenKind",
]
