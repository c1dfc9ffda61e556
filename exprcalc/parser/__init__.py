"""
exprcalc Parser Package

Precedence-climbing parser producing ExpressionNode trees.

Author: xwest
"""

from .ast_nodes import ExpressionNode
from .parser import Parser

__all__ = [
    "Parser",
    "ExpressionNode",
]
