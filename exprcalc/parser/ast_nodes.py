"""
Expression tree node for exprcalc.

Author: xwest
"""

from typing import List
from dataclasses import dataclass, field


@dataclass
class ExpressionNode:
    """
    One node of a parsed expression.

    The number of arguments decides what the node is:
        0 - numeric leaf, token is the numeral text
        1 - prefix/postfix operator or function application
        2 - binary operator application

    Each node owns its arguments; trees never share subtrees.
    """
    token: str = ""
    arguments: List['ExpressionNode'] = field(default_factory=list)

    @property
    def arity(self) -> int:
        return len(self.arguments)

    @property
    def is_leaf(self) -> bool:
        return not self.arguments

    def children(self) -> List['ExpressionNode']:
        return self.arguments

    def depth(self) -> int:
        """Height of the tree rooted here (a leaf has depth 1)."""
        if not self.arguments:
            return 1
        return 1 + max(child.depth() for child in self.arguments)

    def __str__(self) -> str:
        """Prefix notation, e.g. '(+ 2 (* 3 4))'."""
        if not self.arguments:
            return self.token
        args = " ".join(str(arg) for arg in self.arguments)
        return f"({self.token} {args})"
