"""
exprcalc - embeddable, extensible arithmetic expression evaluator

Evaluates expressions such as "2 + 3 * sin(pi / 2)" over a symbol set
that the host application can extend with its own operators, functions
and constants.

Architecture:
    exprcalc/
    ├── registry/        # Constants, functions, operators and precedence
    ├── lexer/           # Numerals and longest-match symbol tokens
    ├── parser/          # Precedence climbing into ExpressionNode trees
    ├── evaluator/       # Post-order tree walk
    └── calculator.py    # Public entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@exprcalc.org"
__license__ = "MIT"

from .calculator import Calculator, evaluate_string
from .config import CalculatorConfig
from .errors import State, Diagnostic, ExpressionError
from .lexer import Tokenizer, Token, TokenKind
from .parser import Parser, ExpressionNode
from .evaluator import Evaluator
from .registry import SymbolRegistry, install_builtins

__all__ = [
    # Core classes
    "Calculator",
    "CalculatorConfig",
    "SymbolRegistry",
    "Tokenizer",
    "Parser",
    "Evaluator",
    "ExpressionNode",
    "Token",
    "TokenKind",
    "install_builtins",
    "evaluate_string",

    # Error handling
    "State",
    "Diagnostic",
    "ExpressionError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
