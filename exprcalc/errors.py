"""
Error handling for exprcalc.

Failures are recorded, not raised: every stage marks the evaluation
context with a State and a Diagnostic describing the first problem found.
ExpressionError exists for callers who prefer exceptions (see
calculator.evaluate_string).

Author: xwest
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass


class State(Enum):
    """Outcome of the most recent evaluation."""
    OK = "ok"
    INVALID_SYNTAX = "invalid_syntax"
    UNKNOWN_BINARY_OPERATOR = "unknown_binary_operator"
    UNKNOWN_UNARY_OPERATOR = "unknown_unary_operator"
    UNKNOWN_EXPRESSION_TYPE = "unknown_expression_type"


# Common error codes for categorization
ERROR_CODES = {
    "E001": "Invalid syntax",
    "E002": "Unknown binary operator",
    "E003": "Unknown unary operator",
    "E004": "Unknown expression type",
}

STATE_CODES = {
    State.INVALID_SYNTAX: "E001",
    State.UNKNOWN_BINARY_OPERATOR: "E002",
    State.UNKNOWN_UNARY_OPERATOR: "E003",
    State.UNKNOWN_EXPRESSION_TYPE: "E004",
}


@dataclass
class Diagnostic:
    """Describes why an evaluation failed."""
    state: State
    message: str
    offset: Optional[int] = None   # Position in the input, None for evaluation errors
    token: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def code(self) -> Optional[str]:
        return STATE_CODES.get(self.state)

    def __str__(self) -> str:
        result = f"ERROR[{self.code}]: {self.message}"
        if self.offset is not None:
            result += f"\n  --> position {self.offset}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class ExpressionError(Exception):
    """
    Exception raised when an expression cannot be evaluated.

    Wraps the Diagnostic recorded by the failing stage.
    """

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def state(self) -> State:
        return self.diagnostic.state

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common diagnostics

def create_trailing_point_diagnostic(lexeme: str, offset: int) -> Diagnostic:
    """Numeral that ends on a bare decimal point, e.g. '1.'"""
    return Diagnostic(
        state=State.INVALID_SYNTAX,
        message=f"Invalid numeric literal: '{lexeme}'",
        offset=offset,
        token=lexeme,
        help_text="A decimal point must be followed by at least one digit."
    )


def create_unknown_symbol_diagnostic(remaining: str, offset: int) -> Diagnostic:
    """Input that matches no numeral and no registered symbol."""
    char = remaining[:1]
    return Diagnostic(
        state=State.INVALID_SYNTAX,
        message=f"Unrecognized symbol at '{remaining[:10]}'",
        offset=offset,
        token=char,
        help_text="Register it with add_function, add_operator or add_constant."
    )


def create_unexpected_end_diagnostic(offset: int) -> Diagnostic:
    """Input ended where an operand was required."""
    return Diagnostic(
        state=State.INVALID_SYNTAX,
        message="Unexpected end of input, expected an operand",
        offset=offset,
    )


def create_unclosed_paren_diagnostic(found: str, offset: int) -> Diagnostic:
    """Group opened with '(' but not closed by ')'."""
    found_str = f"'{found}'" if found else "end of input"
    return Diagnostic(
        state=State.INVALID_SYNTAX,
        message=f"Expected ')', found {found_str}",
        offset=offset,
        token=found or None,
        help_text="Add a closing parenthesis ')'."
    )


def create_unknown_binary_diagnostic(symbol: str) -> Diagnostic:
    return Diagnostic(
        state=State.UNKNOWN_BINARY_OPERATOR,
        message=f"Unknown binary operator '{symbol}'",
        token=symbol,
    )


def create_unknown_unary_diagnostic(symbol: str) -> Diagnostic:
    return Diagnostic(
        state=State.UNKNOWN_UNARY_OPERATOR,
        message=f"Unknown unary operator or function '{symbol}'",
        token=symbol,
    )


def create_unknown_expression_diagnostic(text: str) -> Diagnostic:
    return Diagnostic(
        state=State.UNKNOWN_EXPRESSION_TYPE,
        message=f"Cannot evaluate '{text}' as a number",
        token=text,
        help_text="Leaf expressions must be unsigned decimal numerals."
    )
