"""
Per-evaluation state shared by the tokenizer, parser and evaluator.

Author: xwest
"""

import logging
from typing import Optional
from dataclasses import dataclass

from .errors import State, Diagnostic

logger = logging.getLogger(__name__)


@dataclass
class EvaluationContext:
    """
    State of a single top-level evaluation.

    A fresh context is created for every Calculator.evaluate call, so a
    failure never leaks into the next call.
    """
    radians: bool = True
    state: State = State.OK
    diagnostic: Optional[Diagnostic] = None

    def is_ok(self) -> bool:
        return self.state == State.OK

    def fail(self, diagnostic: Diagnostic):
        """Record a failure. Only the first one is kept."""
        if not self.is_ok():
            return
        self.state = diagnostic.state
        self.diagnostic = diagnostic
        logger.debug("evaluation failed: %s (%s)", diagnostic.message, diagnostic.code)
