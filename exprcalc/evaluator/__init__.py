"""
exprcalc Evaluator Package

Author: xwest
"""

from .evaluator import Evaluator

__all__ = [
    "Evaluator",
]
