"""
Configuration for exprcalc calculators.

Author: xwest
"""

from typing import Any, Dict, Mapping
from dataclasses import dataclass, field, fields


@dataclass
class CalculatorConfig:
    """Configuration for a Calculator instance"""
    radians: bool = True                # Angle mode used when evaluate() gets none
    install_builtins: bool = True       # Start with pi, e, sin, +, ... registered
    extra_constants: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'CalculatorConfig':
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})
