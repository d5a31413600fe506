"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the calculator, its value objects, and the greeting that form the
core of the application.

Contents:
    * :mod:`.behaviors` - Canonical greeting
    * :mod:`.calculator` - Calculator with greeting, add, and multiply
    * :mod:`.enums` - Domain enumerations (OutputFormat, Operation, OverflowPolicy)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .calculator import (
    SUPPORTED_BITS,
    CalculationResult,
    Calculator,
    parse_operand,
)
from .enums import Operation, OutputFormat, OverflowPolicy
from .errors import ArithmeticOverflowError, ConfigurationError, InvalidOperandError

__all__ = [
    # Behaviors
    "CANONICAL_GREETING",
    "build_greeting",
    # Calculator
    "SUPPORTED_BITS",
    "CalculationResult",
    "Calculator",
    "parse_operand",
    # Enums
    "Operation",
    "OutputFormat",
    "OverflowPolicy",
    # Errors
    "ArithmeticOverflowError",
    "ConfigurationError",
    "InvalidOperandError",
]
