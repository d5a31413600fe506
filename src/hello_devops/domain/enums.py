"""Type-safe domain enums for output formats, operations, and overflow policies."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration and result display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Operation(str, Enum):
    """Arithmetic operations offered by the calculator.

    Example:
        >>> Operation.ADD.value
        'add'
        >>> Operation("multiply") is Operation.MULTIPLY
        True
    """

    ADD = "add"
    MULTIPLY = "multiply"


class OverflowPolicy(str, Enum):
    """How results outside a fixed-width signed range are treated.

    Attributes:
        UNBOUNDED: Python integers, never overflow. The width is ignored.
        WRAP: Two's-complement wraparound into the configured width.
        CHECKED: Reject results outside the configured width.

    Example:
        >>> OverflowPolicy("wrap") is OverflowPolicy.WRAP
        True
        >>> OverflowPolicy.UNBOUNDED == "unbounded"
        True
    """

    UNBOUNDED = "unbounded"
    WRAP = "wrap"
    CHECKED = "checked"


__all__ = [
    "Operation",
    "OutputFormat",
    "OverflowPolicy",
]
