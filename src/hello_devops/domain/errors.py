"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[calculator]`` section holds values that fail
    validation. Typically caught at CLI boundaries to provide user-friendly
    error messages.

    Example:
        >>> from hello_devops.domain.errors import ConfigurationError
        >>> err = ConfigurationError("calculator.bits must be one of 8, 16, 32, 64")
        >>> str(err)
        'calculator.bits must be one of 8, 16, 32, 64'
    """


class InvalidOperandError(ValueError):
    """An operand is not an integer or does not fit the configured width.

    Inherits from ValueError so generic ``except ValueError`` handlers
    still catch it.

    Example:
        >>> from hello_devops.domain.errors import InvalidOperandError
        >>> err = InvalidOperandError("operand must be an integer, got 'abc'")
        >>> isinstance(err, ValueError)
        True
    """


class ArithmeticOverflowError(ArithmeticError):
    """A result left the signed range under the checked overflow policy.

    Example:
        >>> from hello_devops.domain.errors import ArithmeticOverflowError
        >>> err = ArithmeticOverflowError("add(2147483647, 1) overflows int32")
        >>> isinstance(err, ArithmeticError)
        True
    """


__all__ = [
    "ArithmeticOverflowError",
    "ConfigurationError",
    "InvalidOperandError",
]
