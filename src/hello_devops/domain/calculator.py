"""Stateless calculator exposing the greeting and integer arithmetic.

Contents:
    * :class:`Calculator` - greeting accessor plus ``add`` and ``multiply``.
    * :class:`CalculationResult` - immutable record of one evaluation.
    * :func:`parse_operand` - strict text-to-operand conversion.
    * :func:`wrap_to_width` - two's-complement reduction into a signed width.

System Role:
    Pure domain code. No logging, no configuration lookup, no I/O. The overflow
    behaviour is chosen by whoever constructs the calculator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .behaviors import build_greeting
from .enums import Operation, OverflowPolicy
from .errors import ArithmeticOverflowError, InvalidOperandError

SUPPORTED_BITS: tuple[int, ...] = (8, 16, 32, 64)
"""Integer widths accepted by the wrap and checked policies."""

DEFAULT_BITS = 32

_OPERAND_PATTERN = re.compile(r"[+-]?\d+")


def signed_range(bits: int) -> tuple[int, int]:
    """Return the inclusive (min, max) of a signed two's-complement integer.

    Example:
        >>> signed_range(8)
        (-128, 127)
        >>> signed_range(32)
        (-2147483648, 2147483647)
    """
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_to_width(value: int, bits: int) -> int:
    """Reduce ``value`` into the signed ``bits``-wide range by wraparound.

    Example:
        >>> wrap_to_width(2147483648, 32)
        -2147483648
        >>> wrap_to_width(-129, 8)
        127
        >>> wrap_to_width(42, 64)
        42
    """
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _require_operand(value: object) -> int:
    # bool is an int subclass but never a meaningful operand
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperandError(f"operand must be an integer, got {value!r}")
    return value


def parse_operand(text: str) -> int:
    """Convert command-line text into an integer operand.

    Accepts an optional sign followed by decimal digits, with surrounding
    whitespace ignored. Floats, hex literals and digit separators are
    rejected.

    Args:
        text: Raw operand text.

    Returns:
        The parsed integer.

    Raises:
        InvalidOperandError: If ``text`` is not a decimal integer.

    Examples:
        >>> parse_operand(" -17 ")
        -17
        >>> parse_operand("+5")
        5
        >>> parse_operand("2.5")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidOperandError: operand must be an integer, got '2.5'
    """
    stripped = text.strip()
    if not _OPERAND_PATTERN.fullmatch(stripped):
        raise InvalidOperandError(f"operand must be an integer, got {text!r}")
    return int(stripped)


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """Outcome of a single calculator evaluation."""

    operation: Operation
    operands: tuple[int, int]
    result: int

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping of the evaluation."""
        return {
            "operation": self.operation.value,
            "operands": list(self.operands),
            "result": self.result,
        }


@dataclass(frozen=True, slots=True)
class Calculator:
    """Greeting accessor and integer arithmetic with a fixed overflow policy.

    The default policy is :attr:`OverflowPolicy.UNBOUNDED`, under which
    ``add`` and ``multiply`` are exactly Python's ``+`` and ``*``. Instances
    hold no mutable state; every call is independent and idempotent.

    Attributes:
        overflow: Policy applied to operands and results.
        bits: Signed width used by the wrap and checked policies.

    Example:
        >>> calc = Calculator()
        >>> calc.add(2, 3)
        5
        >>> calc.multiply(5, 5)
        25
        >>> Calculator(OverflowPolicy.WRAP, bits=32).add(2147483647, 1)
        -2147483648
    """

    overflow: OverflowPolicy = OverflowPolicy.UNBOUNDED
    bits: int = DEFAULT_BITS

    def __post_init__(self) -> None:
        if self.bits not in SUPPORTED_BITS:
            raise ValueError(f"bits must be one of {', '.join(map(str, SUPPORTED_BITS))}, got {self.bits}")

    def get_greeting(self) -> str:
        """Return the canonical greeting."""
        return build_greeting()

    def add(self, a: int, b: int) -> int:
        """Return the sum of two integers under the overflow policy."""
        return self.evaluate(Operation.ADD, a, b).result

    def multiply(self, a: int, b: int) -> int:
        """Return the product of two integers under the overflow policy."""
        return self.evaluate(Operation.MULTIPLY, a, b).result

    def evaluate(self, operation: Operation, a: int, b: int) -> CalculationResult:
        """Apply ``operation`` to both operands and record the outcome.

        Raises:
            InvalidOperandError: If an operand is not an ``int`` or, under the
                checked policy, lies outside the signed range.
            ArithmeticOverflowError: If the checked policy rejects the result.
        """
        left = self._admit(_require_operand(a))
        right = self._admit(_require_operand(b))
        raw = left + right if operation is Operation.ADD else left * right
        return CalculationResult(
            operation=operation,
            operands=(left, right),
            result=self._fit(operation, left, right, raw),
        )

    def _admit(self, value: int) -> int:
        if self.overflow is OverflowPolicy.UNBOUNDED:
            return value
        if self.overflow is OverflowPolicy.WRAP:
            return wrap_to_width(value, self.bits)
        low, high = signed_range(self.bits)
        if not low <= value <= high:
            raise InvalidOperandError(f"operand {value} does not fit int{self.bits}")
        return value

    def _fit(self, operation: Operation, a: int, b: int, value: int) -> int:
        if self.overflow is OverflowPolicy.UNBOUNDED:
            return value
        if self.overflow is OverflowPolicy.WRAP:
            return wrap_to_width(value, self.bits)
        low, high = signed_range(self.bits)
        if not low <= value <= high:
            raise ArithmeticOverflowError(f"{operation.value}({a}, {b}) overflows int{self.bits}")
        return value


__all__ = [
    "DEFAULT_BITS",
    "SUPPORTED_BITS",
    "CalculationResult",
    "Calculator",
    "parse_operand",
    "signed_range",
    "wrap_to_width",
]
