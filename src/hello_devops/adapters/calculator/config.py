"""Calculator configuration model and loader.

Provides the CalculatorConfig Pydantic model for validated, immutable
calculator settings and the loader that creates it from the ``[calculator]``
section of the layered configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hello_devops.domain.calculator import DEFAULT_BITS, SUPPORTED_BITS, Calculator
from hello_devops.domain.enums import OverflowPolicy
from hello_devops.domain.errors import ConfigurationError


class CalculatorConfig(BaseModel):
    """Validated, immutable calculator configuration.

    Example:
        >>> config = CalculatorConfig(overflow="wrap", bits=16)
        >>> config.overflow
        <OverflowPolicy.WRAP: 'wrap'>
        >>> config.bits
        16

        >>> CalculatorConfig().overflow.value
        'unbounded'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    overflow: OverflowPolicy = OverflowPolicy.UNBOUNDED
    bits: int = DEFAULT_BITS

    @field_validator("overflow", mode="before")
    @classmethod
    def _normalise_policy(cls, v: Any) -> Any:
        """Accept policy names case-insensitively, as environment variables often arrive upper-cased.

        Examples:
            >>> CalculatorConfig._normalise_policy(" WRAP ")
            'wrap'
            >>> CalculatorConfig._normalise_policy(OverflowPolicy.CHECKED)
            <OverflowPolicy.CHECKED: 'checked'>
        """
        if isinstance(v, str) and not isinstance(v, OverflowPolicy):
            return v.strip().lower()
        return v

    @field_validator("bits")
    @classmethod
    def _validate_bits(cls, v: int) -> int:
        if v not in SUPPORTED_BITS:
            raise ValueError(f"bits must be one of {', '.join(map(str, SUPPORTED_BITS))}, got {v}")
        return v

    def build_calculator(self) -> Calculator:
        """Construct a domain Calculator carrying these settings.

        Example:
            >>> CalculatorConfig(overflow="checked", bits=8).build_calculator()
            Calculator(overflow=<OverflowPolicy.CHECKED: 'checked'>, bits=8)
        """
        return Calculator(overflow=self.overflow, bits=self.bits)


def _describe_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"])
        field = f"calculator.{location}" if location else "calculator"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


def load_calculator_config_from_dict(config_dict: Mapping[str, Any]) -> CalculatorConfig:
    """Load CalculatorConfig from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    CalculatorConfig model. Missing sections yield the defaults.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'calculator' section.

    Returns:
        Validated calculator settings.

    Raises:
        ConfigurationError: When the section holds invalid values.

    Example:
        >>> load_calculator_config_from_dict({"calculator": {"overflow": "wrap"}}).overflow.value
        'wrap'
        >>> load_calculator_config_from_dict({}).bits
        32
    """
    section: Any = config_dict.get("calculator", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[calculator] must be a table, got {type(section).__name__}")

    try:
        return CalculatorConfig.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error(exc)) from exc


__all__ = [
    "CalculatorConfig",
    "load_calculator_config_from_dict",
]
