"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the signature of the adapter function
that implements it, so plain module-level functions satisfy the ports
through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Adapter types (``Config``,
    ``CalculatorConfig``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.calculator.config import CalculatorConfig


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadCalculatorConfigFromDict(Protocol):
    """Build validated calculator settings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> CalculatorConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadCalculatorConfigFromDict",
]
