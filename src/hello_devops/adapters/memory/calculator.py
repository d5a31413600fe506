"""In-memory calculator settings adapter for tests.

Records every dictionary it is handed so tests can assert on what the CLI
passed through, then delegates to the real model for validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..calculator.config import CalculatorConfig, load_calculator_config_from_dict


@dataclass
class CalculatorConfigSpy:
    """Capture calculator settings lookups.

    Attributes:
        seen: Every configuration mapping passed to :meth:`load`.
        forced: When set, returned instead of parsing the mapping.
    """

    seen: list[dict[str, Any]] = field(default_factory=list)
    forced: CalculatorConfig | None = None

    def load(self, config_dict: Mapping[str, Any]) -> CalculatorConfig:
        """Satisfy the LoadCalculatorConfigFromDict port."""
        self.seen.append(dict(config_dict))
        if self.forced is not None:
            return self.forced
        return load_calculator_config_from_dict(config_dict)


def load_calculator_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> CalculatorConfig:
    """Return default settings regardless of the mapping."""
    return CalculatorConfig()


__all__ = [
    "CalculatorConfigSpy",
    "load_calculator_config_from_dict_in_memory",
]
