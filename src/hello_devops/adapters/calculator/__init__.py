"""Calculator adapter - typed settings for the domain calculator.

Contents:
    * :class:`.config.CalculatorConfig` - Validated ``[calculator]`` settings
    * :func:`.config.load_calculator_config_from_dict` - Config dict loader
"""

from __future__ import annotations

from .config import CalculatorConfig, load_calculator_config_from_dict

__all__ = [
    "CalculatorConfig",
    "load_calculator_config_from_dict",
]
