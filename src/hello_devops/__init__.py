"""Public package surface exposing the calculator, greeting, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: Calculator and the canonical greeting
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    CANONICAL_GREETING,
    build_greeting,
)
from .domain.calculator import Calculator
from .domain.enums import OverflowPolicy

__all__ = [
    "CANONICAL_GREETING",
    "Calculator",
    "OverflowPolicy",
    "build_greeting",
    "get_config",
    "print_info",
]
