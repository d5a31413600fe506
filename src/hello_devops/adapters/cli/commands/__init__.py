"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info and greeting commands from :mod:`.info`
    * Arithmetic commands from :mod:`.calc`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .calc import cli_add, cli_multiply
from .config import cli_config
from .info import cli_hello, cli_info

__all__ = [
    "cli_add",
    "cli_config",
    "cli_hello",
    "cli_info",
    "cli_multiply",
]
