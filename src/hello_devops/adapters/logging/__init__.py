"""Logging adapter - lib_log_rich runtime bootstrap.

Contents:
    * :class:`.setup.LoggingConfigModel` - Typed ``[lib_log_rich]`` section
    * :func:`.setup.init_logging` - Idempotent runtime initialisation
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
