"""Render the merged configuration through lib_layered_config."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _render
from rich.console import Console

from hello_devops.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` as annotated TOML or as JSON.

    Pending log records are flushed first so they do not interleave with
    the rendered configuration.

    Args:
        config: Merged configuration to show.
        output_format: ``HUMAN`` for TOML with provenance comments, ``JSON``
            for machine consumption.
        section: Restrict output to one top-level table, e.g. ``calculator``.
        console: Rich console override, mainly for tests.
        profile: Profile name echoed in provenance comments.

    Raises:
        ValueError: If ``section`` is not present in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    _render(
        config,
        output_format=LibOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
