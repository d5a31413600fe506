"""Metadata and greeting CLI commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Emit the canonical greeting.
"""

from __future__ import annotations

import logging

import rich_click as click

from hello_devops import __init__conf__
from hello_devops.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import job_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with job_scope("cli-info", command="info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the canonical greeting.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_hello).output
        'Hello DevOps World - Enhanced with New Features!\\n'
    """
    with job_scope("cli-hello", command="hello"):
        logger.info("Executing hello command")
        click.echo(build_greeting())


__all__ = ["cli_hello", "cli_info"]
