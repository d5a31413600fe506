"""Root CLI command group and global option handling.

Defines the top-level ``hello-devops`` group. Global flags (``--traceback``,
``--profile``, ``--set``) are handled here once, before any subcommand runs.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from hello_devops import __init__conf__
from hello_devops.adapters.config.overrides import apply_overrides
from hello_devops.domain.behaviors import build_greeting

from .commands._shared import job_scope
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from hello_devops.composition import AppServices

logger = logging.getLogger(__name__)


def _load_profile_config(services: AppServices, profile: str | None) -> Config:
    """Load configuration for ``profile``, reporting unsafe names as usage errors."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed ones as usage errors.

    Raises:
        click.UsageError: If an override is malformed or descends into a
            key that is not a table.
    """
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. calculator.overflow=wrap",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and dispatch to a subcommand.

    Without a subcommand the canonical greeting is printed, so a bare
    ``hello-devops`` doubles as a smoke test for an installation.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_devops.composition import build_testing
        >>> result = CliRunner().invoke(cli, [], obj=build_testing)
        >>> result.output.strip()
        'Hello DevOps World - Enhanced with New Features!'
    """
    # ctx.obj is the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _apply_cli_overrides(_load_profile_config(services, profile), set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        with job_scope("cli-root", command="<none>"):
            logger.info("No subcommand given, printing greeting")
            click.echo(build_greeting())


# Commands import from package ancestors, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_add, cli_config, cli_hello, cli_info, cli_multiply

    for cmd in (cli_info, cli_hello, cli_add, cli_multiply, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
