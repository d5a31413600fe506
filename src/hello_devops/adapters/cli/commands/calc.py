"""Arithmetic CLI commands backed by the domain Calculator.

Contents:
    * :func:`cli_add` - Print the sum of two integers.
    * :func:`cli_multiply` - Print the product of two integers.

Operands arrive as text and are parsed by the domain so that malformed
input, out-of-range operands, overflow and bad configuration each map to
their own exit code.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, NoReturn

import rich_click as click

from hello_devops.adapters.calculator.config import CalculatorConfig
from hello_devops.domain.calculator import SUPPORTED_BITS, CalculationResult, parse_operand
from hello_devops.domain.enums import Operation, OutputFormat, OverflowPolicy
from hello_devops.domain.errors import ArithmeticOverflowError, ConfigurationError, InvalidOperandError

from ..constants import OPERAND_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ._shared import echo_json, job_scope

logger = logging.getLogger(__name__)


def calculation_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the operand arguments and per-call overrides shared by add and multiply."""
    options = [
        click.argument("a", metavar="A"),
        click.argument("b", metavar="B"),
        click.option(
            "--format",
            "output_format",
            type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
            default=OutputFormat.HUMAN.value,
            help="Output format (plain result or JSON record)",
        ),
        click.option(
            "--overflow",
            type=click.Choice([p.value for p in OverflowPolicy], case_sensitive=False),
            default=None,
            help="Override calculator.overflow for this call",
        ),
        click.option(
            "--bits",
            type=click.Choice([str(b) for b in SUPPORTED_BITS]),
            default=None,
            help="Override calculator.bits for this call",
        ),
    ]
    return functools.reduce(lambda f, opt: opt(f), reversed(options), func)


def _resolve_settings(cli_ctx: CLIContext, overflow: str | None, bits: str | None) -> CalculatorConfig:
    """Read ``[calculator]`` and layer the command-line overrides on top.

    Raises:
        ConfigurationError: If the configured section is invalid.
    """
    settings = cli_ctx.services.load_calculator_config_from_dict(cli_ctx.config.as_dict())
    overrides: dict[str, Any] = {}
    if overflow is not None:
        overrides["overflow"] = overflow.lower()
    if bits is not None:
        overrides["bits"] = int(bits)
    if not overrides:
        return settings
    return CalculatorConfig.model_validate({**settings.model_dump(), **overrides})


def _fail(message: str, code: ExitCode) -> NoReturn:
    click.echo(f"\nError: {message}", err=True)
    raise SystemExit(code)


def _evaluate(
    cli_ctx: CLIContext,
    operation: Operation,
    a: str,
    b: str,
    overflow: str | None,
    bits: str | None,
) -> CalculationResult:
    """Run one calculation, turning domain errors into exit codes."""
    try:
        settings = _resolve_settings(cli_ctx, overflow, bits)
    except ConfigurationError as exc:
        logger.error("Invalid calculator configuration", extra={"error": str(exc)})
        _fail(f"Invalid calculator configuration: {exc}", ExitCode.CONFIG_ERROR)

    try:
        return settings.build_calculator().evaluate(operation, parse_operand(a), parse_operand(b))
    except InvalidOperandError as exc:
        logger.warning("Rejected operand", extra={"error": str(exc)})
        _fail(str(exc), ExitCode.INVALID_ARGUMENT)
    except ArithmeticOverflowError as exc:
        logger.warning("Result out of range", extra={"error": str(exc)})
        _fail(str(exc), ExitCode.RESULT_OUT_OF_RANGE)


def _run(ctx: click.Context, operation: Operation, a: str, b: str, **opts: Any) -> None:
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(str(opts["output_format"]).lower())
    job_id = f"cli-{operation.value}"

    with job_scope(job_id, command=operation.value, format=fmt.value):
        logger.info("Evaluating %s", operation.value, extra={"a": a, "b": b})
        outcome = _evaluate(cli_ctx, operation, a, b, opts["overflow"], opts["bits"])
        if fmt is OutputFormat.JSON:
            echo_json(outcome.as_dict())
        else:
            click.echo(str(outcome.result))


@click.command("add", context_settings=OPERAND_CONTEXT_SETTINGS)
@calculation_options
@click.pass_context
def cli_add(ctx: click.Context, a: str, b: str, **opts: Any) -> None:
    """Print A + B.

    \b
    Examples:
      hello-devops add 2 3                          -> 5
      hello-devops add --overflow wrap 2147483647 1 -> -2147483648
    """
    _run(ctx, Operation.ADD, a, b, **opts)


@click.command("multiply", context_settings=OPERAND_CONTEXT_SETTINGS)
@calculation_options
@click.pass_context
def cli_multiply(ctx: click.Context, a: str, b: str, **opts: Any) -> None:
    """Print A * B.

    \b
    Examples:
      hello-devops multiply 5 5                          -> 25
      hello-devops multiply --format json 2 3
    """
    _run(ctx, Operation.MULTIPLY, a, b, **opts)


__all__ = ["cli_add", "cli_multiply"]
