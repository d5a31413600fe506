"""Shared helpers for CLI command modules.

Contents:
    * :func:`job_scope` - Bind a lib_log_rich job context around a command.
    * :func:`echo_json` - Print a mapping as JSON on stdout.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator, Mapping

import lib_log_rich.runtime
import orjson
import rich_click as click


@contextlib.contextmanager
def job_scope(job_id: str, **extra: object) -> Iterator[None]:
    """Bind ``job_id`` and ``extra`` to every log record emitted inside the block.

    Commands run under in-memory services never start the logging runtime;
    there the block runs unbound.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=job_id, extra=dict(extra)):
        yield


def echo_json(payload: Mapping[str, object]) -> None:
    """Print ``payload`` as indented JSON followed by a newline."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(orjson.dumps(dict(payload), option=orjson.OPT_INDENT_2).decode("utf-8"))


__all__ = ["echo_json", "job_scope"]
