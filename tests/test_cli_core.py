"""CLI core stories: traceback, main entry, greeting, info, unknown command."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from hello_devops import __init__conf__
from hello_devops.adapters import cli as cli_mod
from hello_devops.composition import build_production
from hello_devops.domain.behaviors import CANONICAL_GREETING


def _explode() -> None:
    raise RuntimeError("metadata lookup exploded")


@pytest.mark.os_agnostic
def test_snapshot_traceback_state_returns_disabled_by_default(managed_traceback_state: None) -> None:
    """snapshot_traceback_state returns both flags disabled initially."""
    assert cli_mod.snapshot_traceback_state() == (False, False)


@pytest.mark.os_agnostic
def test_apply_traceback_preferences_enables_both_flags(managed_traceback_state: None) -> None:
    cli_mod.apply_traceback_preferences(True)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_restore_traceback_state_resets_flags_to_previous(managed_traceback_state: None) -> None:
    previous = cli_mod.snapshot_traceback_state()
    cli_mod.apply_traceback_preferences(True)

    cli_mod.restore_traceback_state(previous)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_traceback_flag_is_active_during_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    """--traceback enables both flags while the command runs."""
    notes: list[tuple[bool, bool]] = []

    def record() -> None:
        notes.append(
            (
                lib_cli_exit_tools.config.traceback,
                lib_cli_exit_tools.config.traceback_force_color,
            )
        )

    monkeypatch.setattr(__init__conf__, "print_info", record)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert exit_code == 0
    assert notes == [(True, True)]


@pytest.mark.os_agnostic
def test_traceback_flags_restored_after_info_command(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", lambda: None)

    cli_mod.main(["--traceback", "info"], services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_when_main_is_called_it_invokes_cli_with_services_factory(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """main() hands the services factory to the CLI via ctx.obj."""
    result = cli_mod.main(["info"], services_factory=build_production)

    assert result == 0
    assert __init__conf__.name in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_main_is_called_without_factory_it_refuses(managed_traceback_state: None) -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        cli_mod.main(["info"])


@pytest.mark.os_agnostic
def test_when_cli_runs_without_arguments_the_greeting_is_printed(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, [], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout == f"{CANONICAL_GREETING}\n"


@pytest.mark.os_agnostic
def test_when_main_receives_no_arguments_it_greets_and_exits_zero(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    assert CANONICAL_GREETING in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_when_traceback_is_requested_without_command_the_greeting_is_printed(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--traceback"], obj=testing_factory)

    assert result.exit_code == 0
    assert CANONICAL_GREETING in result.output


@pytest.mark.os_agnostic
def test_hello_command_prints_exactly_the_greeting(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["hello"], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout == f"{CANONICAL_GREETING}\n"


@pytest.mark.os_agnostic
def test_help_lists_every_command(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--help"], obj=testing_factory)

    assert result.exit_code == 0
    for name in ("add", "multiply", "hello", "info", "config"):
        assert name in result.output


@pytest.mark.os_agnostic
def test_traceback_flag_displays_full_exception_traceback(
    monkeypatch: pytest.MonkeyPatch,
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback prints the complete traceback on failure."""
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    exit_code = cli_mod.main(["--traceback", "info"], services_factory=build_production)

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exit_code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: metadata lookup exploded" in plain_err
    assert "[TRUNCATED" not in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_unexpected_error_surfaces_through_cli_runner(
    monkeypatch: pytest.MonkeyPatch,
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    monkeypatch.setattr(__init__conf__, "print_info", _explode)

    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=testing_factory)

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_info_command_displays_project_metadata(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj=production_factory)

    assert result.exit_code == 0
    assert f"Info for {__init__conf__.name}:" in result.output
    assert __init__conf__.version in result.output


@pytest.mark.os_agnostic
def test_unknown_command_shows_no_such_command_error(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["does-not-exist"], obj=testing_factory)

    assert result.exit_code != 0
    assert "No such command" in result.output


@pytest.mark.os_agnostic
def test_restore_traceback_false_keeps_flags_enabled(
    managed_traceback_state: None,
) -> None:
    cli_mod.apply_traceback_preferences(False)

    cli_mod.main(["--traceback", "info"], restore_traceback=False, services_factory=build_production)

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True
