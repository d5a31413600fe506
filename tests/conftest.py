"""Shared pytest fixtures for calculator, CLI, and module-entry tests.

All shared fixtures live here and are discovered implicitly by pytest.
Fixture names read as plain English at the call site.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from hello_devops.adapters.memory.calculator import CalculatorConfigSpy
    from hello_devops.composition import AppServices

_COVERAGE_BASENAME = ".coverage.hello_devops"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete a leftover coverage database and its SQLite sidecar files."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite locking is unreliable on network mounts, and a crashed run can
    leave journal files behind. Runs before pytest-cov creates its
    ``Coverage()`` object, so ``COVERAGE_FILE`` is honoured however pytest
    was started.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project-root ``.env`` so local runs can set configuration and ``LOG_*`` variables."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**replacements: Any) -> AppServices:
    """Return production services with selected ports replaced."""
    from dataclasses import replace

    from hello_devops.composition import build_production

    return replace(build_production(), **replacements)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` holds command output only; log records emitted by the
    lib_log_rich runtime land on stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config files, real logging)."""
    from hello_devops.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory (no files, no logging runtime)."""
    from hello_devops.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards.

    Use whenever a test reads or mutates ``lib_cli_exit_tools.config``.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test.

    Only clears before, since a test may monkeypatch get_config and lose
    its ``cache_clear`` attribute.
    """
    from hello_devops.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without filesystem I/O.

    Example:
        def test_bits(config_factory) -> None:
            config = config_factory({"calculator": {"bits": 16}})
            assert config.get("calculator.bits") == 16
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only the I/O boundary (``get_config``) is replaced; the Config object,
    calculator settings loader, display, and logging stay real.

    Example:
        def test_wrap(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"calculator": {"overflow": "wrap"}})
            result = cli_runner.invoke(cli, ["add", "2147483647", "1"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = _services_with(get_config=_fake_get_config)
        return lambda: services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profiles it is asked for."""

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with(get_config=_capturing_get_config)
        return lambda: services

    return _inject


@dataclass
class CalculatorCliContext:
    """Services factory bundled with the spy that records settings lookups."""

    factory: Callable[[], Any]
    spy: CalculatorConfigSpy


@pytest.fixture
def calculator_cli_context() -> Callable[[dict[str, Any]], CalculatorCliContext]:
    """Create in-memory services whose calculator settings come from a spy.

    The config dict becomes the Config handed to the CLI; the spy parses
    its ``[calculator]`` section with the real model and records every call.
    """
    from dataclasses import replace

    from hello_devops.adapters.memory import CalculatorConfigSpy as CalculatorConfigSpyImpl
    from hello_devops.composition import build_testing

    def _create(config_data: dict[str, Any]) -> CalculatorCliContext:
        spy = CalculatorConfigSpyImpl()
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_testing(spy=spy), get_config=_fake_get_config)
        return CalculatorCliContext(factory=lambda: services, spy=spy)

    return _create
