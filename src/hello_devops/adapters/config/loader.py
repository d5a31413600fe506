"""Layered configuration loading for hello-devops.

Configuration is merged by lib_layered_config in the order
defaults -> app -> host -> user -> dotenv -> env, with the bundled
``defaultconfig.toml`` as the lowest layer.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from hello_devops import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to splice into config paths.

    Args:
        profile: Requested profile, e.g. ``staging``.
        max_length: Upper bound on the name length; lib_layered_config's
            default when omitted.

    Raises:
        ValueError: On empty names, path separators, traversal attempts,
            reserved device names, or overlong names.

    Examples:
        >>> validate_profile("ci")

        >>> validate_profile("../secrets")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../secrets
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the location of the ``defaultconfig.toml`` shipped in the wheel.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One short-lived CLI process reads its configuration a handful of times at most.
@lru_cache(maxsize=4)
def _read_cached(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration for an optional profile.

    On Linux the user layer lives at ``~/.config/hello-devops/config.toml``;
    a profile inserts ``profile/<name>/`` into every layer path. Environment
    variables carry the slug-derived prefix lib_layered_config expects.

    Args:
        profile: Optional profile name; validated before any file is read.
        start_dir: Directory where ``.env`` discovery begins. Defaults to the
            current working directory.

    Returns:
        Immutable Config with per-key provenance.

    Raises:
        ValueError: If ``profile`` is not a safe name.

    Example:
        >>> config = get_config()
        >>> config.get("calculator.overflow", default="unbounded")
        'unbounded'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_cached(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached configurations so the next call re-reads every layer."""
    _read_cached.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "ConfigLoaderProtocol",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
