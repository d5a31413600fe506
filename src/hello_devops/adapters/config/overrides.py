"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path, and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a ConfigOverride.

    Only the first ``=`` separates path from value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            component is empty.

    Examples:
        >>> parse_override("calculator.overflow=wrap")
        ConfigOverride(section='calculator', key_path=('overflow',), value='wrap')
        >>> parse_override("calculator.bits=16").value
        16
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    section, dot, key = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")

    key_path = tuple(key.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON when possible, otherwise keep the string.

    Examples:
        >>> coerce_value("64")
        64
        >>> coerce_value("false")
        False
        >>> coerce_value("checked")
        'checked'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def build_override_tree(overrides: Iterable[ConfigOverride]) -> dict[str, dict[str, object]]:
    """Fold parsed overrides into the nested mapping ``Config.with_overrides`` expects.

    Later overrides win over earlier ones for the same key.

    Raises:
        TypeError: If an override descends through a key that an earlier
            override set to a scalar.

    Example:
        >>> build_override_tree([ConfigOverride("a", ("b", "c"), 1), ConfigOverride("a", ("d",), 2)])
        {'a': {'b': {'c': 1}, 'd': 2}}
    """
    tree: dict[str, dict[str, object]] = {}
    for override in overrides:
        node: dict[str, object] = tree.setdefault(override.section, {})
        *parents, leaf = override.key_path
        for part in parents:
            child = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise TypeError(f"Expected dict at key {part!r}, got {type(child).__name__}")
            node = cast("dict[str, object]", child)
        node[leaf] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` assignment deep-merged on top.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"calculator": {"bits": 32}}, {})
        >>> apply_overrides(cfg, ("calculator.bits=8",))["calculator"]["bits"]
        8
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(build_override_tree(parse_override(raw) for raw in raw_overrides))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "build_override_tree",
    "coerce_value",
    "parse_override",
]
