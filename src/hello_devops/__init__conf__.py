"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by the metadata tests; the
``LAYEREDCONF_*`` identifiers drive lib_layered_config path discovery.

Contents:
    * Metadata constants (name, title, version, homepage, author).
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as published in ``pyproject.toml``.
name = "hello_devops"
#: One-line description used as CLI help.
title = "Greeting and integer arithmetic demo for exercising CI/CD pipelines"
#: Package version (keep in sync with ``pyproject.toml``).
version = "1.2.0"
#: Project homepage.
homepage = "https://github.com/example/hello-devops"
#: Author name.
author = "hello-devops maintainers"
#: Author e-mail.
author_email = "maintainers@example.com"
#: Console script name.
shell_command = "hello-devops"

#: Vendor directory used by lib_layered_config on macOS/Windows.
LAYEREDCONF_VENDOR = "example"
#: Application directory used by lib_layered_config on macOS/Windows.
LAYEREDCONF_APP = "Hello DevOps"
#: Slug used by lib_layered_config for XDG paths and environment prefixes.
LAYEREDCONF_SLUG = "hello-devops"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_devops:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
