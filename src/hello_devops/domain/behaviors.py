"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

CANONICAL_GREETING = "Hello DevOps World - Enhanced with New Features!"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    Provide a deterministic success path that the entry point, smoke
    tests, and packaging checks can rely on.

    Returns:
        The canonical greeting string.

    Example:
        >>> build_greeting()
        'Hello DevOps World - Enhanced with New Features!'
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]
