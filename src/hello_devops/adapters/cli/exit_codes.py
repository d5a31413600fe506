"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values so
pipelines can tell a bad operand from an overflow or a broken config file.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0-1: generic success / failure
    * 2: command-line usage error (Click)
    * 22: EINVAL
    * 34: ERANGE
    * 78: EX_CONFIG (sysexits.h)

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.RESULT_OUT_OF_RANGE)
        34
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    RESULT_OUT_OF_RANGE = 34
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
