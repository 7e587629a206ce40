"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are listed for reference only;
``lib_cli_exit_tools`` translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised through ``SystemExit`` by greetecho commands.

    Values follow errno and sysexits.h where one applies: 22 is EINVAL,
    78 is EX_CONFIG.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
