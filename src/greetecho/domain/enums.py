"""Type-safe domain enums for echo styles and output formats."""

from __future__ import annotations

from enum import Enum


class EchoStyle(str, Enum):
    """Ways of rendering the argument echo.

    Attributes:
        CLASSIC: Index-based loop with a growing separator.
        RANGE: Iteration over the arguments with a growing separator.
        JOIN: A single ``str.join`` call.
        DEBUG: Bracketed rendering of the argument list.
        ALL: Every style above, one line each, in that order.

    Example:
        >>> EchoStyle.JOIN.value
        'join'
        >>> EchoStyle.ALL == "all"
        True
    """

    CLASSIC = "classic"
    RANGE = "range"
    JOIN = "join"
    DEBUG = "debug"
    ALL = "all"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "EchoStyle",
    "OutputFormat",
]
