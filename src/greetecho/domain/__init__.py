"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting functions (plain and checked)
    * :mod:`.echo` - Argument echo variants
    * :mod:`.quotes` - Quote table for the demo program
    * :mod:`.enums` - Domain enumerations (EchoStyle, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATE,
    build_checked_greeting,
    build_greeting,
)
from .echo import (
    echo_classic,
    echo_debug,
    echo_join,
    echo_range,
    render_echo,
    render_lines,
    strip_program,
)
from .enums import EchoStyle, OutputFormat
from .errors import ConfigurationError, MissingNameError, UnknownQuoteError
from .quotes import QUOTES, get_quote

__all__ = [
    # Behaviors
    "GREETING_TEMPLATE",
    "build_checked_greeting",
    "build_greeting",
    # Echo
    "echo_classic",
    "echo_debug",
    "echo_join",
    "echo_range",
    "render_echo",
    "render_lines",
    "strip_program",
    # Quotes
    "QUOTES",
    "get_quote",
    # Enums
    "EchoStyle",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "MissingNameError",
    "UnknownQuoteError",
]
