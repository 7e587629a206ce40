"""Public package surface: greeting and echo functions, metadata, configuration.

- Domain exports: greeting, checked greeting, argument echo, quotes
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.behaviors import (
    GREETING_TEMPLATE,
    build_checked_greeting,
    build_greeting,
)
from .domain.echo import echo_classic, echo_debug, echo_join, echo_range, strip_program
from .domain.errors import MissingNameError
from .domain.quotes import get_quote

__all__ = [
    "GREETING_TEMPLATE",
    "MissingNameError",
    "build_checked_greeting",
    "build_greeting",
    "echo_classic",
    "echo_debug",
    "echo_join",
    "echo_range",
    "get_config",
    "get_quote",
    "print_info",
    "strip_program",
]
