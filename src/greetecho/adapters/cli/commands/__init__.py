"""CLI command implementations.

Contents:
    * Echo command from :mod:`.echo`
    * Greeting and quote commands from :mod:`.greet`
    * Demo program from :mod:`.demo`
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
    * Logging commands from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config, cli_config_generate_examples
from .demo import cli_demo
from .echo import cli_echo
from .greet import cli_greet, cli_quote
from .info import cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_config",
    "cli_config_generate_examples",
    "cli_demo",
    "cli_echo",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_quote",
]
