"""Shared helpers for CLI command modules.

Contents:
    * :func:`load_section_or_exit` - Parse a config section, exiting with CONFIG_ERROR on failure.
    * :func:`exit_missing_name` - Report a MissingNameError and terminate the command.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NoReturn, TypeVar

import rich_click as click
from lib_layered_config import Config

from greetecho.domain.errors import ConfigurationError, MissingNameError

from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_SettingsT = TypeVar("_SettingsT")


def load_section_or_exit(loader: Callable[[Config], _SettingsT], config: Config) -> _SettingsT:
    """Run a settings loader, converting ConfigurationError into exit code 78.

    Raises:
        SystemExit: With CONFIG_ERROR (78) when the section is invalid.
    """
    try:
        return loader(config)
    except ConfigurationError as exc:
        logger.error("Invalid configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def exit_missing_name(exc: MissingNameError, *, prefix: str = "Error: ") -> NoReturn:
    """Log the missing name, print ``prefix`` + message to stderr and exit.

    Raises:
        SystemExit: Always, with INVALID_ARGUMENT (22).
    """
    logger.error("Greeting requested without a name", extra={"error": str(exc)})
    click.echo(f"{prefix}{exc}", err=True)
    raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = [
    "exit_missing_name",
    "load_section_or_exit",
]
