"""Composition root: the services every greetecho command reaches through ``ctx.obj``.

The root CLI group calls ``get_config`` and ``init_logging`` once per run;
only the ``config`` command uses ``display_config``. Greeting, echo and
quote logic needs no services and is imported directly from the domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Config loading, config display and logging setup for one CLI run."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Layered config files, rich display, and the configured lib_log_rich runtime."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Empty config (every section at its model defaults), silent display and logging."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "get_config",
    "display_config",
    "init_logging",
    "AppServices",
    "build_production",
    "build_testing",
]
