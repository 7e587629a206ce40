"""Callable Protocols for the three services a greetecho run needs.

Production adapters read layered files and start lib_log_rich; the
in-memory adapters return an empty Config and stay silent. Both are plain
module functions checked against these Protocols under ``TYPE_CHECKING``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged Config holding ``[greeting]``, ``[echo]``, ``[demo]`` and ``[lib_log_rich]``."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print a Config, or one section of it, for the ``config`` command."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime that every command binds its job context to."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
