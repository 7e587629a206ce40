"""In-memory configuration adapters for tests.

Satisfy the same ports as the production loader and display functions
without touching the filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config; every section falls back to model defaults."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Swallow the display request."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
