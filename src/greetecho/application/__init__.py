"""Application layer - port definitions for adapter functions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
