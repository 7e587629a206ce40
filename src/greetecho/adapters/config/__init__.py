"""Configuration adapter - loading, display, overrides, and typed sections.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - Pydantic models for the greetecho sections
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import (
    DemoSettings,
    EchoSettings,
    GreetingSettings,
    load_demo_settings,
    load_echo_settings,
    load_greeting_settings,
)

__all__ = [
    "DemoSettings",
    "EchoSettings",
    "GreetingSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_demo_settings",
    "load_echo_settings",
    "load_greeting_settings",
]
