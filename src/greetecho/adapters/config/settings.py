"""Typed views of the greeting, echo and demo configuration sections.

Sections are parsed once at the CLI boundary; commands only ever see the
frozen models below.

Contents:
    * :class:`GreetingSettings` - ``[greeting]`` section.
    * :class:`EchoSettings` - ``[echo]`` section.
    * :class:`DemoSettings` - ``[demo]`` section.
    * :func:`load_greeting_settings`, :func:`load_echo_settings`,
      :func:`load_demo_settings` - Config to model, raising ConfigurationError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from greetecho.domain.behaviors import GREETING_TEMPLATE
from greetecho.domain.echo import DEFAULT_SEPARATOR
from greetecho.domain.enums import EchoStyle
from greetecho.domain.errors import ConfigurationError
from greetecho.domain.quotes import DEFAULT_QUOTE, QUOTES

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class GreetingSettings(BaseModel):
    """Validated ``[greeting]`` section.

    Example:
        >>> GreetingSettings().template
        'Hi, {name}. Welcome!'
        >>> GreetingSettings(template="Hello {name}!").template
        'Hello {name}!'
    """

    model_config = ConfigDict(frozen=True)

    template: str = GREETING_TEMPLATE

    @field_validator("template")
    @classmethod
    def _require_name_placeholder(cls, v: str) -> str:
        if "{name}" not in v:
            raise ValueError("template must contain the '{name}' placeholder")
        try:
            v.format(name="")
        except (IndexError, KeyError, ValueError) as exc:
            raise ValueError(f"template is not a valid format string: {exc}") from exc
        return v


class EchoSettings(BaseModel):
    """Validated ``[echo]`` section.

    Example:
        >>> EchoSettings(default_style="join").default_style
        <EchoStyle.JOIN: 'join'>
    """

    model_config = ConfigDict(frozen=True)

    separator: str = DEFAULT_SEPARATOR
    default_style: EchoStyle = EchoStyle.ALL

    @field_validator("default_style", mode="before")
    @classmethod
    def _lower_style(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v


class DemoSettings(BaseModel):
    """Validated ``[demo]`` section.

    ``checked_name`` accepts anything scalar; ``--set demo.checked_name=42``
    arrives as an int after JSON coercion and is greeted as ``"42"``.
    """

    model_config = ConfigDict(frozen=True)

    name: str = "Ashish"
    checked_name: str = ""
    fatal_prefix: str = "app: "
    quote: str = DEFAULT_QUOTE

    @field_validator("name", "checked_name", mode="before")
    @classmethod
    def _stringify_scalars(cls, v: Any) -> Any:
        if isinstance(v, bool) or v is None:
            return v
        if isinstance(v, int | float):
            return str(v)
        return v

    @field_validator("quote")
    @classmethod
    def _known_quote(cls, v: str) -> str:
        if v not in QUOTES:
            raise ValueError(f"unknown quote {v!r}; choose from {', '.join(QUOTES)}")
        return v


def _load_section(config: Config, section: str, model: type[_ModelT]) -> _ModelT:
    raw: object = config.get(section, default={})
    if raw and not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{section}] must be a table, got {type(raw).__name__}")
    try:
        return model.model_validate(dict(cast("Mapping[str, object]", raw)) if raw else {})
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"Invalid [{section}] configuration: {details}") from exc


def load_greeting_settings(config: Config) -> GreetingSettings:
    """Parse the ``[greeting]`` section.

    Raises:
        ConfigurationError: If the section holds invalid values.

    Example:
        >>> load_greeting_settings(Config({}, {})).template
        'Hi, {name}. Welcome!'
    """
    return _load_section(config, "greeting", GreetingSettings)


def load_echo_settings(config: Config) -> EchoSettings:
    """Parse the ``[echo]`` section.

    Raises:
        ConfigurationError: If the section holds invalid values.
    """
    return _load_section(config, "echo", EchoSettings)


def load_demo_settings(config: Config) -> DemoSettings:
    """Parse the ``[demo]`` section.

    Raises:
        ConfigurationError: If the section holds invalid values.
    """
    return _load_section(config, "demo", DemoSettings)


__all__ = [
    "DemoSettings",
    "EchoSettings",
    "GreetingSettings",
    "load_demo_settings",
    "load_echo_settings",
    "load_greeting_settings",
]
