"""One-time lib_log_rich initialization shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - Boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent runtime setup with stdlib bridging.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greetecho import __init__conf__


class LoggingConfigModel(BaseModel):
    """Parsed ``[lib_log_rich]`` section.

    Unknown keys are kept and handed to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="greet", console_level="DEBUG").model_dump()["console_level"]
        'DEBUG'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime from ``config`` unless already running.

    Enables ``.env`` loading so ``LOG_*`` variables are honoured, then routes
    stdlib ``logging`` records through lib_log_rich. Later calls are no-ops.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
