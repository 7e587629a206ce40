"""In-memory logging adapter for tests.

Commands bind a job context on every run, so a runtime must exist. This one
writes nothing: console and backend thresholds sit above every record the
commands emit, and the queue is off so no worker thread outlives a test.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from greetecho import __init__conf__


def _quiet_runtime_config() -> lib_log_rich.runtime.RuntimeConfig:
    return lib_log_rich.runtime.RuntimeConfig(
        service=__init__conf__.name,
        environment="test",
        console_level="CRITICAL",
        backend_level="CRITICAL",
        enable_ring_buffer=False,
        queue_enabled=False,
    )


def init_logging_in_memory(config: Config) -> None:
    """Start a silent lib_log_rich runtime unless one is already running.

    ``config`` is ignored; the in-memory configuration has no
    ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(_quiet_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["init_logging_in_memory"]
