"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Run the CLI and turn every outcome into an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetecho import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from greetecho.composition import AppServices


def _report_exception(exc: BaseException) -> int:
    tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(tracebacks_enabled)
    length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group in non-standalone mode and map the outcome to an exit code."""
    from .root import cli

    # lib_cli_exit_tools.run_cli cannot forward ctx.obj, so its handling is reproduced here.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands print their own message before exiting with an int code.
        if isinstance(exc.code, int):
            return exc.code
        return _report_exception(exc)
    except BaseException as exc:
        # KeyboardInterrupt included: lib_cli_exit_tools maps it to 130.
        return _report_exception(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return its exit code.

    Shared by the console script and ``python -m greetecho``.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Restore the traceback flags that were active before the run.
        services_factory: Returns the AppServices to run with; pass
            ``build_production`` outside of tests.

    Returns:
        Exit code of the run.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greetecho.composition import build_production
        >>> main(["greet", "Ashish"], services_factory=build_production)  # doctest: +SKIP
        Hi, Ashish. Welcome!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Worker threads must not tear down the shared logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
