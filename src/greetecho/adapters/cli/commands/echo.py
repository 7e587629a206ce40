"""Argument echo command.

Contents:
    * :func:`cli_echo` - Print the given arguments in one or all echo styles.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetecho.adapters.config.settings import load_echo_settings
from greetecho.domain.echo import render_lines
from greetecho.domain.enums import EchoStyle

from ..constants import PASSTHROUGH_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import load_section_or_exit

logger = logging.getLogger(__name__)


@click.command("echo", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@click.option(
    "--style",
    type=click.Choice([s.value for s in EchoStyle], case_sensitive=False),
    default=None,
    help="Echo style; defaults to [echo].default_style (all)",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli_echo(ctx: click.Context, style: str | None, args: tuple[str, ...]) -> None:
    r"""Print ARGS back, space-separated.

    Everything after the first argument is printed as given, options included.

    \b
    greetecho echo a b c               ->  four lines: a b c / a b c / a b c / [a b c]
    greetecho echo --style join a b c  ->  a b c
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_section_or_exit(load_echo_settings, cli_ctx.config)
    effective_style = EchoStyle(style.lower()) if style else settings.default_style

    with lib_log_rich.runtime.bind(job_id="cli-echo", extra={"command": "echo", "style": effective_style.value}):
        logger.info("Echoing arguments", extra={"count": len(args), "style": effective_style.value})
        for line in render_lines(args, effective_style, settings.separator):
            click.echo(line)


__all__ = ["cli_echo"]
