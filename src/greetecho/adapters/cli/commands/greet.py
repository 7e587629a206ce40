"""Greeting and quote commands.

Contents:
    * :func:`cli_greet` - Greet a name, optionally refusing an empty one.
    * :func:`cli_quote` - Print a quote from the quote table.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetecho.adapters.config.settings import load_greeting_settings
from greetecho.domain.behaviors import build_checked_greeting, build_greeting
from greetecho.domain.errors import MissingNameError
from greetecho.domain.quotes import DEFAULT_QUOTE, QUOTES, get_quote

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_missing_name, load_section_or_exit

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False, default="")
@click.option(
    "--checked/--unchecked",
    default=False,
    help="Refuse an empty name with exit code 22 instead of greeting nobody",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str, checked: bool) -> None:
    r"""Print a welcome message for NAME.

    \b
    greetecho greet Ashish            ->  Hi, Ashish. Welcome!
    greetecho greet --checked ""      ->  Error: Please provide a name (exit 22)
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_section_or_exit(load_greeting_settings, cli_ctx.config)

    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "checked": checked}):
        logger.info("Greeting", extra={"name_length": len(name), "checked": checked})
        if not checked:
            click.echo(build_greeting(name, template=settings.template))
            return
        try:
            message = build_checked_greeting(name, template=settings.template)
        except MissingNameError as exc:
            exit_missing_name(exc)
        click.echo(message)


@click.command("quote", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key", type=click.Choice(list(QUOTES)), default=DEFAULT_QUOTE, required=False)
def cli_quote(key: str) -> None:
    """Print the quote stored under KEY (default: hello)."""
    with lib_log_rich.runtime.bind(job_id="cli-quote", extra={"command": "quote", "key": key}):
        logger.debug("Printing quote %s", key)
        click.echo(get_quote(key))


__all__ = ["cli_greet", "cli_quote"]
