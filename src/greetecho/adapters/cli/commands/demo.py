"""Demo program chaining the quote, the greeting and the checked greeting.

Contents:
    * :func:`cli_demo` - Run the demo; terminates with exit code 22 when the
      checked name is empty.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetecho.adapters.config.settings import load_demo_settings, load_greeting_settings
from greetecho.domain.behaviors import build_checked_greeting, build_greeting
from greetecho.domain.errors import MissingNameError
from greetecho.domain.quotes import get_quote

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_missing_name, load_section_or_exit

logger = logging.getLogger(__name__)

CLOSING_LINE = "Hello, 世界"


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_demo(ctx: click.Context) -> None:
    r"""Print a quote, greet [demo].name, then greet [demo].checked_name.

    The shipped checked_name is empty, so the run ends on the error path.
    Give it a value to reach the closing line:

    \b
    greetecho --set demo.checked_name=Ada demo
    """
    cli_ctx = get_cli_context(ctx)
    greeting = load_section_or_exit(load_greeting_settings, cli_ctx.config)
    demo = load_section_or_exit(load_demo_settings, cli_ctx.config)

    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo"}):
        logger.info("Running demo", extra={"quote": demo.quote})
        click.echo(get_quote(demo.quote))
        click.echo(build_greeting(demo.name, template=greeting.template))

        try:
            result = build_checked_greeting(demo.checked_name, template=greeting.template)
        except MissingNameError as exc:
            exit_missing_name(exc, prefix=demo.fatal_prefix)

        click.echo(result)
        click.echo(CLOSING_LINE)


__all__ = ["CLOSING_LINE", "cli_demo"]
