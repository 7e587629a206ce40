"""CLI demo stories: the quote, greeting, checked-greeting chain."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from greetecho.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_demo_with_default_config_ends_on_the_error_path(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["demo"], obj=production_factory)

    assert result.exit_code == 22
    assert "Hello, world." in result.stdout
    assert "Hi, Ashish. Welcome!" in result.stdout
    assert "app: Please provide a name" in result.stderr
    assert "Hello, 世界" not in result.stdout


@pytest.mark.os_agnostic
def test_demo_with_a_checked_name_reaches_the_closing_line(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", "demo.checked_name=Ada", "demo"], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Hello, world.",
        "Hi, Ashish. Welcome!",
        "Hi, Ada. Welcome!",
        "Hello, 世界",
    ]


@pytest.mark.os_agnostic
def test_demo_reads_every_setting_from_config(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context(
        {
            "greeting": {"template": "Hey {name}"},
            "demo": {"name": "Grace", "checked_name": "", "fatal_prefix": "fatal: ", "quote": "optimize"},
        }
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["demo"], obj=factory)

    assert result.exit_code == 22
    assert "If a program is too slow, it must have a loop." in result.stdout
    assert "Hey Grace" in result.stdout
    assert "fatal: Please provide a name" in result.stderr


@pytest.mark.os_agnostic
def test_demo_with_unknown_quote_exits_with_code_78(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"demo": {"quote": "proverb"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["demo"], obj=factory)

    assert result.exit_code == 78
    assert "unknown quote" in result.stderr
