"""Module entry stories ensuring ``python -m greetecho`` mirrors the console script."""

from __future__ import annotations

import runpy
import subprocess
import sys

import pytest

from greetecho import __init__conf__, entry
from greetecho.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["greetecho"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("greetecho.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_echo_prints_argument_tail(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["greetecho", "echo", "--style", "join", "a", "b", "c"])

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("greetecho.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert "a b c" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    expected_commands = {
        "cli_config",
        "cli_config_generate_examples",
        "cli_demo",
        "cli_echo",
        "cli_greet",
        "cli_info",
        "cli_logdemo",
        "cli_quote",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_demo_exits_nonzero() -> None:
    """The real process terminates with 22 and the prefixed message, as the demo intends."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "greetecho", "demo"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 22
    assert "Hi, Ashish. Welcome!" in result.stdout
    assert "app: Please provide a name" in result.stderr
    assert "SystemExit" not in result.stderr


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "greetecho", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_greets(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["greetecho", "greet", "Ashish"])

    exit_code = entry.main()

    assert exit_code == 0
    assert "Hi, Ashish. Welcome!" in capsys.readouterr().out
