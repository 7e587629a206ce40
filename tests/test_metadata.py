"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from greetecho import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from greetecho import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "greetecho" in captured
    assert "version" in captured


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    project = cast(dict[str, Any], _load_pyproject()["project"])

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command in project["scripts"]


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    assert (PROJECT_ROOT / "src" / "greetecho" / "py.typed").is_file()


@pytest.mark.os_agnostic
def test_default_config_ships_in_the_wheel() -> None:
    wheel = _load_pyproject()["tool"]["hatch"]["build"]["targets"]["wheel"]
    includes = cast(list[str], wheel.get("include", []))

    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)
