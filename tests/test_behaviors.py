"""Greeting functions: plain and checked variants."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from greetecho.domain import behaviors
from greetecho.domain.errors import MissingNameError


@pytest.mark.os_agnostic
def test_build_greeting_welcomes_the_name() -> None:
    assert behaviors.build_greeting("Ashish") == "Hi, Ashish. Welcome!"


@pytest.mark.os_agnostic
def test_build_greeting_accepts_an_empty_name() -> None:
    assert behaviors.build_greeting("") == "Hi, . Welcome!"


@pytest.mark.os_agnostic
def test_build_greeting_uses_a_custom_template() -> None:
    assert behaviors.build_greeting("Ada", template="Hello {name}!") == "Hello Ada!"


@pytest.mark.os_agnostic
def test_build_checked_greeting_matches_plain_greeting() -> None:
    assert behaviors.build_checked_greeting("Ashish") == "Hi, Ashish. Welcome!"


@pytest.mark.os_agnostic
def test_build_checked_greeting_refuses_an_empty_name() -> None:
    with pytest.raises(MissingNameError, match="^Please provide a name$"):
        behaviors.build_checked_greeting("")


@pytest.mark.os_agnostic
def test_build_checked_greeting_treats_whitespace_as_a_name() -> None:
    assert behaviors.build_checked_greeting(" ") == "Hi,  . Welcome!"


@pytest.mark.os_agnostic
@given(name=st.text(min_size=1))
def test_every_nonempty_name_appears_verbatim_in_both_greetings(name: str) -> None:
    """Names containing braces pass through untouched; only the template is formatted."""
    assert name in behaviors.build_greeting(name)
    assert name in behaviors.build_checked_greeting(name)


@pytest.mark.os_agnostic
@given(name=st.text(min_size=1))
def test_checked_greeting_agrees_with_plain_greeting_for_nonempty_names(name: str) -> None:
    assert behaviors.build_checked_greeting(name) == behaviors.build_greeting(name)
