"""Short quotes printed by the demo program."""

from __future__ import annotations

from types import MappingProxyType

from .errors import UnknownQuoteError

DEFAULT_QUOTE = "hello"


def hello() -> str:
    """Return a greeting quote."""
    return "Hello, world."


def glass() -> str:
    """Return a useful phrase for world travelers."""
    return "I can eat glass and it doesn't hurt me."


def concurrency() -> str:
    """Return a proverb about concurrency."""
    return "Don't communicate by sharing memory, share memory by communicating."


def optimize() -> str:
    """Return a proverb about optimization."""
    return "If a program is too slow, it must have a loop."


QUOTES = MappingProxyType(
    {
        "hello": hello,
        "glass": glass,
        "concurrency": concurrency,
        "optimize": optimize,
    }
)


def get_quote(key: str = DEFAULT_QUOTE) -> str:
    """Return the quote registered under ``key``.

    Raises:
        UnknownQuoteError: If no quote is registered under ``key``.

    Example:
        >>> get_quote()
        'Hello, world.'
        >>> get_quote("optimize")
        'If a program is too slow, it must have a loop.'
    """
    try:
        quote = QUOTES[key]
    except KeyError as exc:
        raise UnknownQuoteError(key) from exc
    return quote()


__all__ = [
    "DEFAULT_QUOTE",
    "QUOTES",
    "concurrency",
    "get_quote",
    "glass",
    "hello",
    "optimize",
]
