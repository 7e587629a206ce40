"""Argument echo: equivalent renderings of a process argument list.

The classic, range and join variants always agree; they differ only in how
they walk the arguments.
"""

from __future__ import annotations

from collections.abc import Sequence

from .enums import EchoStyle

DEFAULT_SEPARATOR = " "


def strip_program(argv: Sequence[str]) -> list[str]:
    """Drop the program path (element 0) from an OS argument vector.

    Example:
        >>> strip_program(["prog", "a", "b"])
        ['a', 'b']
        >>> strip_program([])
        []
    """
    return list(argv[1:])


def echo_classic(args: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Concatenate ``args`` with an index-based loop.

    Example:
        >>> echo_classic(["a", "b", "c"])
        'a b c'
    """
    text, sep = "", ""
    for i in range(len(args)):
        text += sep + args[i]
        sep = separator
    return text


def echo_range(args: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Concatenate ``args`` by iterating over them directly.

    Example:
        >>> echo_range(["a", "b", "c"])
        'a b c'
    """
    text, sep = "", ""
    for arg in args:
        text += sep + arg
        sep = separator
    return text


def echo_join(args: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Concatenate ``args`` with a single join.

    Example:
        >>> echo_join(["a", "b", "c"])
        'a b c'
    """
    return separator.join(args)


def echo_debug(args: Sequence[str]) -> str:
    """Render the argument list itself, bracketed.

    Example:
        >>> echo_debug(["a", "b", "c"])
        '[a b c]'
        >>> echo_debug([])
        '[]'
    """
    return "[" + " ".join(args) + "]"


def render_echo(args: Sequence[str], style: EchoStyle, separator: str = DEFAULT_SEPARATOR) -> str:
    """Render ``args`` in a single style.

    Raises:
        ValueError: If ``style`` is :attr:`EchoStyle.ALL`, which spans several lines.
    """
    if style is EchoStyle.CLASSIC:
        return echo_classic(args, separator)
    if style is EchoStyle.RANGE:
        return echo_range(args, separator)
    if style is EchoStyle.JOIN:
        return echo_join(args, separator)
    if style is EchoStyle.DEBUG:
        return echo_debug(args)
    raise ValueError(f"{style.value!r} renders several lines; use render_lines")


def render_lines(args: Sequence[str], style: EchoStyle, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Return the output lines for ``style``, expanding ``all`` to every variant.

    Example:
        >>> render_lines(["a", "b"], EchoStyle.ALL)
        ['a b', 'a b', 'a b', '[a b]']
        >>> render_lines(["a", "b"], EchoStyle.JOIN, separator=",")
        ['a,b']
    """
    if style is EchoStyle.ALL:
        return [
            render_echo(args, single, separator)
            for single in (EchoStyle.CLASSIC, EchoStyle.RANGE, EchoStyle.JOIN, EchoStyle.DEBUG)
        ]
    return [render_echo(args, style, separator)]


__all__ = [
    "DEFAULT_SEPARATOR",
    "echo_classic",
    "echo_debug",
    "echo_join",
    "echo_range",
    "render_echo",
    "render_lines",
    "strip_program",
]
