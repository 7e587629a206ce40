"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``pyproject.toml``; the version line is the single place
that needs patching on a release bump.

Contents:
    * Metadata constants (name, title, version, homepage, author)
    * lib_layered_config identifiers (vendor, app, slug)
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greetecho"
title: Final[str] = "Greeting, argument echo, and checked-greeting exercises"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/greetecho/greetecho"
author: Final[str] = "greetecho contributors"
author_email: Final[str] = "greetecho@example.com"
shell_command: Final[str] = "greetecho"

#: Vendor, application and slug used by lib_layered_config to derive
#: platform-specific configuration directories.
LAYEREDCONF_VENDOR: Final[str] = "greetecho"
LAYEREDCONF_APP: Final[str] = "greetecho"
LAYEREDCONF_SLUG: Final[str] = "greetecho"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetecho:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
