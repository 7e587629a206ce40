"""Pure greeting functions with no I/O or framework dependencies."""

from __future__ import annotations

from .errors import MissingNameError

GREETING_TEMPLATE = "Hi, {name}. Welcome!"


def build_greeting(name: str, *, template: str = GREETING_TEMPLATE) -> str:
    """Return a greeting that embeds ``name`` in a message.

    Never fails: an empty name simply yields an empty slot in the message.

    Args:
        name: Name to greet, inserted verbatim.
        template: Message template with a ``{name}`` placeholder.

    Returns:
        The formatted greeting.

    Example:
        >>> build_greeting("Ashish")
        'Hi, Ashish. Welcome!'
        >>> build_greeting("")
        'Hi, . Welcome!'
    """
    return template.format(name=name)


def build_checked_greeting(name: str, *, template: str = GREETING_TEMPLATE) -> str:
    r"""Return the greeting for ``name``, refusing an empty name.

    Only the exact empty string is rejected; whitespace is a name like any
    other.

    Args:
        name: Name to greet.
        template: Message template with a ``{name}`` placeholder.

    Returns:
        The formatted greeting, identical to :func:`build_greeting`.

    Raises:
        MissingNameError: If ``name`` is empty.

    Example:
        >>> build_checked_greeting("Ashish")
        'Hi, Ashish. Welcome!'
        >>> build_checked_greeting("")
        Traceback (most recent call last):
        ...
        greetecho.domain.errors.MissingNameError: Please provide a name
    """
    if name == "":
        raise MissingNameError()
    return build_greeting(name, template=template)


__all__ = [
    "GREETING_TEMPLATE",
    "build_checked_greeting",
    "build_greeting",
]
