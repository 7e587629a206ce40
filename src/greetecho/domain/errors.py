"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

MISSING_NAME_MESSAGE = "Please provide a name"


class MissingNameError(ValueError):
    """A greeting was requested for an empty name.

    The single error kind of the checked greeting. Inherits from ValueError
    because the input value itself is what is wrong.

    Example:
        >>> from greetecho.domain.errors import MissingNameError
        >>> str(MissingNameError())
        'Please provide a name'
        >>> isinstance(MissingNameError(), ValueError)
        True
    """

    def __init__(self, message: str = MISSING_NAME_MESSAGE) -> None:
        super().__init__(message)


class UnknownQuoteError(KeyError):
    """A quote was requested under a key the quote table does not know.

    Example:
        >>> err = UnknownQuoteError("proverb")
        >>> err.key
        'proverb'
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown quote: {self.key!r}"


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section holds values the domain cannot use
    (a greeting template without a ``{name}`` placeholder, an unknown echo
    style). Caught at the CLI boundary and mapped to ``CONFIG_ERROR``.

    Example:
        >>> err = ConfigurationError("greeting.template must contain '{name}'")
        >>> str(err)
        "greeting.template must contain '{name}'"
    """


__all__ = [
    "MISSING_NAME_MESSAGE",
    "ConfigurationError",
    "MissingNameError",
    "UnknownQuoteError",
]
