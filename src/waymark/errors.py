"""Waymark exception hierarchy.

Shared across Route, Uri, QueryData, and RouteConfig so every module
raises and catches the same types.

Matching never raises: a path that does not fit a route is reported
as ``None``. These errors only signal programmer-level misuse.
"""


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """Raised when a ``RouteConfig`` is invalid.

    Caught at construction time, before any route is compiled with it.
    """


class TemplateSyntaxError(WaymarkError, ValueError):
    """A route template whose literal text is not a valid regular expression.

    Text between placeholders is regex source, so a stray ``(`` or ``[``
    makes the compiled matcher invalid. Malformed placeholders never
    raise; they stay literal.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Invalid route template {template!r}: {reason}")


class InvalidTokenError(WaymarkError, TypeError):
    """A value that is neither a string nor a ``Uri`` was given as a URL."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Expected str or Uri, got {type(value).__name__}: {value!r}"
        )


class InvalidQueryError(WaymarkError, TypeError):
    """A query value that cannot be normalized into ``QueryData``.

    Accepted inputs are a raw query string (``str`` or ``bytes``),
    an existing ``QueryData``, or a mapping of keys to values.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            "Expected a query string, QueryData or mapping, "
            f"got {type(value).__name__}: {value!r}"
        )
