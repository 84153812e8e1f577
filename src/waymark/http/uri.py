"""Structured URL value.

A thin immutable wrapper over ``urllib.parse.urlsplit`` whose query
component is ``QueryData``. Routes parse incoming tokens into a ``Uri``
to read the path, and return one from ``Route.get_uri()``.
"""

from dataclasses import dataclass, field, replace
from urllib.parse import urlsplit, urlunsplit

from waymark.errors import InvalidTokenError
from waymark.http.query import QueryData


@dataclass(frozen=True, slots=True)
class Uri:
    """An immutable, parsed URL.

    Usage::

        uri = Uri.parse("/search?q=cats#top")
        uri.path            # "/search"
        uri.query["q"]      # "cats"
        str(uri.with_query(QueryData("q=dogs")))  # "/search?q=dogs#top"
    """

    scheme: str = ""
    netloc: str = ""
    path: str = ""
    query: QueryData = field(default_factory=QueryData)
    fragment: str = ""

    @classmethod
    def parse(cls, value: "str | Uri") -> "Uri":
        """Parse *value* into a ``Uri``; an existing ``Uri`` passes through.

        Raises ``InvalidTokenError`` for any other type.
        """
        if isinstance(value, Uri):
            return value
        if not isinstance(value, str):
            raise InvalidTokenError(value)
        parts = urlsplit(value)
        return cls(
            scheme=parts.scheme,
            netloc=parts.netloc,
            path=parts.path,
            query=QueryData(parts.query),
            fragment=parts.fragment,
        )

    def with_query(self, query: QueryData) -> "Uri":
        """Return a copy with the query component replaced."""
        return replace(self, query=query)

    def with_path(self, path: str) -> "Uri":
        """Return a copy with the path component replaced."""
        return replace(self, path=path)

    def __str__(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path, str(self.query), self.fragment)
        )
