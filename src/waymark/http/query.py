"""Immutable query string data.

Implements ``Mapping[str, str]`` over possibly repeated keys.
Used by ``Uri`` as its query component and by ``Route`` when a query
is attached to a generated URL.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TypeAlias
from urllib.parse import parse_qsl, urlencode

from waymark.errors import InvalidQueryError


class QueryData(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _pairs: Every ``(key, value)`` pair in order of appearance.
        _data: Field name -> list of values.
        _raw: Raw query string when built from one, else ``None``.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    ``str()`` returns the raw string unchanged when there is one, and
    the urlencoded pairs otherwise. A raw string is passed through as
    written: it is neither validated nor re-encoded.

    Two instances are equal when their pairs are equal, order and
    repeated keys included.
    """

    _pairs: tuple[tuple[str, str], ...]
    _data: dict[str, list[str]]
    _raw: str | None

    __slots__ = ("_data", "_pairs", "_raw")

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        query_string = query_string.removeprefix("?")
        pairs = parse_qsl(query_string, keep_blank_values=True)
        self._set(tuple(pairs), query_string)

    def _set(self, pairs: tuple[tuple[str, str], ...], raw: str | None) -> None:
        data: dict[str, list[str]] = {}
        for key, value in pairs:
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_pairs", pairs)
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_raw", raw)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> QueryData:
        """Build query data from a plain mapping.

        A list or tuple value contributes one pair per item; any other
        value is stringified::

            >>> str(QueryData.from_mapping({"q": "cats", "tag": ["a", "b"]}))
            'q=cats&tag=a&tag=b'
        """
        pairs: list[tuple[str, str]] = []
        for key, value in mapping.items():
            if isinstance(value, (list, tuple)):
                pairs.extend((str(key), str(item)) for item in value)
            else:
                pairs.append((str(key), str(value)))
        query = cls.__new__(cls)
        query._set(tuple(pairs), None)
        return query

    @classmethod
    def create(cls, query: QueryInput | None) -> QueryData | None:
        """Normalize any accepted query input into ``QueryData``.

        - ``None`` -> ``None``
        - ``QueryData`` -> returned as is
        - ``str`` / ``bytes`` -> parsed as a raw query string
        - ``Mapping`` -> built with ``from_mapping``

        Raises ``InvalidQueryError`` for anything else.
        """
        if query is None:
            return None
        if isinstance(query, QueryData):
            return query
        if isinstance(query, (str, bytes)):
            return cls(query)
        if isinstance(query, Mapping):
            return cls.from_mapping(query)
        raise InvalidQueryError(query)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryData):
            return self._pairs == other._pairs
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self._raw is not None:
            return self._raw
        return urlencode(self._pairs)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryData({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def items_list(self) -> list[tuple[str, str]]:
        """Return every ``(key, value)`` pair, repeated keys included."""
        return list(self._pairs)


# Anything QueryData.create() accepts
QueryInput: TypeAlias = str | bytes | QueryData | Mapping[str, object]
