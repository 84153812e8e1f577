"""Route: a compiled path template that matches and generates URLs."""

import logging
import re
from collections.abc import Mapping

from waymark._internal.types import FieldValues, Validator, ValidatorSpec
from waymark.config import RouteConfig
from waymark.http.query import QueryData, QueryInput
from waymark.http.uri import Uri
from waymark.routing.template import CompiledRoute, compile_template
from waymark.strings import supplant

logger = logging.getLogger("waymark.routing")


class Route:
    """A path template compiled into a matcher and a URL generator.

    Usage::

        route = Route("/user/{id:int}", {"id": lambda v: int(v) > 1000})
        route.match("/user/1042")      # {"id": "1042"}
        route.match("/user/500")       # None
        route.get_url({"id": 7}, {"tab": "posts"})  # "/user/7?tab=posts"

    Placeholder forms: ``{name}``, ``{name:int}``, ``{name:range(from,to)}``.
    Unknown types match like ``{name}``.

    A Route is immutable after construction and safe to share between
    threads and tasks.
    """

    __slots__ = ("_compiled",)

    def __init__(
        self,
        template: str,
        validators: Mapping[str, ValidatorSpec] | None = None,
        *,
        config: RouteConfig | None = None,
    ) -> None:
        self._compiled = compile_template(template, validators, config)

    @property
    def compiled(self) -> CompiledRoute:
        return self._compiled

    @property
    def template(self) -> str:
        return self._compiled.template

    @property
    def matcher(self) -> re.Pattern[str]:
        return self._compiled.matcher

    @property
    def field_order(self) -> tuple[str, ...]:
        return self._compiled.field_order

    @property
    def generation_template(self) -> str:
        return self._compiled.generation_template

    @property
    def validators(self) -> Mapping[str, tuple[Validator, ...]]:
        return self._compiled.validators

    def __repr__(self) -> str:
        return f"Route({self._compiled.template!r})"

    # -- Matching --

    def check(self, token: str | Uri) -> bool:
        """Return True if *token* matches this route.

        A template without placeholders matches with an empty dict, which
        still counts as a match.
        """
        return self.match(token) is not None

    def match(self, token: str | Uri) -> dict[str, str] | None:
        """Match *token* and return its fields, or ``None``.

        *token* is a URL string or a ``Uri``; only its path is matched,
        the query and fragment are ignored. Raises ``InvalidTokenError``
        for any other type.
        """
        uri = Uri.parse(token)
        return self.match_path(uri.path)

    get_options = match

    def match_path(self, path: str) -> dict[str, str] | None:
        """Match a bare path. Override to customize matching.

        All validators of every field must accept its value; one rejection
        fails the whole match. When a field name repeats, the later
        value wins.
        """
        m = self._compiled.matcher.fullmatch(path)
        if m is None:
            return None

        values = m.groups()
        field_order = self._compiled.field_order
        validators = self._compiled.validators
        result: dict[str, str] = {}

        for key, value in zip(field_order, values, strict=False):
            checks = validators.get(key)
            if checks and not all(check(value) for check in checks):
                logger.debug(
                    "Route %r: field %r rejected value %r",
                    self._compiled.template,
                    key,
                    value,
                )
                return None
            result[key] = value

        return result

    # -- Generation --

    def get_uri(
        self,
        values: FieldValues | None = None,
        query: QueryInput | None = None,
    ) -> Uri:
        """Build a ``Uri`` from field *values* and an optional *query*.

        Values are substituted as given, without running the matcher or
        validators. A field missing from *values* stays as a literal
        ``{name}`` marker.

        A supplied *query* replaces any query already present in the
        template, even when it is an empty mapping or ``QueryData``.
        ``None`` and an empty query string leave the template's query
        alone. A raw query string is attached verbatim, without
        re-encoding.
        """
        uri = Uri.parse(supplant(self._compiled.generation_template, values))
        if query is None or (isinstance(query, (str, bytes)) and not query):
            return uri
        return uri.with_query(QueryData.create(query))

    def get_token(
        self,
        values: FieldValues | None = None,
        query: QueryInput | None = None,
    ) -> str:
        """Build the URL string for *values* and *query*."""
        return str(self.get_uri(values, query))

    def get_url(
        self,
        values: FieldValues | None = None,
        query: QueryInput | None = None,
    ) -> str:
        """Same as ``get_token``."""
        return self.get_token(values, query)

    generate = get_token
