"""Waymark: URL route templates that match paths and generate URLs.

A template with named, typed placeholders compiles once into an anchored
matcher and a generation template. The same Route answers both
directions.

Basic usage::

    from waymark import Route

    route = Route("/user/{id:range(10,)}/{tab}")

    route.match("/user/42/posts?sort=new")  # {"id": "42", "tab": "posts"}
    route.match("/user/5/posts")            # None
    route.get_url({"id": 42, "tab": "likes"}, {"page": 2})
    # "/user/42/likes?page=2"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "CompiledRoute",
    "ConfigurationError",
    "InvalidQueryError",
    "InvalidTokenError",
    "QueryData",
    "Route",
    "RouteConfig",
    "TemplateSyntaxError",
    "Uri",
    "WaymarkError",
    "compile_template",
    "supplant",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    if name == "Route":
        from waymark.routing.route import Route

        return Route

    if name in ("CompiledRoute", "compile_template"):
        from waymark.routing import template as _template

        return getattr(_template, name)

    if name == "RouteConfig":
        from waymark.config import RouteConfig

        return RouteConfig

    if name == "QueryData":
        from waymark.http.query import QueryData

        return QueryData

    if name == "Uri":
        from waymark.http.uri import Uri

        return Uri

    if name == "supplant":
        from waymark.strings import supplant

        return supplant

    if name in (
        "ConfigurationError",
        "InvalidQueryError",
        "InvalidTokenError",
        "TemplateSyntaxError",
        "WaymarkError",
    ):
        from waymark import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
