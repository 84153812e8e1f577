"""Route compilation configuration.

RouteConfig is a frozen dataclass, immutable after creation and
autocompletable, with no string-key dict lookups.
"""

import re
from dataclasses import dataclass

from waymark.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Placeholder compilation settings. Immutable after creation.

    The defaults reproduce the standard placeholder types. Override what
    you need::

        config = RouteConfig(string_pattern=r"[^/]+")
        route = Route("/files/{name}", config=config)

    Patterns are inserted into the matcher inside a capture group, so they
    must not contain capture groups of their own.
    """

    # Regex body for ``string`` (and unknown) placeholder types
    string_pattern: str = r"\w+"

    # Regex body for ``int`` and ``range`` placeholder types
    int_pattern: str = r"\d+"

    # Type assumed for ``{name}`` with no ``:type`` suffix
    default_type: str = "string"

    def __post_init__(self) -> None:
        for field_name in ("string_pattern", "int_pattern"):
            pattern = getattr(self, field_name)
            try:
                compiled = re.compile(pattern)
            except re.error as exc:
                msg = f"RouteConfig.{field_name} is not a valid regex: {pattern!r} ({exc})"
                raise ConfigurationError(msg) from exc
            if compiled.groups:
                msg = (
                    f"RouteConfig.{field_name} must not contain capture groups: {pattern!r}. "
                    "Use (?:...) for grouping."
                )
                raise ConfigurationError(msg)
        if not self.default_type:
            msg = "RouteConfig.default_type must be a non-empty type name."
            raise ConfigurationError(msg)


DEFAULT_CONFIG = RouteConfig()
