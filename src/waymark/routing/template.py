"""Route template compilation.

A template such as ``/user/{id:range(10,)}/{tab}`` compiles into an
anchored matcher, the field order of its capture groups, a generation
template with bare ``{name}`` markers, and the validators per field.

Compilation is a single forward pass over the placeholders: each step
only consumes the next unprocessed token, so the capture-group order
always equals the field order.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from waymark._internal.types import Validator, ValidatorSpec
from waymark.config import DEFAULT_CONFIG, RouteConfig
from waymark.errors import TemplateSyntaxError
from waymark.routing.params import pattern_for, range_validator

logger = logging.getLogger("waymark.routing")

# {name}, {name:type} or {name:type(arg,arg)}
PLACEHOLDER_RE = re.compile(r"\{(\w+)(?::(\w+)(?:\(([\w,]+)\))?)?\}", re.ASCII)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed placeholder token.

    Plain:  ``{id}``              (type="string")
    Typed:  ``{id:int}``          (type="int")
    Range:  ``{id:range(10,20)}`` (type="range", args="10,20")
    """

    token: str
    name: str
    type: str = "string"
    args: str = ""
    start: int = 0
    end: int = 0


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """Result of compiling a route template. Immutable."""

    template: str
    matcher: re.Pattern[str]
    field_order: tuple[str, ...]
    generation_template: str
    validators: Mapping[str, tuple[Validator, ...]]


def iter_placeholders(
    template: str, default_type: str = DEFAULT_CONFIG.default_type
) -> Iterator[Placeholder]:
    """Yield the placeholders of *template* in scan order.

    Repeated names are yielded once per occurrence. Brace groups that do
    not fit the placeholder grammar are skipped.
    """
    for m in PLACEHOLDER_RE.finditer(template):
        name, param_type, args = m.groups()
        yield Placeholder(
            token=m.group(0),
            name=name,
            type=param_type or default_type,
            args=args or "",
            start=m.start(),
            end=m.end(),
        )


def normalize_validators(
    validators: Mapping[str, ValidatorSpec] | None,
) -> dict[str, list[Validator]]:
    """Copy a validators map, turning every entry into a list."""
    result: dict[str, list[Validator]] = {}
    if not validators:
        return result
    for name, spec in validators.items():
        if isinstance(spec, (list, tuple)):
            result[name] = list(spec)
        else:
            result[name] = [spec]
    return result


def compile_template(
    template: str,
    validators: Mapping[str, ValidatorSpec] | None = None,
    config: RouteConfig | None = None,
) -> CompiledRoute:
    """Compile *template* into a ``CompiledRoute``.

    Text outside placeholders is regex source and is copied into the
    matcher unchanged. ``range`` placeholders with arguments append a
    bounds check to their field's validators, after any user-supplied
    ones.

    Raises ``TemplateSyntaxError`` if the assembled matcher is not a
    valid regular expression.
    """
    config = config or DEFAULT_CONFIG
    buckets = normalize_validators(validators)

    matcher_parts: list[str] = []
    generation_parts: list[str] = []
    field_order: list[str] = []
    cursor = 0

    for ph in iter_placeholders(template, config.default_type):
        literal = template[cursor : ph.start]
        cursor = ph.end

        matcher_parts.append(literal)
        matcher_parts.append(f"({pattern_for(ph.type, config)})")

        if ph.type == "range" and ph.args:
            check = range_validator(ph.args)
            if check is not None:
                buckets.setdefault(ph.name, []).append(check)

        field_order.append(ph.name)
        generation_parts.append(literal)
        generation_parts.append("{" + ph.name + "}")

    matcher_parts.append(template[cursor:])
    generation_parts.append(template[cursor:])

    source = "^" + "".join(matcher_parts) + "$"
    try:
        matcher = re.compile(source, re.ASCII)
    except re.error as exc:
        raise TemplateSyntaxError(template, str(exc)) from exc

    compiled = CompiledRoute(
        template=template,
        matcher=matcher,
        field_order=tuple(field_order),
        generation_template="".join(generation_parts),
        validators=MappingProxyType({k: tuple(v) for k, v in buckets.items()}),
    )
    logger.debug(
        "Compiled route %r: fields=%s matcher=%s",
        template,
        compiled.field_order,
        matcher.pattern,
    )
    return compiled
