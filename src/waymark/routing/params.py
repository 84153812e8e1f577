"""Placeholder types and range validators.

Built-in types for route placeholders like ``{id:int}`` or
``{page:range(1,50)}``. Any other type name matches like ``string``.
"""

import logging
import re

from waymark._internal.types import Validator
from waymark.config import DEFAULT_CONFIG, RouteConfig

logger = logging.getLogger("waymark.routing")

# Types captured with the config's int pattern; everything else uses string_pattern
NUMERIC_TYPES: frozenset[str] = frozenset({"int", "range"})

_LEADING_INT_RE = re.compile(r"\d+")


def pattern_for(param_type: str, config: RouteConfig = DEFAULT_CONFIG) -> str:
    """Return the regex body captured for a placeholder of *param_type*.

    Unknown types fall back to the string pattern rather than raising.
    """
    if param_type in NUMERIC_TYPES:
        return config.int_pattern
    return config.string_pattern


def _parse_bound(text: str) -> int | None:
    """Parse a range bound from its leading digits (``"10px"`` -> 10).

    Returns ``None`` when *text* has no leading digit.
    """
    m = _LEADING_INT_RE.match(text.strip())
    if m is None:
        return None
    return int(m.group(0))


def _to_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _reject(value: str) -> bool:
    return False


def range_validator(args: str) -> Validator | None:
    """Build an inclusive bounds check from ``range`` arguments.

    *args* is the text between the parentheses of ``range(from,to)``.
    Either side may be empty to leave that side unbounded. A reversed
    pair is tolerated::

        range_validator("10,20")   # 10 <= v <= 20
        range_validator("20,10")   # same
        range_validator("10,")     # 10 <= v
        range_validator(",20")     # v <= 20
        range_validator("10,abc")  # rejects every value

    Returns ``None`` when *args* has fewer than two comma-separated parts
    or neither side is a number. When one side is a number and the other
    is non-empty but not a number, the bounds cannot hold and the returned
    predicate rejects everything. Predicates reject values that are not
    integers instead of raising.
    """
    parts = args.split(",")
    if len(parts) < 2:
        logger.debug("range(%s): expected 'from,to', no bounds check added", args)
        return None

    low = _parse_bound(parts[0])
    high = _parse_bound(parts[1])

    if low is None and high is None:
        logger.debug("range(%s): no numeric bound, no bounds check added", args)
        return None

    if (low is None and parts[0].strip()) or (high is None and parts[1].strip()):
        logger.debug("range(%s): non-numeric bound, every value rejected", args)
        return _reject

    if low is not None and high is not None:
        low, high = min(low, high), max(low, high)

        def _between(value: str) -> bool:
            number = _to_int(value)
            return number is not None and low <= number <= high

        return _between

    if low is not None:
        floor = low

        def _at_least(value: str) -> bool:
            number = _to_int(value)
            return number is not None and floor <= number

        return _at_least

    ceiling = high

    def _at_most(value: str) -> bool:
        number = _to_int(value)
        return number is not None and number <= ceiling

    return _at_most
