"""String helpers.

``supplant`` fills ``{name}`` markers in a generation template::

    >>> supplant("/user/{id}", {"id": 42})
    '/user/42'
    >>> supplant("/user/{id}", {})
    '/user/{id}'
"""

import re
from collections.abc import Mapping

_MARKER_RE = re.compile(r"\{([^{}]*)\}")


def _substitutable(value: object) -> bool:
    # bool is an int subclass; booleans stay literal
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def supplant(template: str, values: Mapping[str, object] | None = None) -> str:
    """Replace every ``{name}`` marker in *template* with ``str(values[name])``.

    Markers whose key is missing, or whose value is not a string or a
    number, are left in place verbatim.
    """
    if not values:
        return template

    def _replace(m: re.Match[str]) -> str:
        value = values.get(m.group(1))
        if _substitutable(value):
            return str(value)
        return m.group(0)

    return _MARKER_RE.sub(_replace, template)
