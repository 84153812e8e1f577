"""Shared type aliases used across waymark modules."""

from collections.abc import Callable, Mapping, Sequence
from typing import TypeAlias

# Field validator: receives the raw captured string, returns acceptance
Validator: TypeAlias = Callable[[str], bool]

# A single validator or an ordered sequence of them, as passed to Route()
ValidatorSpec: TypeAlias = Validator | Sequence[Validator]

# Values substituted into a generation template
FieldValues: TypeAlias = Mapping[str, str | int | float]
