"""Tests for waymark.__init__: lazy imports cover all public names."""

import pytest

import waymark


@pytest.mark.parametrize("name", waymark.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(waymark, name)
    assert obj is not None, f"waymark.{name} resolved to None"


def test_route_is_routing_route() -> None:
    from waymark.routing.route import Route

    assert waymark.Route is Route


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        waymark.__getattr__("ThisDoesNotExist")
