"""Tests for waymark.strings: template substitution."""

import pytest

from waymark.strings import supplant


class TestSupplant:
    def test_string_and_number(self) -> None:
        assert supplant("/user/{id}/{tab}", {"id": 42, "tab": "posts"}) == "/user/42/posts"

    def test_float(self) -> None:
        assert supplant("/{x}", {"x": 1.5}) == "/1.5"

    def test_missing_key_left_literal(self) -> None:
        assert supplant("/user/{id}/{tab}", {"id": 1}) == "/user/1/{tab}"

    @pytest.mark.parametrize("value", [None, True, ["a"], {"a": 1}])
    def test_unsupported_value_left_literal(self, value: object) -> None:
        assert supplant("/{x}", {"x": value}) == "/{x}"

    def test_no_values(self) -> None:
        assert supplant("/user/{id}") == "/user/{id}"
        assert supplant("/user/{id}", {}) == "/user/{id}"

    def test_repeated_marker(self) -> None:
        assert supplant("{a}/{a}", {"a": "x"}) == "x/x"

    def test_values_not_rescanned(self) -> None:
        assert supplant("{a}", {"a": "{b}", "b": "no"}) == "{b}"

    def test_empty_string_value(self) -> None:
        assert supplant("/a/{x}", {"x": ""}) == "/a/"
