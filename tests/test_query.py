"""Tests for waymark.http.query: immutable QueryData."""

import pytest

from waymark.errors import InvalidQueryError
from waymark.http.query import QueryData


class TestQueryData:
    def test_getitem(self) -> None:
        q = QueryData("q=hello&page=2")
        assert q["q"] == "hello"
        assert q["page"] == "2"

    def test_bytes(self) -> None:
        q = QueryData(b"q=hello")
        assert q["q"] == "hello"

    def test_leading_question_mark(self) -> None:
        q = QueryData("?q=hello")
        assert q["q"] == "hello"
        assert str(q) == "q=hello"

    def test_missing_key_raises(self) -> None:
        q = QueryData("q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_contains(self) -> None:
        q = QueryData("q=hello")
        assert "q" in q
        assert "missing" not in q

    def test_len(self) -> None:
        q = QueryData("a=1&b=2&c=3")
        assert len(q) == 3

    def test_iter_keeps_order(self) -> None:
        q = QueryData("b=2&a=1")
        assert list(q) == ["b", "a"]

    def test_get_with_default(self) -> None:
        q = QueryData("q=hello")
        assert q.get("q") == "hello"
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        q = QueryData("tag=python&tag=rust&q=hello")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("q") == ["hello"]
        assert q.get_list("missing") == []

    def test_empty(self) -> None:
        q = QueryData()
        assert len(q) == 0
        assert not q
        assert str(q) == ""

    def test_blank_value_preserved(self) -> None:
        q = QueryData("flag=")
        assert q["flag"] == ""
        assert q

    def test_raw_string_preserved(self) -> None:
        assert str(QueryData("b=2&a=1&flag")) == "b=2&a=1&flag"

    def test_items_list(self) -> None:
        q = QueryData("x=1&y=2&x=3")
        assert q.items_list() == [("x", "1"), ("y", "2"), ("x", "3")]

    def test_repr(self) -> None:
        assert "hello" in repr(QueryData("q=hello"))

    def test_equality(self) -> None:
        assert QueryData("a=1&b=2") == QueryData.from_mapping({"a": 1, "b": "2"})

    def test_equality_counts_repeated_keys(self) -> None:
        assert QueryData("a=1&a=2") != QueryData("a=1")
        assert QueryData("a=1&a=2") == QueryData.from_mapping({"a": ["1", "2"]})

    def test_equality_is_ordered(self) -> None:
        assert QueryData("a=1&b=2") != QueryData("b=2&a=1")

    def test_not_equal_to_plain_dict(self) -> None:
        assert QueryData("a=1") != {"a": "1"}

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(QueryData("a=1"))

    def test_raw_string_not_reencoded(self) -> None:
        q = QueryData("q=a b")
        assert q["q"] == "a b"
        assert str(q) == "q=a b"


class TestFromMapping:
    def test_scalars_stringified(self) -> None:
        q = QueryData.from_mapping({"page": 2, "q": "cats"})
        assert q["page"] == "2"
        assert str(q) == "page=2&q=cats"

    def test_sequence_values(self) -> None:
        q = QueryData.from_mapping({"tag": ["a", "b"], "n": (1,)})
        assert q.get_list("tag") == ["a", "b"]
        assert str(q) == "tag=a&tag=b&n=1"

    def test_encoded(self) -> None:
        assert str(QueryData.from_mapping({"q": "big cats&dogs"})) == "q=big+cats%26dogs"

    def test_empty(self) -> None:
        assert not QueryData.from_mapping({})


class TestCreate:
    def test_none(self) -> None:
        assert QueryData.create(None) is None

    def test_passthrough(self) -> None:
        q = QueryData("a=1")
        assert QueryData.create(q) is q

    def test_string(self) -> None:
        assert QueryData.create("a=1")["a"] == "1"

    def test_bytes(self) -> None:
        assert QueryData.create(b"a=1")["a"] == "1"

    def test_mapping(self) -> None:
        assert QueryData.create({"a": "1"})["a"] == "1"

    def test_invalid(self) -> None:
        with pytest.raises(InvalidQueryError):
            QueryData.create(["a", "1"])  # type: ignore[arg-type]
