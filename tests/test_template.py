"""Tests for namedpaths.template — placeholder detection and parsing."""

import pytest

from namedpaths.errors import InvalidKey
from namedpaths.template import PathSegment, parse_template, placeholder_key, placeholders


class TestPlaceholderKey:
    def test_placeholder(self) -> None:
        assert placeholder_key(":id") == "id"

    def test_multichar_name(self) -> None:
        assert placeholder_key(":dog_id") == "dog_id"

    def test_literal_raises(self) -> None:
        with pytest.raises(InvalidKey):
            placeholder_key("dogs")

    def test_empty_segment_raises(self) -> None:
        """Empty segments are never placeholders, not placeholders named ''."""
        with pytest.raises(InvalidKey):
            placeholder_key("")

    def test_colon_not_first_raises(self) -> None:
        with pytest.raises(InvalidKey):
            placeholder_key("a:b")

    def test_lone_colon_has_empty_name(self) -> None:
        assert placeholder_key(":") == ""


class TestParseTemplate:
    def test_leading_slash_keeps_empty_segment(self) -> None:
        segments = parse_template("/dogs")
        assert [s.value for s in segments] == ["", "dogs"]
        assert segments[0].is_placeholder is False

    def test_trailing_slash_keeps_empty_segment(self) -> None:
        segments = parse_template("/dogs/")
        assert [s.value for s in segments] == ["", "dogs", ""]

    def test_placeholder(self) -> None:
        segments = parse_template("/dogs/:id")
        assert segments[2] == PathSegment(":id", is_placeholder=True, key="id")

    def test_literal_has_no_key(self) -> None:
        segments = parse_template("/dogs/:id")
        assert segments[1] == PathSegment("dogs")
        assert segments[1].key is None

    def test_empty_template(self) -> None:
        assert parse_template("") == [PathSegment("")]


class TestPlaceholders:
    def test_in_order(self) -> None:
        assert placeholders("/widgets/:id/edit/:blah") == ("id", "blah")

    def test_none(self) -> None:
        assert placeholders("/widgets/") == ()

    def test_duplicates_listed_once(self) -> None:
        assert placeholders("/:a/:b/:a") == ("a", "b")

    def test_lone_colon(self) -> None:
        assert placeholders("/x/:") == ("",)
