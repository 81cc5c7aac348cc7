"""Tests for namedpaths.resolver — placeholder substitution and query building."""

from urllib.parse import parse_qs

import pytest

from namedpaths.resolver import replace


def _split(result: str) -> tuple[str, dict[str, list[str]]]:
    base, _, query = result.partition("?")
    return base, parse_qs(query)


class TestAbsentParams:
    @pytest.mark.parametrize("query", [True, False])
    def test_returns_template_verbatim(self, query: bool) -> None:
        assert replace("/widgets/:id/edit/:blah", None, query) == "/widgets/:id/edit/:blah"

    def test_no_placeholders(self) -> None:
        assert replace("/widgets/", None, True) == "/widgets/"


class TestEmptyParams:
    def test_placeholders_left_as_literal(self) -> None:
        assert replace("/widgets/:id/edit", {}, True) == "/widgets/:id/edit"

    def test_no_query_string(self) -> None:
        assert replace("/widgets/", {}, True) == "/widgets/"


class TestSubstitution:
    @pytest.mark.parametrize("query", [True, False])
    def test_single_placeholder(self, query: bool) -> None:
        assert replace("/widgets/:id", {"id": 123}, query) == "/widgets/123"

    def test_multiple_placeholders(self) -> None:
        result = replace("/widgets/:id/edit/:blah", {"id": 123, "blah": "dog"}, False)
        assert result == "/widgets/123/edit/dog"

    def test_missing_placeholder_keeps_literal(self) -> None:
        assert replace("/widgets/:id/edit/:blah", {"id": 123}, False) == "/widgets/123/edit/:blah"

    def test_leading_empty_segment_preserved(self) -> None:
        assert replace("/:id", {"id": 1}, False) == "/1"

    def test_relative_template(self) -> None:
        assert replace(":id/edit", {"id": 9}, False) == "9/edit"

    def test_repeated_placeholder_repeats_value(self) -> None:
        assert replace("/:id/copy/:id", {"id": 5}, True) == "/5/copy/5"

    def test_bool_value(self) -> None:
        assert replace("/flags/:on", {"on": True}, False) == "/flags/true"

    def test_lone_colon_is_empty_named_placeholder(self) -> None:
        assert replace("/x/:", {"": "filled"}, False) == "/x/filled"
        assert replace("/x/:", {}, False) == "/x/:"

    def test_params_not_mutated(self) -> None:
        params = {"id": 1, "extra": "x"}
        replace("/w/:id", params, True)
        assert params == {"id": 1, "extra": "x"}


class TestQueryMode:
    def test_extra_param_becomes_query(self) -> None:
        assert replace("/widgets/", {"id": 123}, True) == "/widgets/?id=123"

    def test_extra_param_dropped_without_query(self) -> None:
        assert replace("/widgets/", {"id": 123}, False) == "/widgets/"

    def test_only_unconsumed_params_in_query(self) -> None:
        result = replace(
            "/widgets/:id/edit/:blah",
            {"id": 123, "blah": "dog", "name": "felix"},
            True,
        )
        base, query = _split(result)
        assert base == "/widgets/123/edit/dog"
        assert query == {"name": ["felix"]}

    def test_unsupplied_placeholder_not_in_query(self) -> None:
        result = replace("/widgets/:id/edit/:blah", {"id": 123, "name": "felix"}, True)
        base, query = _split(result)
        assert base == "/widgets/123/edit/:blah"
        assert query == {"name": ["felix"]}

    def test_query_keys_sorted(self) -> None:
        result = replace("/search", {"q": "dogs", "page": 2, "limit": 10}, True)
        assert result == "/search?limit=10&page=2&q=dogs"

    def test_query_values_escaped(self) -> None:
        assert replace("/blah", {"name": "jane doe"}, True) == "/blah?name=jane+doe"
