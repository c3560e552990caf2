"""
Sort token parsing tests.
"""

from __future__ import annotations

import pytest

from src.components.teams import (
    SORTABLE_FIELDS,
    VALID_SORT_FIELDS,
    InvalidSortFieldError,
    SortDirection,
    SortOrder,
    parse_sort_token,
    parse_sort_tokens,
)


def test_sortable_fields() -> None:
    assert SORTABLE_FIELDS == {"name", "acronym", "budget"}
    assert VALID_SORT_FIELDS == SORTABLE_FIELDS


class TestParseSortToken:
    @pytest.mark.parametrize("field", ["name", "acronym", "budget"])
    def test_plain_token_is_ascending(self, field: str) -> None:
        assert parse_sort_token(field) == SortOrder(field, SortDirection.ASC)

    @pytest.mark.parametrize("field", ["name", "acronym", "budget"])
    def test_prefixed_token_is_descending(self, field: str) -> None:
        order = parse_sort_token(f"-{field}")

        assert order == SortOrder(field, SortDirection.DESC)
        assert order.descending is True

    @pytest.mark.parametrize(
        ("token", "field"),
        [
            ("players", "players"),
            ("id", "id"),
            ("-founded", "founded"),
            ("Name", "Name"),
            ("--name", "-name"),
            ("-", ""),
            ("", ""),
        ],
    )
    def test_invalid_token(self, token: str, field: str) -> None:
        with pytest.raises(InvalidSortFieldError) as exc_info:
            parse_sort_token(token)

        assert exc_info.value.field == field
        assert str(exc_info.value) == f"Invalid field name for sorting: {field}"


class TestParseSortTokens:
    @pytest.mark.parametrize("tokens", [None, [], ()])
    def test_no_tokens_means_no_ordering(self, tokens: list[str] | None) -> None:
        assert parse_sort_tokens(tokens) == ()

    def test_keeps_token_order(self) -> None:
        orders = parse_sort_tokens(["-budget", "name", "-acronym"])

        assert orders == (
            SortOrder("budget", SortDirection.DESC),
            SortOrder("name", SortDirection.ASC),
            SortOrder("acronym", SortDirection.DESC),
        )

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_invalid_token_anywhere_rejects_all(self, position: int) -> None:
        tokens = ["name", "-budget", "acronym"]
        tokens.insert(position, "-stadium")

        with pytest.raises(InvalidSortFieldError) as exc_info:
            parse_sort_tokens(tokens)

        assert exc_info.value.field == "stadium"

    def test_first_invalid_token_is_reported(self) -> None:
        with pytest.raises(InvalidSortFieldError) as exc_info:
            parse_sort_tokens(["city", "stadium"])

        assert exc_info.value.field == "city"
