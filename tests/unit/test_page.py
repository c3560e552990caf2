"""
Page model tests.
"""

from __future__ import annotations

import pytest

from src.components.teams import Page, PageRequest


def make_page(number: int, size: int, total: int, count: int) -> Page[int]:
    return Page(content=tuple(range(count)), number=number, size=size, total_elements=total)


@pytest.mark.parametrize(
    ("size", "total", "pages"),
    [(10, 0, 0), (10, 1, 1), (10, 10, 1), (10, 11, 2), (2, 3, 2), (1, 3, 3)],
)
def test_total_pages(size: int, total: int, pages: int) -> None:
    assert make_page(0, size, total, 0).total_pages == pages


def test_first_and_last_flags() -> None:
    first = make_page(0, 2, 3, 2)
    last = make_page(1, 2, 3, 1)

    assert first.first is True
    assert first.last is False
    assert last.first is False
    assert last.last is True
    assert last.number_of_elements == 1


def test_page_past_the_end_is_empty() -> None:
    page = make_page(5, 2, 3, 0)

    assert page.empty is True
    assert page.last is True
    assert page.total_pages == 2


def test_map_keeps_totals() -> None:
    page = make_page(1, 3, 7, 3)

    mapped = page.map(lambda n: f"item-{n}")

    assert mapped.content == ("item-0", "item-1", "item-2")
    assert (mapped.number, mapped.size, mapped.total_elements) == (1, 3, 7)
    assert mapped.total_pages == 3


def test_page_request_offset() -> None:
    assert PageRequest(page=0, size=10).offset == 0
    assert PageRequest(page=3, size=4).offset == 12


def test_zero_size_page_has_no_pages() -> None:
    page = make_page(0, 0, 0, 0)

    assert page.total_pages == 0
    assert page.empty is True
