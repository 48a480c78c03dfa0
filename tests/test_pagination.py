"""Tests for pagination and sort parsing."""

import pytest

from app.core.exceptions import InvalidInputException
from app.schemas.pagination import Page, Pageable, SortDirection, SortOrder, parse_sort

ALLOWED = {"created_at", "rating"}


def test_parse_sort_defaults_to_ascending() -> None:
    """A bare field sorts ascending."""
    assert parse_sort(["rating"], ALLOWED) == [SortOrder(field="rating")]


def test_parse_sort_keeps_request_order() -> None:
    """Several sort values are applied in the order given."""
    orders = parse_sort(["rating,DESC", "created_at,asc"], ALLOWED)

    assert [(o.field, o.direction) for o in orders] == [
        ("rating", SortDirection.DESC),
        ("created_at", SortDirection.ASC),
    ]


def test_parse_sort_none_is_empty() -> None:
    """No sort parameter means no explicit order."""
    assert parse_sort(None, ALLOWED) == []


def test_parse_sort_rejects_unknown_field() -> None:
    """Unknown fields are invalid input."""
    with pytest.raises(InvalidInputException) as exc_info:
        parse_sort(["author_id,desc"], ALLOWED)
    assert exc_info.value.field == "sort"
    assert "author_id" in exc_info.value.message


def test_parse_sort_rejects_unknown_direction() -> None:
    """Directions other than asc/desc are invalid input."""
    with pytest.raises(InvalidInputException, match="sideways"):
        parse_sort(["rating,sideways"], ALLOWED)


def test_with_default_sort_only_applies_when_unsorted() -> None:
    """An explicit sort wins over the default."""
    newest = SortOrder(field="created_at", direction=SortDirection.DESC)
    by_rating = SortOrder(field="rating")

    assert Pageable().with_default_sort(newest).sort == [newest]
    assert Pageable(sort=[by_rating]).with_default_sort(newest).sort == [by_rating]


def test_offset_and_total_pages() -> None:
    """Offset is page * size and total pages rounds up."""
    assert Pageable(page=2, size=10).offset == 20
    assert Page[int](items=[], total=21, page=0, size=10).total_pages == 3
    assert Page[int](items=[], total=0, page=0, size=10).total_pages == 0
