"""Pagination and sorting schemas."""

import math
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

from app.core.exceptions import InvalidInputException

T = TypeVar("T")


class SortDirection(str, Enum):
    """Sort direction enumeration."""

    ASC = "asc"
    DESC = "desc"


class SortOrder(BaseModel):
    """A single ``field, direction`` sort instruction."""

    field: str
    direction: SortDirection = SortDirection.ASC


class Pageable(BaseModel):
    """Page request: zero-based page number, page size and optional sort orders."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: list[SortOrder] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return self.page * self.size

    def with_default_sort(self, *orders: SortOrder) -> "Pageable":
        """Return this pageable, or a copy carrying ``orders`` when no sort was requested."""
        if self.sort:
            return self
        return self.model_copy(update={"sort": list(orders)})


class Page(BaseModel, Generic[T]):
    """One page of results."""

    items: list[T]
    total: int
    page: int
    size: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages for the current size."""
        return math.ceil(self.total / self.size) if self.size else 0


def parse_sort(values: list[str] | None, allowed: set[str]) -> list[SortOrder]:
    """
    Parse ``field[,asc|desc]`` query values into sort orders.

    Args:
        values: Raw ``sort`` query parameter values
        allowed: Field names the caller may sort on

    Returns:
        Parsed sort orders, in request order

    Raises:
        InvalidInputException: On unknown field or direction
    """
    orders: list[SortOrder] = []
    for raw in values or []:
        parts = [part.strip() for part in raw.split(",")]
        field = parts[0]
        if field not in allowed:
            raise InvalidInputException(
                f"Cannot sort by '{field}'. Allowed: {', '.join(sorted(allowed))}",
                field="sort",
                value=raw,
            )

        direction = SortDirection.ASC
        if len(parts) > 1 and parts[1]:
            try:
                direction = SortDirection(parts[1].lower())
            except ValueError:
                raise InvalidInputException(
                    f"Invalid sort direction '{parts[1]}'. Allowed: asc, desc",
                    field="sort",
                    value=raw,
                )

        orders.append(SortOrder(field=field, direction=direction))

    return orders
