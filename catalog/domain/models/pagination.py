"""Pagination request and result types.

Two strategies are supported:
  - offset pagination (Page): page number + limit, with a total count.
  - cursor pagination (CursorPage): records strictly older than a
    created_at cursor, with no count query.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from catalog.domain.exceptions import ValidationError

from .filters import Filter

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = False


# created_at alone is not a total order; id breaks ties so repeated calls page identically.
NEWEST_FIRST: tuple[SortKey, ...] = (SortKey("created_at", descending=True), SortKey("id"))
RECENTLY_UPDATED_FIRST: tuple[SortKey, ...] = (
    SortKey("updated_at", descending=True),
    SortKey("id"),
)


def check_window(page: int, limit: int) -> None:
    """Raise ValidationError unless page >= 1 and limit >= 1."""
    if page < 1:
        raise ValidationError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise ValidationError(f"limit must be >= 1, got {limit}")


@dataclass(frozen=True)
class FindAllOptions:
    """Options for Repository.find_all().

    filter is combined with the repository's own soft-delete predicate;
    relations names ORM relationships to eager-load with each record.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    filter: Filter = ()
    sort: tuple[SortKey, ...] = NEWEST_FIRST
    relations: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        check_window(self.page, self.limit)


class Page(BaseModel, Generic[T]):
    """One page of an offset-paginated listing."""

    model_config = ConfigDict(frozen=True)

    data: list[T]
    total_pages: int
    current_page: int
    total_count: int

    @classmethod
    def build(cls, data: list[T], total_count: int, page: int, limit: int) -> Page[T]:
        return cls(
            data=data,
            total_pages=math.ceil(total_count / limit),
            current_page=page,
            total_count=total_count,
        )


class CursorPage(BaseModel, Generic[T]):
    """One batch of a cursor-paginated (infinite scroll) listing.

    has_more is True whenever a full batch came back.  When exactly
    `limit` records remained, the terminal batch still reports
    has_more=True and the next call returns an empty batch with
    has_more=False.
    """

    model_config = ConfigDict(frozen=True)

    data: list[T]
    next_cursor: datetime | None
    has_more: bool
