"""Paging — pure pagination arithmetic and the listing value objects.

Invariants:
    - count_pages(size, total) == ceil(total / size), computed with integers only
    - count_pages(size, 0) == 0
    - offset(page, size) == page * size (pages are 0-based)
    - QueryRequest and Page are frozen: built once, never mutated
    - Page.current_page in [0, total_pages]; len(elements) <= page_size

Design Decisions:
    - page == total_pages is a valid page (structurally empty), checked by the
      listing rules, not here
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from computer_db.core.domain_types import SortColumn, SortDirection
from computer_db.core.errors import InvalidArgumentError, Violation

T = TypeVar("T")


def count_pages(page_size: int, total_elements: int) -> int:
    """Number of pages needed to hold total_elements. Pure."""
    if page_size <= 0:
        raise InvalidArgumentError(
            Violation("page_size", "Page size must be > 0"),
        )
    if total_elements < 0:
        raise InvalidArgumentError(
            Violation("total_elements", "Total elements must be >= 0"),
        )
    if total_elements == 0:
        return 0
    return (total_elements + page_size - 1) // page_size


def offset(page: int, page_size: int) -> int:
    """Index of the first element of a 0-based page."""
    return page * page_size


@dataclass(frozen=True)
class QueryRequest:
    """Listing parameters, as handed over by the input layer."""
    page: int = 0
    page_size: int = 10
    filter_text: str | None = None
    sort_column: SortColumn = SortColumn.NAME
    sort_direction: SortDirection = SortDirection.ASC
    company_id: int | None = None

    @property
    def offset(self) -> int:
        return offset(self.page, self.page_size)


@dataclass(frozen=True)
class Page(Generic[T]):
    """A bounded slice of a result set plus its metadata."""
    current_page: int
    total_pages: int
    total_elements: int
    page_size: int
    elements: tuple[T, ...] = ()
