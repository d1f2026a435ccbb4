"""Listing — the count → bound-check → fetch sandwich shared by every paged listing.

Invariants:
    - The request is validated before the store is touched
    - count is always called; fetch only when there is at least one page
    - page == total_pages is valid and yields an empty page
    - No caching: every call re-queries the store

Design Decisions:
    - Store access passed in as two callables so computers (filtered, sorted)
      and companies (plain) share one orchestration
"""

import logging
from typing import Awaitable, Callable, TypeVar

from computer_db.core.enforce_requests import check_page_in_range, check_query_request
from computer_db.core.errors import InvalidArgumentError, Violation
from computer_db.core.paging import Page, QueryRequest, count_pages, offset

logger = logging.getLogger(__name__)

T = TypeVar("T")

CountFn = Callable[[], Awaitable[int]]
FetchFn = Callable[[int, int], Awaitable[list[T]]]


def raise_if(violation: Violation | None) -> None:
    """Shell side of the pure checks: a Violation becomes InvalidArgumentError."""
    if violation:
        raise InvalidArgumentError(violation)


async def fetch_page(
    request: QueryRequest | None, count: CountFn, fetch: FetchFn,
) -> Page[T]:
    """Resolve a QueryRequest into one Page using the given store callables."""
    raise_if(check_query_request(request))

    total = await count()
    total_pages = count_pages(request.page_size, total)

    raise_if(check_page_in_range(request.page, total_pages))

    if total_pages == 0:
        elements: list[T] = []
    else:
        elements = await fetch(request.page_size, offset(request.page, request.page_size))

    logger.debug(
        f"Listed page {request.page}/{total_pages} "
        f"({len(elements)} of {total} element(s))",
    )
    return Page(
        current_page=request.page,
        total_pages=total_pages,
        total_elements=total,
        page_size=request.page_size,
        elements=tuple(elements),
    )
