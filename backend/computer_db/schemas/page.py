"""Page Schema — JSON shape of a core Page.

Invariants:
    - Field names mirror core/paging.Page one-to-one
    - Elements converted by the caller-supplied mapper, order preserved
"""

from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from computer_db.core.paging import Page

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    current_page: int
    total_pages: int
    total_elements: int
    page_size: int
    elements: list[T]

    @classmethod
    def from_page(cls, page: Page, convert: Callable) -> "PageResponse":
        return cls(
            current_page=page.current_page,
            total_pages=page.total_pages,
            total_elements=page.total_elements,
            page_size=page.page_size,
            elements=[convert(e) for e in page.elements],
        )
