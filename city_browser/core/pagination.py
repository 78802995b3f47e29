"""
Page slicing, page metadata and navigation helpers.

Out-of-range page requests are clamped, never rejected: the result's
current_page always lies in [1, max(total_pages, 1)].
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_VISIBLE_PAGES = 5


@dataclass(frozen=True)
class PageRequest:
    current_page: int
    page_size: int
    total_items: int

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be at least 1, got {self.page_size}")
        if self.total_items < 0:
            raise ValueError(f"total_items must be non-negative, got {self.total_items}")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """
    One page of rows plus the metadata needed to render pagination controls.

    start_index / end_index are 1-based and inclusive, ready for
    "Showing 11 to 20 of 25 results".
    """
    data: List[T] = field(default_factory=list)
    current_page: int = 1
    page_size: int = 10
    total_items: int = 0
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False
    start_index: int = 1
    end_index: int = 0


def total_pages_for(total_items: int, page_size: int) -> int:
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)


def paginate(rows: Sequence[T], request: PageRequest) -> PageResult[T]:
    total_pages = total_pages_for(request.total_items, request.page_size)
    current_page = max(1, min(request.current_page, total_pages))

    start = (current_page - 1) * request.page_size
    end = min(start + request.page_size, request.total_items)

    logger.debug(
        "Paginated rows",
        extra={
            "requested_page": request.current_page,
            "current_page": current_page,
            "total_pages": total_pages,
        },
    )

    return PageResult(
        data=list(rows[start:end]),
        current_page=current_page,
        page_size=request.page_size,
        total_items=request.total_items,
        total_pages=total_pages,
        has_next_page=current_page < total_pages,
        has_previous_page=current_page > 1,
        start_index=start + 1,
        end_index=end,
    )


# -------------------------------------------------------------------------
# Navigation helpers
# -------------------------------------------------------------------------

def go_to_first_page() -> int:
    return 1


def go_to_previous_page(current_page: int) -> int:
    return max(1, current_page - 1)


def go_to_next_page(current_page: int, total_pages: int) -> int:
    return min(total_pages, current_page + 1)


def go_to_last_page(total_pages: int) -> int:
    return total_pages


def go_to_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


def get_page_numbers(
    current_page: int,
    total_pages: int,
    max_visible: int = DEFAULT_MAX_VISIBLE_PAGES,
) -> List[int]:
    """
    Page numbers to show as clickable controls.

    All pages when they fit; otherwise a window of `max_visible` pages centred
    on the current page, shifted (not shrunk) near either end.
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    half = max_visible // 2
    start = max(1, current_page - half)
    end = min(total_pages, start + max_visible - 1)

    # Near the end the window would be short, pull the start back
    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)

    return list(range(start, end + 1))
