"""Client-side pagination over the in-memory log list.

The current page is only clamped by explicit navigation. Replacing the
items (e.g. after a delete) keeps the current page as is, so a page past
the new end simply renders empty.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Sequence, Union

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_ITEMS_PER_PAGE = 10
MAX_PAGES_TO_SHOW = 5
ELLIPSIS = "..."


@dataclass
class Paginator:
    """Page window over an ordered sequence."""

    items: Sequence[Any] = field(default_factory=list)
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    current_page: int = 1

    def __post_init__(self) -> None:
        if self.items_per_page <= 0:
            raise ValueError(f"items_per_page must be positive, got {self.items_per_page}")
        if self.current_page < 1:
            self.current_page = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(len(self.items) / self.items_per_page)

    @property
    def paginated_data(self) -> list[Any]:
        start = (self.current_page - 1) * self.items_per_page
        return list(self.items[start:start + self.items_per_page])

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    def set_items(self, items: Sequence[Any]) -> None:
        """Swap the backing sequence without touching the current page."""
        self.items = items

    def go_to_page(self, page: int) -> None:
        """Jump to ``page``, clamped into [1, max(total_pages, 1)]."""
        self.current_page = max(1, min(page, max(self.total_pages, 1)))
        logger.debug("page_changed", page=self.current_page, total_pages=self.total_pages)

    def next_page(self) -> None:
        if self.has_next_page:
            self.current_page += 1

    def previous_page(self) -> None:
        if self.has_previous_page:
            self.current_page -= 1

    def go_to_first_page(self) -> None:
        self.current_page = 1

    def go_to_last_page(self) -> None:
        # An empty list has no last page; stay on 1.
        self.current_page = max(self.total_pages, 1)


def page_numbers(current_page: int, total_pages: int) -> list[Union[int, str]]:
    """Page labels for the pagination bar.

    All pages when there are at most five. Otherwise the first and last
    page, a three-page window around ``current_page`` (shifted near either
    end), and ``ELLIPSIS`` wherever the window does not touch them.

    >>> page_numbers(5, 10)
    [1, '...', 4, 5, 6, '...', 10]
    """
    if total_pages <= MAX_PAGES_TO_SHOW:
        return list(range(1, total_pages + 1))

    start = max(2, current_page - 1)
    end = min(total_pages - 1, current_page + 1)
    if current_page <= 3:
        end = 4
    if current_page >= total_pages - 2:
        start = total_pages - 3

    pages: list[Union[int, str]] = [1]
    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    pages.append(total_pages)
    return pages
