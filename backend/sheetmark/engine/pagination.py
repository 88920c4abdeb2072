"""Page arithmetic for the row table."""

from __future__ import annotations

import math
from dataclasses import dataclass

PAGE_SIZE = 100
MAX_BUTTONS = 9


def total_pages(row_count: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(row_count / page_size))


def clamp_page(requested: int, pages: int) -> int:
    return min(max(1, requested), max(1, pages))


def page_window(page: int, pages: int, max_buttons: int = MAX_BUTTONS) -> list[int]:
    """Contiguous page numbers centred on ``page`` and kept inside ``1..pages``."""
    half = max_buttons // 2
    start = max(1, page - half)
    end = min(pages, start + max_buttons - 1)
    if end - start + 1 < max_buttons:
        start = max(1, end - max_buttons + 1)
    return list(range(start, end + 1))


def slice_bounds(page: int, row_count: int, page_size: int = PAGE_SIZE) -> tuple[int, int]:
    """Half-open ``[start, stop)`` row indices shown on ``page``."""
    start = (page - 1) * page_size
    return start, min(page * page_size, row_count)


@dataclass(frozen=True, slots=True)
class PageView:
    page: int
    total_pages: int
    row_count: int
    start: int
    stop: int
    window: tuple[int, ...]

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def rows_info(self) -> str:
        if not self.row_count:
            return ""
        return f"Rows {self.start + 1}–{self.stop} of {self.row_count} • Page {self.page}/{self.total_pages}"


def plan_page(
    row_count: int,
    requested: int,
    page_size: int = PAGE_SIZE,
    max_buttons: int = MAX_BUTTONS,
) -> PageView:
    pages = total_pages(row_count, page_size)
    page = clamp_page(requested, pages)
    start, stop = slice_bounds(page, row_count, page_size)
    return PageView(
        page=page,
        total_pages=pages,
        row_count=row_count,
        start=start,
        stop=stop,
        window=tuple(page_window(page, pages, max_buttons)),
    )


__all__ = [
    "PAGE_SIZE",
    "MAX_BUTTONS",
    "PageView",
    "total_pages",
    "clamp_page",
    "page_window",
    "slice_bounds",
    "plan_page",
]
