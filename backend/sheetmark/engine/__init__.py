"""Pure range and pagination computations."""

from .counting import compute_counting_range
from .pagination import (
    MAX_BUTTONS,
    PAGE_SIZE,
    PageView,
    clamp_page,
    page_window,
    plan_page,
    slice_bounds,
    total_pages,
)

__all__ = [
    "compute_counting_range",
    "PAGE_SIZE",
    "MAX_BUTTONS",
    "PageView",
    "total_pages",
    "clamp_page",
    "page_window",
    "slice_bounds",
    "plan_page",
]
