"""Derive the counting range from sparse start/end bookmarks."""

from __future__ import annotations

from typing import Mapping

from sheetmark.models.entities import Bookmark, CountingRange, RowAnnotation


def compute_counting_range(annotations: Mapping[int, RowAnnotation], row_count: int) -> CountingRange:
    """Return the active range and how many messaged rows fall inside it.

    The highest-index START opens the range. The highest-index END at or after
    that start closes it; an END before the active start is ignored and the
    range runs to the last row. Annotations outside ``0..row_count-1`` have no
    effect. With no rows the range is empty (``end_index == -1``).
    """
    if row_count <= 0:
        return CountingRange(start_index=0, end_index=-1, count=0)

    in_range = {
        index: annotation
        for index, annotation in annotations.items()
        if 0 <= index < row_count
    }

    last_start = max(
        (index for index, annotation in in_range.items() if annotation.bookmark is Bookmark.START),
        default=-1,
    )
    last_end = max(
        (
            index
            for index, annotation in in_range.items()
            if annotation.bookmark is Bookmark.END and (last_start == -1 or index >= last_start)
        ),
        default=-1,
    )

    start_index = last_start if last_start >= 0 else 0
    end_index = last_end if last_end >= start_index else row_count - 1
    count = sum(
        1
        for index, annotation in in_range.items()
        if start_index <= index <= end_index and annotation.messaged
    )
    return CountingRange(start_index=start_index, end_index=end_index, count=count)


__all__ = ["compute_counting_range"]
