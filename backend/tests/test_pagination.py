"""Tests for page arithmetic."""

from __future__ import annotations

import pytest

from sheetmark.engine import clamp_page, page_window, plan_page, slice_bounds, total_pages


@pytest.mark.parametrize(
    ("rows", "expected"),
    [(0, 1), (1, 1), (100, 1), (101, 2), (250, 3), (1000, 10)],
)
def test_total_pages(rows: int, expected: int) -> None:
    assert total_pages(rows) == expected


def test_clamp_page() -> None:
    assert clamp_page(0, 3) == 1
    assert clamp_page(-4, 3) == 1
    assert clamp_page(2, 3) == 2
    assert clamp_page(9, 3) == 3


@pytest.mark.parametrize(
    ("page", "pages", "expected"),
    [
        (1, 20, list(range(1, 10))),
        (10, 20, list(range(6, 15))),
        (20, 20, list(range(12, 21))),
        (18, 20, list(range(12, 21))),
        (2, 3, [1, 2, 3]),
        (1, 1, [1]),
    ],
)
def test_page_window(page: int, pages: int, expected: list[int]) -> None:
    assert page_window(page, pages) == expected


def test_slice_bounds_last_page_is_short() -> None:
    assert slice_bounds(1, 250) == (0, 100)
    assert slice_bounds(3, 250) == (200, 250)


def test_plan_page_clamps_and_describes() -> None:
    view = plan_page(250, 7)
    assert view.page == 3
    assert (view.start, view.stop) == (200, 250)
    assert view.has_previous and not view.has_next
    assert view.rows_info() == "Rows 201–250 of 250 • Page 3/3"


def test_plan_page_without_rows() -> None:
    view = plan_page(0, 4)
    assert view.page == 1
    assert (view.start, view.stop) == (0, 0)
    assert view.window == (1,)
    assert view.rows_info() == ""
