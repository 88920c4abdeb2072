"""Tests for spreadsheet parsing and row projection."""

from __future__ import annotations

import io

import pytest
from openpyxl import Workbook

from sheetmark.core.errors import ParseError
from sheetmark.ingest.parsers import ParserRegistry
from sheetmark.ingest.pipeline import project_rows
from sheetmark.models.entities import RowRecord


def _xlsx_bytes(rows: list[list[object]]) -> bytes:
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def test_xlsx_first_sheet_is_projected() -> None:
    content = _xlsx_bytes(
        [
            [1, "alice", "Alice A", 10.0, True, "https://example.com/alice"],
            [2, "bob", None, 20.5],
        ]
    )
    grid = ParserRegistry().parse("leads.xlsx", content)
    rows = project_rows(grid)
    assert rows == [
        RowRecord("alice", "Alice A", "10", "TRUE", "https://example.com/alice"),
        RowRecord("bob", "", "20.5", "", ""),
    ]


def test_csv_rows_with_missing_cells_are_padded(sample_csv: bytes) -> None:
    rows = project_rows(ParserRegistry().parse("leads.csv", sample_csv))
    assert len(rows) == 3
    assert rows[0].link == "https://example.com/alice"
    assert rows[2] == RowRecord("carol", "", "30", "", "")


def test_blank_rows_are_kept() -> None:
    rows = project_rows([["1", "a"], [], ["3", "c"]])
    assert [row.field_1 for row in rows] == ["a", "", "c"]


def test_column_offset_is_configurable() -> None:
    rows = project_rows([["a", "b", "c", "d", "e", "f"]], offset=0)
    assert rows == [RowRecord("a", "b", "c", "d", "e")]


def test_unknown_extension_is_a_parse_error() -> None:
    with pytest.raises(ParseError):
        ParserRegistry().parse("notes.pdf", b"%PDF-1.4")


def test_corrupt_workbook_is_a_parse_error() -> None:
    with pytest.raises(ParseError):
        ParserRegistry().parse("broken.xlsx", b"not a zip archive")
