"""Spreadsheet parsers turning raw bytes into a grid of cells."""

from __future__ import annotations

import csv
import io
from pathlib import PurePath

from openpyxl import load_workbook

from sheetmark.core.errors import ParseError
from sheetmark.ingest.types import CellGrid


class BaseParser:
    """Common parser interface."""

    suffixes: tuple[str, ...] = ()

    def can_parse(self, name: str) -> bool:
        return PurePath(name).suffix.lower() in self.suffixes

    def parse(self, content: bytes) -> CellGrid:  # pragma: no cover - interface
        raise NotImplementedError


class XlsxParser(BaseParser):
    """Reads every row of the first worksheet, blank rows included."""

    suffixes = (".xlsx", ".xlsm")

    def parse(self, content: bytes) -> CellGrid:
        wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        try:
            if not wb.worksheets:
                return []
            ws = wb.worksheets[0]
            return [list(row) for row in ws.iter_rows(values_only=True)]
        finally:
            wb.close()


class CsvParser(BaseParser):
    suffixes = (".csv",)

    def parse(self, content: bytes) -> CellGrid:
        text = content.decode("utf-8-sig")
        return [list(row) for row in csv.reader(io.StringIO(text, newline=""))]


class ParserRegistry:
    def __init__(self, parsers: list[BaseParser] | None = None) -> None:
        self.parsers = parsers or [XlsxParser(), CsvParser()]

    def parser_for(self, name: str) -> BaseParser:
        for parser in self.parsers:
            if parser.can_parse(name):
                return parser
        raise ParseError(f"Unsupported file type: {name}")

    def parse(self, name: str, content: bytes) -> CellGrid:
        parser = self.parser_for(name)
        try:
            return parser.parse(content)
        except Exception as exc:
            raise ParseError(f"Failed to read {name}: {exc}") from exc


__all__ = ["BaseParser", "XlsxParser", "CsvParser", "ParserRegistry"]
