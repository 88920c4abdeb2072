"""Common import data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sheetmark.models.entities import FileIdentity, RowRecord

CellGrid = list[list[Any]]


@dataclass(slots=True)
class ImportResult:
    """Outcome of a successful import."""

    identity: FileIdentity
    rows: Sequence[RowRecord]
    resume_page: int

    @property
    def row_count(self) -> int:
        return len(self.rows)


__all__ = ["CellGrid", "ImportResult"]
