"""Import orchestration."""

from __future__ import annotations

import time
from datetime import date, datetime
from typing import Any, Sequence

from sheetmark.core.config import Settings
from sheetmark.core.errors import SheetmarkError
from sheetmark.core.logging import get_logger
from sheetmark.core.metrics import IMPORT_COUNT, IMPORT_DURATION
from sheetmark.ingest.identity import resolve_identity
from sheetmark.ingest.parsers import ParserRegistry
from sheetmark.ingest.types import CellGrid, ImportResult
from sheetmark.models.entities import ROW_WIDTH, RowRecord
from sheetmark.store import Stores

logger = get_logger(__name__)


class ImportPipeline:
    """Resolve identity, parse, persist, then look up the page to resume on.

    Each step waits for the previous one. Nothing is written when parsing
    fails, and annotations for the identity are never touched.
    """

    def __init__(
        self,
        stores: Stores,
        settings: Settings,
        parsers: ParserRegistry | None = None,
    ) -> None:
        self.stores = stores
        self.settings = settings
        self.parsers = parsers or ParserRegistry()

    async def import_file(self, content: bytes, name: str, size: int | None = None) -> ImportResult:
        started = time.perf_counter()
        try:
            identity = resolve_identity(content, name, size, algorithm=self.settings.digest_algorithm)
            grid = self.parsers.parse(name, content)
            rows = project_rows(grid, offset=self.settings.source_column_offset)

            await self.stores.datasets.put(identity.key, rows)
            await self.stores.session.set_current(identity.key)
            resume_page = await self.stores.pages.get(identity.key) or 1
        except SheetmarkError as exc:
            IMPORT_COUNT.labels(status="failed").inc()
            logger.error("Import of %s failed: %s", name, exc, extra={"ctx_file": name})
            raise
        IMPORT_COUNT.labels(status="completed").inc()
        IMPORT_DURATION.observe(time.perf_counter() - started)
        logger.info(
            "Imported %s rows from %s",
            len(rows),
            name,
            extra={"ctx_identity": identity.key, "ctx_degraded": identity.degraded},
        )
        return ImportResult(identity=identity, rows=rows, resume_page=resume_page)


def project_rows(grid: CellGrid, offset: int = 1) -> list[RowRecord]:
    """Map the five source columns starting at ``offset`` onto fixed-width rows."""
    return [RowRecord(*(_cell_text(row, offset + position) for position in range(ROW_WIDTH))) for row in grid]


def _cell_text(row: Sequence[Any], column: int) -> str:
    if column >= len(row):
        return ""
    value = row[column]
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


__all__ = ["ImportPipeline", "project_rows"]
