"""Bulk row data, one dataset per file identity."""

from __future__ import annotations

from typing import Sequence

from sheetmark.models.entities import ROW_WIDTH, RowRecord
from sheetmark.store.base import KeyValueStore

NAMESPACE = "datasets"


class DatasetStore:
    """Identity → ordered rows. ``put`` replaces the whole dataset."""

    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    async def put(self, identity: str, rows: Sequence[RowRecord]) -> None:
        record = {"id": identity, "data": [list(row) for row in rows]}
        await self.backend.put(NAMESPACE, identity, record)

    async def get(self, identity: str) -> list[RowRecord] | None:
        record = await self.backend.get(NAMESPACE, identity)
        if record is None:
            return None
        return [_to_row(values) for values in record.get("data") or []]

    async def delete(self, identity: str) -> None:
        # Annotations and pages for the identity are left in place on purpose.
        await self.backend.delete(NAMESPACE, identity)


def _to_row(values: Sequence[str]) -> RowRecord:
    padded = list(values[:ROW_WIDTH]) + [""] * (ROW_WIDTH - len(values))
    return RowRecord(*padded)


__all__ = ["DatasetStore"]
