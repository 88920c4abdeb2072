"""Per-row annotation sets scoped by file identity."""

from __future__ import annotations

from typing import Any

from sheetmark.core.errors import ValidationError
from sheetmark.models.entities import (
    DEFAULT_ANNOTATION,
    AnnotationPatch,
    AnnotationSet,
    RowAnnotation,
)
from sheetmark.store.base import KeyValueStore

NAMESPACE = "annotations"


class AnnotationStore:
    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    async def get_all(self, identity: str) -> AnnotationSet:
        """Return the identity's annotations; empty when nothing was written."""
        raw = await self.backend.get(NAMESPACE, identity)
        return _decode(raw)

    async def get_row(self, identity: str, index: int) -> RowAnnotation:
        annotations = await self.get_all(identity)
        return annotations.get(index, DEFAULT_ANNOTATION)

    async def merge_row(self, identity: str, index: int, patch: AnnotationPatch) -> RowAnnotation:
        """Apply ``patch`` onto row ``index`` and persist the whole set.

        Fields absent from the patch keep their stored value (or the default
        for rows never written).
        """
        if index < 0:
            raise ValidationError(f"Row index must be non-negative, got {index}")

        def _apply(current: dict[str, Any] | None) -> dict[str, Any]:
            annotations = dict(current or {})
            previous = annotations.get(str(index))
            base = RowAnnotation.from_dict(previous) if previous else DEFAULT_ANNOTATION
            annotations[str(index)] = base.merged(patch).to_dict()
            return annotations

        stored = await self.backend.merge(NAMESPACE, identity, _apply)
        return RowAnnotation.from_dict(stored[str(index)])

    async def clear(self, identity: str) -> None:
        await self.backend.delete(NAMESPACE, identity)


def _decode(raw: dict[str, Any] | None) -> AnnotationSet:
    if not raw:
        return {}
    return {int(index): RowAnnotation.from_dict(payload) for index, payload in raw.items()}


__all__ = ["AnnotationStore"]
