"""User-facing actions over the current file, its page and its annotations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Sequence

from sheetmark.core.config import Settings
from sheetmark.core.errors import PersistenceError, ValidationError
from sheetmark.core.logging import get_logger
from sheetmark.core.metrics import ANNOTATION_EDITS, DATASET_ROWS
from sheetmark.engine import PageView, compute_counting_range, plan_page
from sheetmark.ingest.pipeline import ImportPipeline
from sheetmark.models.entities import (
    DEFAULT_ANNOTATION,
    AnnotationPatch,
    Bookmark,
    CountingRange,
    RowAnnotation,
    RowRecord,
)
from sheetmark.store import Stores

logger = get_logger(__name__)

GLOBAL_ANNOTATION_KEY = "global"

Confirm = Callable[[str], bool]


@dataclass(slots=True)
class AppState:
    """What is on screen: the open file, its rows and the current page."""

    identity: str | None = None
    rows: list[RowRecord] = field(default_factory=list)
    page: int = 1

    @property
    def annotation_key(self) -> str:
        return self.identity or GLOBAL_ANNOTATION_KEY


@dataclass(frozen=True, slots=True)
class AnnotatedRow:
    index: int
    record: RowRecord
    annotation: RowAnnotation


@dataclass(frozen=True, slots=True)
class PageSnapshot:
    identity: str | None
    view: PageView
    rows: Sequence[AnnotatedRow]
    counting: CountingRange


@dataclass(frozen=True, slots=True)
class RowUpdate:
    index: int
    annotation: RowAnnotation
    counting: CountingRange


class Workspace:
    """Owns the application state and sequences store calls for each action.

    A failed store call propagates and leaves ``state`` as it was before the
    call, except after a successful import where the state already points at
    the new file.
    """

    def __init__(self, stores: Stores, settings: Settings, pipeline: ImportPipeline | None = None) -> None:
        self.stores = stores
        self.settings = settings
        self.pipeline = pipeline or ImportPipeline(stores, settings)
        self.state = AppState()

    async def restore(self) -> PageSnapshot:
        """Reopen the file that was current when the app last ran.

        Unreadable stored state is logged and the app starts empty on page 1.
        """
        identity: str | None = None
        rows: list[RowRecord] = []
        page = 1
        try:
            identity = await self.stores.session.get_current()
            if identity:
                rows = await self.stores.datasets.get(identity) or []
                page = await self.stores.pages.get(identity) or 1
        except PersistenceError as exc:
            logger.warning("Could not restore last file: %s", exc, extra={"ctx_identity": identity})
            identity, rows, page = None, [], 1
        self.state = AppState(identity=identity, rows=rows, page=page)
        DATASET_ROWS.set(len(rows))
        logger.info("Restored %s rows", len(rows), extra={"ctx_identity": identity})
        return await self.open_page(page)

    async def import_file(self, content: bytes, name: str, size: int | None = None) -> PageSnapshot:
        result = await self.pipeline.import_file(content, name, size)
        self.state = AppState(identity=result.identity.key, rows=list(result.rows), page=result.resume_page)
        DATASET_ROWS.set(result.row_count)
        return await self.open_page(result.resume_page)

    async def open_page(self, page: int) -> PageSnapshot:
        view = plan_page(
            len(self.state.rows),
            page,
            page_size=self.settings.page_size,
            max_buttons=self.settings.max_page_buttons,
        )
        await self.stores.pages.set(self.state.identity, view.page)
        self.state.page = view.page

        annotations = await self.stores.annotations.get_all(self.state.annotation_key)
        rows = [
            AnnotatedRow(
                index=index,
                record=self.state.rows[index],
                annotation=annotations.get(index, DEFAULT_ANNOTATION),
            )
            for index in range(view.start, view.stop)
        ]
        return PageSnapshot(
            identity=self.state.identity,
            view=view,
            rows=rows,
            counting=compute_counting_range(annotations, len(self.state.rows)),
        )

    async def update_row(self, index: int, patch: AnnotationPatch) -> RowUpdate:
        if not 0 <= index < len(self.state.rows):
            raise ValidationError(f"Row {index} is outside the dataset (0..{len(self.state.rows) - 1})")
        if patch.is_empty:
            raise ValidationError("Nothing to update")
        annotation = await self.stores.annotations.merge_row(self.state.annotation_key, index, patch)
        for name in patch.fields:
            ANNOTATION_EDITS.labels(field=name).inc()
        return RowUpdate(index=index, annotation=annotation, counting=await self.summary())

    async def set_messaged(self, index: int, messaged: bool) -> RowUpdate:
        return await self.update_row(index, AnnotationPatch(messaged=messaged))

    async def set_bookmark(self, index: int, bookmark: Bookmark | str) -> RowUpdate:
        return await self.update_row(index, AnnotationPatch(bookmark=Bookmark.parse(bookmark)))

    async def summary(self) -> CountingRange:
        annotations = await self.stores.annotations.get_all(self.state.annotation_key)
        return compute_counting_range(annotations, len(self.state.rows))

    async def clear_annotations(self, confirm: Confirm) -> Literal["ok", "declined"]:
        """Drop every checkmark and bookmark of the current file, after confirmation."""
        if not confirm("Clear all checkmarks & bookmarks for this file?"):
            return "declined"
        await self.stores.annotations.clear(self.state.annotation_key)
        logger.info("Cleared annotations", extra={"ctx_identity": self.state.annotation_key})
        return "ok"

    async def remove_dataset(self, confirm: Confirm) -> Literal["ok", "noop", "declined"]:
        """Forget the current file's rows; its annotations and page stay stored."""
        identity = self.state.identity
        if identity is None:
            if not confirm("No file loaded. Clear everything stored?"):
                return "declined"
            await self.stores.pages.set(None, 1)
            self.state.page = 1
            return "noop"
        if not confirm("Remove current file? (Table will be emptied, bookmarks/states will be kept)"):
            return "declined"
        await self.stores.datasets.delete(identity)
        await self.stores.session.forget_current()
        self.state = AppState()
        await self.stores.pages.set(None, 1)
        DATASET_ROWS.set(0)
        logger.info("Removed dataset", extra={"ctx_identity": identity})
        return "ok"


__all__ = ["AppState", "AnnotatedRow", "PageSnapshot", "RowUpdate", "Workspace"]
