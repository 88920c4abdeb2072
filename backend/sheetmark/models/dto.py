"""Pydantic DTOs exposed via API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, StrictBool

from sheetmark.models.entities import CountingRange, RowAnnotation
from sheetmark.workspace import PageSnapshot

BookmarkValue = Literal["", "start", "end"]


class AnnotationModel(BaseModel):
    messaged: bool
    bookmark: BookmarkValue

    @classmethod
    def from_entity(cls, annotation: RowAnnotation) -> "AnnotationModel":
        return cls(messaged=annotation.messaged, bookmark=annotation.bookmark.value)


class RowModel(BaseModel):
    index: int
    number: int = Field(description="1-based row number as displayed")
    cells: list[str]
    link: str
    annotation: AnnotationModel


class PaginationModel(BaseModel):
    page: int
    total_pages: int
    window: list[int]
    has_previous: bool
    has_next: bool
    rows_info: str


class SummaryModel(BaseModel):
    start_index: int
    end_index: int
    count: int
    empty: bool
    details: str

    @classmethod
    def from_entity(cls, counting: CountingRange) -> "SummaryModel":
        return cls(
            start_index=counting.start_index,
            end_index=counting.end_index,
            count=counting.count,
            empty=counting.empty,
            details=counting.describe(),
        )


class PageResponse(BaseModel):
    identity: str | None
    pagination: PaginationModel
    rows: list[RowModel]
    summary: SummaryModel

    @classmethod
    def from_snapshot(cls, snapshot: PageSnapshot) -> "PageResponse":
        view = snapshot.view
        return cls(
            identity=snapshot.identity,
            pagination=PaginationModel(
                page=view.page,
                total_pages=view.total_pages,
                window=list(view.window),
                has_previous=view.has_previous,
                has_next=view.has_next,
                rows_info=view.rows_info(),
            ),
            rows=[
                RowModel(
                    index=row.index,
                    number=row.index + 1,
                    cells=list(row.record[:4]),
                    link=row.record.link.strip(),
                    annotation=AnnotationModel.from_entity(row.annotation),
                )
                for row in snapshot.rows
            ],
            summary=SummaryModel.from_entity(snapshot.counting),
        )


class AnnotationPatchRequest(BaseModel):
    messaged: StrictBool | None = None
    bookmark: Literal["", "none", "start", "end"] | None = None


class RowUpdateResponse(BaseModel):
    index: int
    annotation: AnnotationModel
    summary: SummaryModel


class ActionResponse(BaseModel):
    status: Literal["ok", "noop", "declined"]


__all__ = [
    "AnnotationModel",
    "RowModel",
    "PaginationModel",
    "SummaryModel",
    "PageResponse",
    "AnnotationPatchRequest",
    "RowUpdateResponse",
    "ActionResponse",
]
