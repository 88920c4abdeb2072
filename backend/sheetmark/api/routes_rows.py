"""Row browsing and annotation routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from sheetmark.api.dependencies import get_workspace
from sheetmark.models.dto import (
    AnnotationModel,
    AnnotationPatchRequest,
    PageResponse,
    RowUpdateResponse,
    SummaryModel,
)
from sheetmark.models.entities import AnnotationPatch
from sheetmark.workspace import Workspace

router = APIRouter()


@router.get("/rows", response_model=PageResponse, summary="Render one page of rows")
async def read_page(
    page: int | None = Query(default=None, ge=1, description="1-based page; defaults to the current page"),
    workspace: Workspace = Depends(get_workspace),
) -> PageResponse:
    snapshot = await workspace.open_page(page or workspace.state.page)
    return PageResponse.from_snapshot(snapshot)


@router.patch("/rows/{index}", response_model=RowUpdateResponse, summary="Update a row's annotation")
async def update_row(
    index: int,
    request: AnnotationPatchRequest,
    workspace: Workspace = Depends(get_workspace),
) -> RowUpdateResponse:
    patch = AnnotationPatch(messaged=request.messaged, bookmark=request.bookmark)
    update = await workspace.update_row(index, patch)
    return RowUpdateResponse(
        index=update.index,
        annotation=AnnotationModel.from_entity(update.annotation),
        summary=SummaryModel.from_entity(update.counting),
    )


@router.get("/summary", response_model=SummaryModel, summary="Counting range and checked rows")
async def read_summary(workspace: Workspace = Depends(get_workspace)) -> SummaryModel:
    return SummaryModel.from_entity(await workspace.summary())
