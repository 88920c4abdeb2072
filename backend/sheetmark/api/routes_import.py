"""Import API routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from sheetmark.api.dependencies import get_workspace
from sheetmark.models.dto import PageResponse
from sheetmark.workspace import Workspace

router = APIRouter()


@router.post("", response_model=PageResponse, summary="Import a spreadsheet")
async def import_file(
    request: Request,
    name: str = Query(..., min_length=1, description="Original file name, including extension"),
    workspace: Workspace = Depends(get_workspace),
) -> PageResponse:
    content = await request.body()
    snapshot = await workspace.import_file(content, name, len(content))
    return PageResponse.from_snapshot(snapshot)
