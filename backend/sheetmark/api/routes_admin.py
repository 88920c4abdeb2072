"""Destructive and administrative routes for Sheetmark."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from sheetmark.api.dependencies import get_workspace
from sheetmark.core.metrics import metrics_response
from sheetmark.models.dto import ActionResponse
from sheetmark.workspace import Workspace

router = APIRouter()


def _confirmed(flag: bool):
    return lambda _prompt: flag


@router.delete("/annotations", response_model=ActionResponse, summary="Clear the current file's annotations")
async def clear_annotations(
    confirm: bool = Query(default=False, description="Must be true for the clear to run"),
    workspace: Workspace = Depends(get_workspace),
) -> ActionResponse:
    status = await workspace.clear_annotations(_confirmed(confirm))
    return ActionResponse(status=status)


@router.delete("/dataset", response_model=ActionResponse, summary="Remove the current file, keeping its annotations")
async def remove_dataset(
    confirm: bool = Query(default=False, description="Must be true for the removal to run"),
    workspace: Workspace = Depends(get_workspace),
) -> ActionResponse:
    status = await workspace.remove_dataset(_confirmed(confirm))
    return ActionResponse(status=status)


@router.get("/metrics", summary="Prometheus metrics")
async def metrics():
    return metrics_response()
