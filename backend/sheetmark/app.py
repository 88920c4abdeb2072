"""FastAPI application setup for Sheetmark."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sheetmark.api.dependencies import get_app_settings, get_stores, get_workspace
from sheetmark.api.routes_admin import router as admin_router
from sheetmark.api.routes_import import router as import_router
from sheetmark.api.routes_rows import router as rows_router
from sheetmark.core.errors import ParseError, PersistenceError, SheetmarkError, ValidationError
from sheetmark.core.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="Sheetmark",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://127.0.0.1:5180",
        "http://localhost:5180",
    ],
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(import_router, prefix="/import", tags=["import"])
app.include_router(rows_router, prefix="", tags=["rows"])
app.include_router(admin_router, prefix="", tags=["admin"])

_STATUS_BY_ERROR: dict[type[SheetmarkError], int] = {
    ParseError: 422,
    ValidationError: 400,
    PersistenceError: 503,
}


@app.exception_handler(SheetmarkError)
async def sheetmark_error_handler(request: Request, exc: SheetmarkError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), 500)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": type(exc).__name__})


@app.on_event("startup")
async def startup() -> None:
    """Reopen the last imported file."""
    get_app_settings()
    await get_workspace().restore()


@app.on_event("shutdown")
async def shutdown() -> None:
    await get_stores().backend.close()


@app.get("/health", tags=["admin"])
def health() -> dict[str, bool]:
    """Simple liveness check."""
    return {"ok": True}
