"""Shared FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from sheetmark.core.config import Settings, get_settings
from sheetmark.db.sqlite import SQLiteDatabase
from sheetmark.store import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore, Stores
from sheetmark.workspace import Workspace

_STORES: Stores | None = None
_WORKSPACE: Workspace | None = None


@lru_cache(maxsize=1)
def get_app_settings() -> Settings:
    return get_settings()


def get_stores() -> Stores:
    global _STORES
    if _STORES is None:
        settings = get_app_settings()
        backend: KeyValueStore
        if settings.storage_backend == "memory":
            backend = MemoryKeyValueStore()
        else:
            sqlite_backend = SQLiteKeyValueStore(SQLiteDatabase(settings.db_path))
            sqlite_backend.ensure_schema()
            backend = sqlite_backend
        _STORES = Stores.over(backend)
    return _STORES


def get_workspace() -> Workspace:
    global _WORKSPACE
    if _WORKSPACE is None:
        _WORKSPACE = Workspace(stores=get_stores(), settings=get_app_settings())
    return _WORKSPACE


__all__ = [
    "get_app_settings",
    "get_stores",
    "get_workspace",
]
