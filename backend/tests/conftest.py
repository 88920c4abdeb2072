"""Test fixtures for Sheetmark."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from sheetmark.core.config import Settings  # noqa: E402
from sheetmark.db.sqlite import SQLiteDatabase  # noqa: E402
from sheetmark.store import MemoryKeyValueStore, SQLiteKeyValueStore, Stores  # noqa: E402


@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset global singletons and environment between tests."""
    monkeypatch.setenv("SHMK_DB_PATH", str(tmp_path / "sheetmark.db"))
    monkeypatch.delenv("SHMK_CONFIG", raising=False)
    monkeypatch.delenv("SHMK_STORAGE_BACKEND", raising=False)

    from sheetmark.api import dependencies as deps
    from sheetmark.core import config

    config.get_settings.cache_clear()
    deps.get_app_settings.cache_clear()
    deps._STORES = None
    deps._WORKSPACE = None
    yield
    config.get_settings.cache_clear()
    deps.get_app_settings.cache_clear()
    deps._STORES = None
    deps._WORKSPACE = None


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(db_path=tmp_path / "sheetmark.db")


@pytest.fixture
def memory_stores() -> Stores:
    return Stores.over(MemoryKeyValueStore())


@pytest.fixture
def sqlite_stores(settings: Settings) -> Stores:
    backend = SQLiteKeyValueStore(SQLiteDatabase(settings.db_path))
    backend.ensure_schema()
    yield Stores.over(backend)
    asyncio.run(backend.close())


@pytest.fixture(params=["memory", "sqlite"])
def stores(request: pytest.FixtureRequest) -> Stores:
    """Both backends; store behaviour must not depend on which one is used."""
    return request.getfixturevalue(f"{request.param}_stores")


def _csv_bytes(rows: list[list[str]]) -> bytes:
    return "\n".join(",".join(row) for row in rows).encode("utf-8")


@pytest.fixture
def make_csv():
    return _csv_bytes


@pytest.fixture
def sample_csv() -> bytes:
    """Three data rows; column 1 is an id that the projection skips."""
    return _csv_bytes(
        [
            ["1", "alice", "Alice A", "10", "yes", "https://example.com/alice"],
            ["2", "bob", "Bob B", "20", "no", "https://example.com/bob"],
            ["3", "carol", "", "30"],
        ]
    )
