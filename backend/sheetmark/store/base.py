"""Uniform async key/value backends behind every Sheetmark store."""

from __future__ import annotations

import asyncio
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

import orjson

from sheetmark.core.errors import PersistenceError
from sheetmark.core.logging import get_logger
from sheetmark.core.metrics import STORE_FAILURES
from sheetmark.db.sqlite import SQLiteDatabase
from sheetmark.utils.time import now_ms

logger = get_logger(__name__)

T = TypeVar("T")
Updater = Callable[[Any | None], Any | None]


class KeyValueStore:
    """Async key/value interface partitioned by namespace.

    Every coroutine resolves only once the write is committed; a failed commit
    raises :class:`PersistenceError`. ``merge`` reads the current value, passes
    it to ``updater`` and writes the result back as one step, so the update is
    never computed from a stale copy. Returning ``None`` from the updater
    deletes the key.
    """

    async def get(self, namespace: str, key: str) -> Any | None:  # pragma: no cover - interface
        raise NotImplementedError

    async def put(self, namespace: str, key: str, value: Any) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    async def delete(self, namespace: str, key: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    async def merge(self, namespace: str, key: str, updater: Updater) -> Any | None:  # pragma: no cover
        raise NotImplementedError

    async def close(self) -> None:
        return None


class MemoryKeyValueStore(KeyValueStore):
    """In-process backend; values are serialized like the SQLite backend."""

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], bytes] = {}

    async def get(self, namespace: str, key: str) -> Any | None:
        raw = self._data.get((namespace, key))
        if raw is None:
            return None
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            STORE_FAILURES.labels(namespace=namespace, operation="get").inc()
            raise PersistenceError(f"get on {namespace} failed: {exc}") from exc

    async def put(self, namespace: str, key: str, value: Any) -> None:
        self._data[(namespace, key)] = orjson.dumps(value)

    async def delete(self, namespace: str, key: str) -> None:
        self._data.pop((namespace, key), None)

    async def merge(self, namespace: str, key: str, updater: Updater) -> Any | None:
        current = await self.get(namespace, key)
        updated = updater(current)
        if updated is None:
            await self.delete(namespace, key)
            return None
        await self.put(namespace, key, updated)
        return orjson.loads(self._data[(namespace, key)])


class SQLiteKeyValueStore(KeyValueStore):
    """SQLite backend; all statements run on one dedicated worker thread."""

    def __init__(self, database: SQLiteDatabase) -> None:
        self.db = database
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sheetmark-db")

    def ensure_schema(self) -> None:
        self._executor.submit(self.db.ensure_schema).result()

    async def get(self, namespace: str, key: str) -> Any | None:
        def _get() -> Any | None:
            row = self.db.execute(
                "SELECT value FROM kv WHERE namespace = ? AND key = ?",
                [namespace, key],
            ).fetchone()
            return None if row is None else orjson.loads(row["value"])

        return await self._run(_get, namespace, "get")

    async def put(self, namespace: str, key: str, value: Any) -> None:
        payload = orjson.dumps(value)

        def _put() -> None:
            with self.db.transaction() as cursor:
                self._upsert(cursor, namespace, key, payload)

        await self._run(_put, namespace, "put")

    async def delete(self, namespace: str, key: str) -> None:
        def _delete() -> None:
            with self.db.transaction() as cursor:
                cursor.execute("DELETE FROM kv WHERE namespace = ? AND key = ?", [namespace, key])

        await self._run(_delete, namespace, "delete")

    async def merge(self, namespace: str, key: str, updater: Updater) -> Any | None:
        def _merge() -> Any | None:
            with self.db.transaction() as cursor:
                row = cursor.execute(
                    "SELECT value FROM kv WHERE namespace = ? AND key = ?",
                    [namespace, key],
                ).fetchone()
                current = None if row is None else orjson.loads(row["value"])
                updated = updater(current)
                if updated is None:
                    cursor.execute("DELETE FROM kv WHERE namespace = ? AND key = ?", [namespace, key])
                    return None
                payload = orjson.dumps(updated)
                self._upsert(cursor, namespace, key, payload)
                return orjson.loads(payload)

        return await self._run(_merge, namespace, "merge")

    async def close(self) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self._executor, self.db.close)
        self._executor.shutdown(wait=True)

    @staticmethod
    def _upsert(cursor: sqlite3.Cursor, namespace: str, key: str, payload: bytes) -> None:
        cursor.execute(
            """
            INSERT INTO kv (namespace, key, value, updated_at) VALUES (?, ?, ?, ?)
            ON CONFLICT(namespace, key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            [namespace, key, payload, now_ms()],
        )

    async def _run(self, func: Callable[[], T], namespace: str, operation: str) -> T:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(self._executor, func)
        except (sqlite3.Error, orjson.JSONDecodeError) as exc:
            STORE_FAILURES.labels(namespace=namespace, operation=operation).inc()
            logger.error(
                "Store %s failed for %s: %s",
                operation,
                namespace,
                exc,
                extra={"ctx_namespace": namespace, "ctx_operation": operation},
            )
            raise PersistenceError(f"{operation} on {namespace} failed: {exc}") from exc


__all__ = ["KeyValueStore", "MemoryKeyValueStore", "SQLiteKeyValueStore"]
