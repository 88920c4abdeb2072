"""Remembers which file identity is currently open."""

from __future__ import annotations

from sheetmark.store.base import KeyValueStore

NAMESPACE = "session"
CURRENT_FILE_KEY = "current_file"


class SessionStore:
    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    async def get_current(self) -> str | None:
        return await self.backend.get(NAMESPACE, CURRENT_FILE_KEY)

    async def set_current(self, identity: str) -> None:
        await self.backend.put(NAMESPACE, CURRENT_FILE_KEY, identity)

    async def forget_current(self) -> None:
        await self.backend.delete(NAMESPACE, CURRENT_FILE_KEY)


__all__ = ["SessionStore"]
