"""Last viewed page per file identity, plus a global fallback."""

from __future__ import annotations

from sheetmark.store.base import KeyValueStore

NAMESPACE = "pages"
GLOBAL_KEY = "__global__"


class PaginationStore:
    def __init__(self, backend: KeyValueStore) -> None:
        self.backend = backend

    async def get(self, identity: str | None) -> int | None:
        """Return the stored page for ``identity`` or the global value when it is ``None``."""
        value = await self.backend.get(NAMESPACE, identity or GLOBAL_KEY)
        return int(value) if value is not None else None

    async def set(self, identity: str | None, page: int) -> None:
        if identity:
            await self.backend.put(NAMESPACE, identity, page)
        await self.backend.put(NAMESPACE, GLOBAL_KEY, page)


__all__ = ["PaginationStore", "GLOBAL_KEY"]
