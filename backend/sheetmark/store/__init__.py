"""Identity-keyed persistence partitions."""

from dataclasses import dataclass

from .annotations import AnnotationStore
from .base import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from .datasets import DatasetStore
from .pagination import PaginationStore
from .session import SessionStore


@dataclass(slots=True)
class Stores:
    """The four stores sharing one backend."""

    backend: KeyValueStore
    datasets: DatasetStore
    annotations: AnnotationStore
    pages: PaginationStore
    session: SessionStore

    @classmethod
    def over(cls, backend: KeyValueStore) -> "Stores":
        return cls(
            backend=backend,
            datasets=DatasetStore(backend),
            annotations=AnnotationStore(backend),
            pages=PaginationStore(backend),
            session=SessionStore(backend),
        )


__all__ = [
    "Stores",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "DatasetStore",
    "AnnotationStore",
    "PaginationStore",
    "SessionStore",
]
