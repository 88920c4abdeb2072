"""Internal value types for datasets, annotations and derived ranges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, NamedTuple

from sheetmark.core.errors import ValidationError

ROW_WIDTH = 5


class RowRecord(NamedTuple):
    """One imported row, projected to five string fields."""

    field_1: str = ""
    field_2: str = ""
    field_3: str = ""
    field_4: str = ""
    link: str = ""


class Bookmark(str, Enum):
    NONE = ""
    START = "start"
    END = "end"

    @classmethod
    def parse(cls, value: Any) -> "Bookmark":
        if isinstance(value, Bookmark):
            return value
        if value is None:
            return cls.NONE
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "none":
                return cls.NONE
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValidationError(f"Unknown bookmark value: {value!r}")


@dataclass(frozen=True, slots=True)
class FileIdentity:
    """Partition key for all per-file state."""

    key: str
    name: str
    size: int
    digest: str
    degraded: bool = False

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class AnnotationPatch:
    """Partial row update; ``None`` leaves the field untouched."""

    messaged: bool | None = None
    bookmark: Bookmark | None = None

    def __post_init__(self) -> None:
        if self.messaged is not None and not isinstance(self.messaged, bool):
            raise ValidationError(f"messaged must be a boolean, got {self.messaged!r}")
        if self.bookmark is not None and not isinstance(self.bookmark, Bookmark):
            object.__setattr__(self, "bookmark", Bookmark.parse(self.bookmark))

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(name for name in ("messaged", "bookmark") if getattr(self, name) is not None)

    @property
    def is_empty(self) -> bool:
        return not self.fields


@dataclass(frozen=True, slots=True)
class RowAnnotation:
    messaged: bool = False
    bookmark: Bookmark = Bookmark.NONE

    def merged(self, patch: AnnotationPatch) -> "RowAnnotation":
        """Return a copy with every field set in ``patch`` applied."""
        return RowAnnotation(
            messaged=self.messaged if patch.messaged is None else patch.messaged,
            bookmark=self.bookmark if patch.bookmark is None else patch.bookmark,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"messaged": self.messaged, "bookmark": self.bookmark.value}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RowAnnotation":
        return cls(
            messaged=bool(payload.get("messaged", False)),
            bookmark=Bookmark.parse(payload.get("bookmark")),
        )


AnnotationSet = dict[int, RowAnnotation]

DEFAULT_ANNOTATION = RowAnnotation()


@dataclass(frozen=True, slots=True)
class CountingRange:
    """Span of rows relevant for counting and the flagged rows inside it."""

    start_index: int
    end_index: int
    count: int

    @property
    def empty(self) -> bool:
        return self.end_index < self.start_index

    def describe(self) -> str:
        return f"Counting rows {self.start_index + 1} → {self.end_index + 1} • Checked: {self.count}"


__all__ = [
    "ROW_WIDTH",
    "RowRecord",
    "Bookmark",
    "FileIdentity",
    "AnnotationPatch",
    "RowAnnotation",
    "AnnotationSet",
    "DEFAULT_ANNOTATION",
    "CountingRange",
]
