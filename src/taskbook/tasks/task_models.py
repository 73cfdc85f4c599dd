# src/taskbook/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .errors import ValidationError

_UNSET: Any = object()


class Priority(StrEnum):
    """
    Priority tier of a task.

    The rank is the primary sort key when listing: urgent first, low last.
    """

    URGENT = "urgent"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: Priority | str) -> Priority:
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValidationError(f"unknown priority {raw!r} (expected one of: {allowed})") from None


_PRIORITY_RANK = {
    Priority.URGENT: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    done: bool
    priority: Priority
    created_at: str
    finished_at: str | None = None


# Column order used when building an UPDATE statement.
PATCH_FIELDS: tuple[str, ...] = ("text", "done", "priority", "finished_at")
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "createdAt"})
_ALIASES = {"finishedAt": "finished_at"}


@dataclass(frozen=True, slots=True)
class TaskPatch:
    """
    Partial update of the mutable task fields.

    Fields left at the unset sentinel are not written. `finished_at=None` is a
    real value (clears the timestamp), so "not supplied" cannot be spelled None.
    """

    text: Any = _UNSET
    done: Any = _UNSET
    priority: Any = _UNSET
    finished_at: Any = _UNSET

    def __post_init__(self) -> None:
        if self.text is not _UNSET:
            if not isinstance(self.text, str) or not self.text.strip():
                raise ValidationError("text must be a non-empty string")
        if self.done is not _UNSET:
            object.__setattr__(self, "done", bool(self.done))
        if self.priority is not _UNSET:
            object.__setattr__(self, "priority", Priority.parse(self.priority))
        if self.finished_at is not _UNSET and self.finished_at is not None:
            if not isinstance(self.finished_at, str):
                raise ValidationError("finished_at must be an ISO-8601 string or None")

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> TaskPatch:
        kwargs: dict[str, Any] = {}
        for key, value in fields.items():
            if key in IMMUTABLE_FIELDS:
                raise ValidationError(f"field {key!r} is immutable")
            name = _ALIASES.get(key, key)
            if name not in PATCH_FIELDS:
                raise ValidationError(f"unknown task field {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def is_empty(self) -> bool:
        return not self.items()

    def items(self) -> list[tuple[str, Any]]:
        """Set fields as (column, value) pairs, in fixed column order."""
        out: list[tuple[str, Any]] = []
        for name in PATCH_FIELDS:
            value = getattr(self, name)
            if value is _UNSET:
                continue
            if name == "done":
                value = 1 if value else 0
            elif name == "priority":
                value = value.value
            out.append((name, value))
        return out
