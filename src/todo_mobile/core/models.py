# src/todo_mobile/core/models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

TaskId = int | str

_TRUE_WORDS = frozenset({"true", "1", "yes"})
_FALSE_WORDS = frozenset({"false", "0", "no"})


def _as_bool(raw: Any) -> bool:
    """Strict `completed` parsing: "false" must not become True."""
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"Task payload has an unusable completed flag: {raw!r}")


class FilterMode(StrEnum):
    """Client-side view filter. Applied to the rendered list only."""

    ALL = "all"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode:
        value = (raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown filter: {raw!r} (expected one of: {', '.join(m.value for m in cls)})"
            ) from None

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True, slots=True)
class Task:
    """
    Local mirror of one server-side task record.

    `id` is assigned by the server and never changes; the record is frozen, so
    toggling or renaming produces a new Task (normally via a re-fetch).
    """

    id: TaskId
    title: str
    completed: bool = False

    @property
    def key(self) -> str:
        """Stable string key used to refer to the task from the console."""
        return str(self.id)

    @classmethod
    def from_json(cls, obj: Any) -> Task:
        if not isinstance(obj, Mapping):
            raise ValueError(f"Task payload must be an object, got {type(obj).__name__}")
        raw_id = obj.get("id")
        if raw_id is None or isinstance(raw_id, bool) or not isinstance(raw_id, (int, str)):
            raise ValueError(f"Task payload has no usable id: {raw_id!r}")
        title = obj.get("title")
        return cls(
            id=raw_id,
            title="" if title is None else str(title),
            completed=_as_bool(obj.get("completed")),
        )


def tasks_from_json(data: Any) -> list[Task]:
    if not isinstance(data, list):
        raise ValueError(f"Task collection must be a list, got {type(data).__name__}")
    return [Task.from_json(item) for item in data]
