# src/todo_mobile/core/state.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from .models import FilterMode, Task


class EditPhase(StrEnum):
    IDLE = "idle"
    EDITING = "editing"


@dataclass
class AppState:
    """
    Everything the screen shows, in one place.

    `tasks` mirrors the server collection and is only ever replaced as a
    whole (fetch) or appended to by copy (create). Filtering never narrows
    it; see visible_tasks().
    """

    tasks: list[Task] = field(default_factory=list)

    # New-task input field.
    title: str = ""

    filter_mode: FilterMode = FilterMode.ALL
    dark_mode: bool = False

    # Edit flow: editing_task is None <=> idle.
    editing_task: Task | None = None
    edit_title: str = ""


def filter_tasks(tasks: Sequence[Task], mode: FilterMode | str) -> list[Task]:
    mode = FilterMode(mode)
    if mode is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    if mode is FilterMode.INCOMPLETE:
        return [t for t in tasks if not t.completed]
    return list(tasks)


def visible_tasks(state: AppState) -> list[Task]:
    return filter_tasks(state.tasks, state.filter_mode)


def edit_phase(state: AppState) -> EditPhase:
    return EditPhase.IDLE if state.editing_task is None else EditPhase.EDITING


def find_task(state: AppState, key: object) -> Task | None:
    wanted = str(key).strip()
    for task in state.tasks:
        if task.key == wanted:
            return task
    return None


def start_edit(state: AppState, task: Task) -> None:
    state.editing_task = task
    state.edit_title = task.title


def cancel_edit(state: AppState) -> None:
    state.editing_task = None
    state.edit_title = ""


def set_filter(state: AppState, mode: FilterMode | str) -> FilterMode:
    state.filter_mode = FilterMode.parse(mode) if isinstance(mode, str) else mode
    return state.filter_mode


def set_dark_mode(state: AppState, enabled: bool) -> None:
    state.dark_mode = bool(enabled)


def toggle_dark_mode(state: AppState) -> bool:
    state.dark_mode = not state.dark_mode
    return state.dark_mode
