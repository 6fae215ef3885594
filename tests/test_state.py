# tests/test_state.py

from __future__ import annotations

import pytest

from todo_mobile.core.models import FilterMode, Task
from todo_mobile.core.state import (
    AppState,
    filter_tasks,
    find_task,
    set_filter,
    toggle_dark_mode,
    visible_tasks,
)

LISTS = [
    [],
    [Task(id=1, title="a")],
    [Task(id=1, title="a", completed=True)],
    [
        Task(id=1, title="a"),
        Task(id=2, title="b", completed=True),
        Task(id=3, title="c"),
        Task(id=4, title="d", completed=True),
    ],
]


@pytest.mark.parametrize("tasks", LISTS)
def test_filter_properties(tasks) -> None:
    assert filter_tasks(tasks, "all") == tasks

    done = filter_tasks(tasks, FilterMode.COMPLETED)
    assert all(t in tasks and t.completed for t in done)

    open_ = filter_tasks(tasks, FilterMode.INCOMPLETE)
    assert all(not t.completed for t in open_)
    assert sorted(t.id for t in done + open_) == sorted(t.id for t in tasks)
    assert not set(t.id for t in done) & set(t.id for t in open_)


def test_visible_tasks_never_narrows_state() -> None:
    state = AppState(tasks=list(LISTS[3]))
    set_filter(state, "completed")

    assert [t.id for t in visible_tasks(state)] == [2, 4]
    assert len(state.tasks) == 4


def test_filter_mode_parse() -> None:
    assert FilterMode.parse(" Incomplete ") is FilterMode.INCOMPLETE
    assert FilterMode.COMPLETED.label == "Completed"
    with pytest.raises(ValueError):
        FilterMode.parse("done")


def test_find_task_by_key_and_dark_mode_toggle() -> None:
    state = AppState(tasks=list(LISTS[3]))
    assert find_task(state, "3") == Task(id=3, title="c")
    assert find_task(state, 3) == Task(id=3, title="c")
    assert find_task(state, "42") is None

    assert toggle_dark_mode(state) is True
    assert toggle_dark_mode(state) is False


def test_task_from_json_rejects_missing_id() -> None:
    with pytest.raises(ValueError):
        Task.from_json({"title": "x"})
    with pytest.raises(ValueError):
        Task.from_json(["not", "a", "dict"])
    assert Task.from_json({"id": 5}) == Task(id=5, title="", completed=False)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("true", True),
        ("false", False),
        (" False ", False),
        ("YES", True),
        ("0", False),
        (None, False),
    ],
)
def test_task_from_json_completed_spellings(raw, expected) -> None:
    assert Task.from_json({"id": 1, "title": "t", "completed": raw}).completed is expected


def test_task_from_json_rejects_unknown_completed_values() -> None:
    for raw in ("maybe", 2, 0.5, ["x"]):
        with pytest.raises(ValueError):
            Task.from_json({"id": 1, "title": "t", "completed": raw})
