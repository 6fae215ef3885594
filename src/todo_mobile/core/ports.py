# src/todo_mobile/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The sync client depends on Protocols instead of concrete implementations.
This keeps the HTTP transport and the failure reporting swappable and makes
testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .diagnostics import FailureReport
    from .models import Task, TaskId


class TaskApi(Protocol):
    """
    Remote task collection resource.

    Implementations raise on any transport or server error; the sync client
    decides what to do with it.
    """

    async def list_tasks(self) -> list[Task]: ...

    async def create_task(self, *, title: str, completed: bool = False) -> Task: ...

    # Full-record replace: both fields are always sent.
    async def update_task(self, task_id: TaskId, *, title: str, completed: bool) -> None: ...

    async def delete_task(self, task_id: TaskId) -> None: ...


class FailureSink(Protocol):
    """Observability sink: where swallowed operation failures are reported."""

    def report(self, report: FailureReport) -> None: ...
