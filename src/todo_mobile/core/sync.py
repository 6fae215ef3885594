# src/todo_mobile/core/sync.py

from __future__ import annotations

"""
Task synchronization client.

Keeps AppState.tasks consistent with the remote collection. Every operation
is one network round trip followed by reconciliation:
- fetch_all: replace the whole list with the server's
- create: append the server's returned record (no re-fetch)
- toggle_complete / delete / submit_edit: re-fetch the whole list

Failures are caught at the operation boundary, handed to the FailureSink and
swallowed. The local list is left exactly as it was.
"""

import logging

from .diagnostics import FailureReport, SyncOperation
from .models import Task, TaskId
from .ports import FailureSink, TaskApi
from .state import AppState, cancel_edit

logger = logging.getLogger(__name__)


class TaskSyncClient:
    def __init__(self, api: TaskApi, sink: FailureSink) -> None:
        self.api = api
        self.sink = sink

    def _report(self, operation: SyncOperation, err: Exception, task_id: TaskId | None = None) -> None:
        try:
            self.sink.report(FailureReport(operation=operation, error=err, task_id=task_id))
        except Exception:
            logger.exception("Failure sink crashed while reporting %s.", operation)

    async def fetch_all(self, state: AppState) -> None:
        try:
            tasks = await self.api.list_tasks()
        except Exception as e:
            self._report(SyncOperation.FETCH, e)
            return
        state.tasks = list(tasks)
        logger.debug("Fetched %d tasks.", len(state.tasks))

    async def create(self, state: AppState, title: str | None = None) -> None:
        """
        Create a task from `title` (defaults to the input buffer).

        Blank titles are ignored without a request. On failure the input
        buffer keeps the text so the user can retry.
        """
        raw = state.title if title is None else title
        clean = (raw or "").strip()
        if not clean:
            return

        # The buffer holds what the user submitted until the server accepts it.
        state.title = raw
        try:
            created = await self.api.create_task(title=clean, completed=False)
        except Exception as e:
            self._report(SyncOperation.CREATE, e)
            return

        state.tasks = [*state.tasks, created]
        state.title = ""
        logger.info("Created task id=%s.", created.id)

    async def toggle_complete(
        self,
        state: AppState,
        task_id: TaskId,
        current_completed: bool,
        title: str,
    ) -> None:
        try:
            await self.api.update_task(task_id, title=title, completed=not current_completed)
        except Exception as e:
            self._report(SyncOperation.UPDATE, e, task_id)
            return
        await self.fetch_all(state)

    async def toggle_task(self, state: AppState, task: Task) -> None:
        await self.toggle_complete(state, task.id, task.completed, task.title)

    async def delete(self, state: AppState, task_id: TaskId) -> None:
        try:
            await self.api.delete_task(task_id)
        except Exception as e:
            self._report(SyncOperation.DELETE, e, task_id)
            return
        await self.fetch_all(state)

    async def submit_edit(self, state: AppState, edited_title: str | None = None) -> None:
        """
        Send the edit buffer (or `edited_title`) for the selected task.

        No selection -> no-op. Completion is sent unchanged from the task
        captured by start_edit. A failed submit keeps the editing state.
        """
        task = state.editing_task
        if task is None:
            return

        new_title = state.edit_title if edited_title is None else edited_title
        state.edit_title = new_title
        try:
            await self.api.update_task(task.id, title=new_title, completed=task.completed)
        except Exception as e:
            self._report(SyncOperation.EDIT, e, task.id)
            return

        cancel_edit(state)
        await self.fetch_all(state)
