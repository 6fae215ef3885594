# src/todo_mobile/core/diagnostics.py

"""
Failure reporting for the sync client.

Operations never raise to the view; instead every failure is turned into a
FailureReport and handed to a FailureSink. The default sink writes to the
log, tests use the in-memory one.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports import FailureSink

logger = logging.getLogger(__name__)


class SyncOperation(StrEnum):
    FETCH = "fetch"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    EDIT = "edit"

    @property
    def verb(self) -> str:
        return _VERBS[self]


_VERBS = {
    SyncOperation.FETCH: "fetching tasks",
    SyncOperation.CREATE: "adding task",
    SyncOperation.UPDATE: "updating task",
    SyncOperation.DELETE: "deleting task",
    SyncOperation.EDIT: "editing task",
}


@dataclass(frozen=True, slots=True)
class FailureReport:
    operation: SyncOperation
    error: BaseException
    task_id: object | None = None
    ts: float = field(default_factory=time.time)

    @property
    def message(self) -> str:
        detail = str(self.error).strip() or self.error.__class__.__name__
        return f"Error {self.operation.verb}: {detail}"


class LoggingFailureSink:
    """Writes reports to the log at ERROR level (console shows them)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def report(self, report: FailureReport) -> None:
        if report.task_id is not None:
            self._log.error("%s (task_id=%s)", report.message, report.task_id)
        else:
            self._log.error("%s", report.message)
        self._log.debug("Failure detail for %s", report.operation, exc_info=report.error)


class MemoryFailureSink:
    """Keeps reports in memory; handy for tests and embedding."""

    def __init__(self) -> None:
        self.reports: list[FailureReport] = []

    def report(self, report: FailureReport) -> None:
        self.reports.append(report)

    def operations(self) -> list[SyncOperation]:
        return [r.operation for r in self.reports]

    def clear(self) -> None:
        self.reports.clear()


class LastFailureSink:
    """Forwards to another sink and remembers the most recent report."""

    def __init__(self, inner: FailureSink) -> None:
        self.inner = inner
        self.last: FailureReport | None = None

    def report(self, report: FailureReport) -> None:
        self.last = report
        self.inner.report(report)

    def reset(self) -> None:
        self.last = None
