# tests/test_diagnostics.py

from __future__ import annotations

import logging

import pytest

from todo_mobile.api.client import TaskApiError
from todo_mobile.cli.main import run
from todo_mobile.core.diagnostics import (
    FailureReport,
    LastFailureSink,
    LoggingFailureSink,
    MemoryFailureSink,
    SyncOperation,
)


def test_logging_sink_writes_error(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingFailureSink()
    with caplog.at_level(logging.ERROR, logger="todo_mobile.core.diagnostics"):
        sink.report(
            FailureReport(
                operation=SyncOperation.DELETE,
                error=TaskApiError("DELETE http://x/tasks/3 returned HTTP 500", status_code=500),
                task_id=3,
            )
        )

    assert "Error deleting task: DELETE http://x/tasks/3 returned HTTP 500 (task_id=3)" in caplog.text


def test_report_message_falls_back_to_exception_name() -> None:
    report = FailureReport(operation=SyncOperation.FETCH, error=TimeoutError())
    assert report.message == "Error fetching tasks: TimeoutError"


def test_run_fetches_on_start_then_closes(session, server, monkeypatch) -> None:
    session.settings.fetch_on_start = True
    seen: list[str] = []

    def one_refresh(session, run_coro) -> None:
        # The console drives commands on the same loop the initial fetch used.
        run_coro(session.sync.fetch_all(session.state))
        seen.append("console")

    monkeypatch.setattr("todo_mobile.cli.main.run_console_loop", one_refresh)

    run(session)

    assert seen == ["console"]
    assert server.methods() == ["GET", "GET"]
    assert [t.id for t in session.state.tasks] == [1, 2]


def test_last_failure_sink_remembers_and_forwards() -> None:
    inner = MemoryFailureSink()
    sink = LastFailureSink(inner)
    first = FailureReport(operation=SyncOperation.FETCH, error=TaskApiError("a"))
    second = FailureReport(operation=SyncOperation.CREATE, error=TaskApiError("b", status_code=500))

    sink.report(first)
    sink.report(second)

    assert sink.last is second
    assert inner.operations() == [SyncOperation.FETCH, SyncOperation.CREATE]

    sink.reset()
    assert sink.last is None
    assert len(inner.reports) == 2
