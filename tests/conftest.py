# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_mobile.api.client import HttpTaskApi
from todo_mobile.cli.bootstrap import Session, create_session
from todo_mobile.core.diagnostics import MemoryFailureSink
from todo_mobile.core.state import AppState
from todo_mobile.core.sync import TaskSyncClient

from .fakes import BASE_URL, FakeTaskServer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        api_url=BASE_URL,
        request_timeout_seconds=None,
        dark_mode=False,
        default_filter="all",
        fetch_on_start=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def server() -> FakeTaskServer:
    return FakeTaskServer(
        tasks=[
            {"id": 1, "title": "Buy milk", "completed": False},
            {"id": 2, "title": "Walk dog", "completed": True},
        ]
    )


@pytest.fixture()
def api(server: FakeTaskServer) -> HttpTaskApi:
    return HttpTaskApi(BASE_URL, transport=server.transport())


@pytest.fixture()
def sink() -> MemoryFailureSink:
    return MemoryFailureSink()


@pytest.fixture()
def sync(api: HttpTaskApi, sink: MemoryFailureSink) -> TaskSyncClient:
    return TaskSyncClient(api, sink)


@pytest.fixture()
def state() -> AppState:
    return AppState()


@pytest.fixture()
def session(settings: SimpleNamespace, api: HttpTaskApi, sink: MemoryFailureSink) -> Session:
    return create_session(settings=settings, api=api, sink=sink)
