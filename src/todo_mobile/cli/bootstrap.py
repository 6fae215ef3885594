# src/todo_mobile/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the HTTP task API and the failure sink into a TaskSyncClient,
- builds the initial AppState from settings defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..api.client import HttpTaskApi
from ..config import get_settings
from ..core.diagnostics import LastFailureSink, LoggingFailureSink
from ..core.models import FilterMode
from ..core.ports import FailureSink, TaskApi
from ..core.state import AppState
from ..core.sync import TaskSyncClient

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """What a connector needs to drive the screen: settings, state and the sync client."""

    settings: Any
    state: AppState
    sync: TaskSyncClient
    failures: LastFailureSink

    async def aclose(self) -> None:
        close = getattr(self.sync.api, "aclose", None)
        if close is not None:
            await close()


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(settings) -> AppState:
    try:
        filter_mode = FilterMode.parse(getattr(settings, "default_filter", "all"))
    except ValueError:
        filter_mode = FilterMode.ALL
    return AppState(
        filter_mode=filter_mode,
        dark_mode=bool(getattr(settings, "dark_mode", False)),
    )


def create_session(
    *,
    settings=None,
    api: TaskApi | None = None,
    sink: FailureSink | None = None,
) -> Session:
    """
    Create a Session from the provided settings.

    Keeping settings/api/sink injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if getattr(settings, "data_dir", None) is not None:
        _ensure_local_dirs(settings)

    if api is None:
        api = HttpTaskApi(
            settings.api_url,
            timeout_seconds=getattr(settings, "request_timeout_seconds", None),
        )

    failures = LastFailureSink(sink or LoggingFailureSink())
    sync = TaskSyncClient(api, failures)
    logger.debug("Session created api_url=%s", getattr(settings, "api_url", "?"))
    return Session(
        settings=settings,
        state=create_initial_state(settings),
        sync=sync,
        failures=failures,
    )
