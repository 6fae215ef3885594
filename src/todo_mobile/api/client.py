# src/todo_mobile/api/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..core.models import Task, TaskId, tasks_from_json

logger = logging.getLogger(__name__)


class TaskApiError(RuntimeError):
    """Any failure talking to the task API (transport, HTTP status, bad payload)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def friendly_api_error_message(err: BaseException) -> str:
    if isinstance(err, TaskApiError) and err.status_code is not None:
        if err.status_code == 404:
            return "Task not found on the server (it may have been deleted elsewhere)."
        if err.status_code >= 500:
            return f"Task server error (HTTP {err.status_code}). Try again later."
        return f"Task server rejected the request (HTTP {err.status_code})."
    msg = str(err).strip()
    return msg or "Task API error."


def _make_timeout_obj(seconds: float | None) -> httpx.Timeout:
    # None disables every phase (connect/read/write/pool): a hung request waits forever.
    if seconds is None:
        return httpx.Timeout(None)
    return httpx.Timeout(seconds, connect=min(seconds, 10.0))


class HttpTaskApi:
    """
    TaskApi over plain REST/JSON.

    Routes:
    - GET    <api_url>        -> list
    - POST   <api_url>        -> create
    - PUT    <api_url>/<id>   -> full-record update
    - DELETE <api_url>/<id>   -> delete

    The httpx.AsyncClient is created lazily so constructing the API never
    touches the network. Pass `transport` (e.g. httpx.MockTransport) or a
    ready `client` in tests.
    """

    def __init__(
        self,
        api_url: str,
        *,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_url or not api_url.strip():
            raise ValueError("api_url is required")
        self.api_url = api_url.strip().rstrip("/")
        self._timeout = _make_timeout_obj(timeout_seconds)
        self._transport = transport
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpTaskApi:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _item_url(self, task_id: TaskId) -> str:
        return f"{self.api_url}/{task_id}"

    async def _request(self, method: str, url: str, *, json: Any = None) -> httpx.Response:
        client = self._get_client()
        try:
            response = await client.request(method, url, json=json)
        except httpx.TimeoutException as e:
            raise TaskApiError(f"{method} {url} timed out") from e
        except httpx.HTTPError as e:
            raise TaskApiError(f"{method} {url} failed: {e.__class__.__name__}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not response.is_success:
            raise TaskApiError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise TaskApiError(
                f"Response from {response.request.url} is not valid JSON",
                status_code=response.status_code,
            ) from e

    async def list_tasks(self) -> list[Task]:
        response = await self._request("GET", self.api_url)
        try:
            return tasks_from_json(self._json(response))
        except ValueError as e:
            raise TaskApiError(f"Malformed task list: {e}", status_code=response.status_code) from e

    async def create_task(self, *, title: str, completed: bool = False) -> Task:
        response = await self._request(
            "POST", self.api_url, json={"title": title, "completed": completed}
        )
        try:
            return Task.from_json(self._json(response))
        except ValueError as e:
            raise TaskApiError(f"Malformed created task: {e}", status_code=response.status_code) from e

    async def update_task(self, task_id: TaskId, *, title: str, completed: bool) -> None:
        # Response body (the updated record) is not used; callers re-fetch.
        await self._request(
            "PUT", self._item_url(task_id), json={"title": title, "completed": completed}
        )

    async def delete_task(self, task_id: TaskId) -> None:
        await self._request("DELETE", self._item_url(task_id))
