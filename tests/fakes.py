# tests/fakes.py

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

BASE_URL = "http://tasks.test/tasks"


@dataclass(slots=True)
class RecordedRequest:
    method: str
    path: str
    body: Any


@dataclass
class FakeTaskServer:
    """
    In-memory task collection served through httpx.MockTransport.

    - Records every request for assertions
    - `fail` maps an HTTP method to a status code to return instead
    - `unreachable` makes every request raise httpx.ConnectError
    """

    tasks: list[dict[str, Any]] = field(default_factory=list)
    requests: list[RecordedRequest] = field(default_factory=list)
    fail: dict[str, int] = field(default_factory=dict)
    unreachable: bool = False
    next_id: int = 100

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def methods(self) -> list[str]:
        return [r.method for r in self.requests]

    def _find(self, task_id: str) -> dict[str, Any] | None:
        for t in self.tasks:
            if str(t["id"]) == task_id:
                return t
        return None

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append(RecordedRequest(request.method, request.url.path, body))

        if self.unreachable:
            raise httpx.ConnectError("network unreachable", request=request)
        if request.method in self.fail:
            return httpx.Response(self.fail[request.method], json={"error": "boom"})

        parts = [p for p in request.url.path.split("/") if p]
        if parts == ["tasks"]:
            if request.method == "GET":
                return httpx.Response(200, json=self.tasks)
            if request.method == "POST":
                created = {"id": self.next_id, **body}
                self.next_id += 1
                self.tasks.append(created)
                return httpx.Response(201, json=created)

        if len(parts) == 2 and parts[0] == "tasks":
            task = self._find(parts[1])
            if task is None:
                return httpx.Response(404, json={"error": "not found"})
            if request.method == "PUT":
                task.update(title=body["title"], completed=body["completed"])
                return httpx.Response(200, json=task)
            if request.method == "DELETE":
                self.tasks.remove(task)
                return httpx.Response(200, json={"message": "deleted"})

        return httpx.Response(405)
