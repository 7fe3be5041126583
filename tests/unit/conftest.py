"""
Unit Test Fixtures.

Fixtures for unit tests - the queue service is replaced by an
httpx.MockTransport that records every request it receives.
"""

import json
from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

import queue_cli.cli.client as client_module
from queue_cli.cli.client import APIClient

SERVICE_URL = "http://queue.test/service/queue"
SERVICE_PATH = "/service/queue/"


@dataclass
class _Route:
    status_code: int
    body: bytes
    headers: dict[str, str]


@dataclass
class FakeQueueService:
    """
    In-memory stand-in for the queue service.

    Usage:
        def test_list(fake_service):
            fake_service.add_route("GET", "v1/runs", json_body={"runs": []})
            ...
            assert fake_service.calls == [("GET", "v1/runs")]
    """

    requests: list[httpx.Request] = field(default_factory=list)
    routes: dict[tuple[str, str], _Route] = field(default_factory=dict)

    def add_route(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        status_code: int = 200,
        content: bytes | None = None,
    ) -> None:
        """Register a response. path is relative to the service URL unless it starts with '/'."""
        full_path = path if path.startswith("/") else SERVICE_PATH + path
        body = content if content is not None else json.dumps(json_body).encode()
        self.routes[(method, full_path)] = _Route(
            status_code, body, {"Content-Type": "application/json"}
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # Request bodies are read eagerly so tests can inspect them afterwards.
        request.read()
        route = self.routes.get((request.method, request.url.raw_path.decode().split("?")[0]))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        return httpx.Response(route.status_code, content=route.body, headers=route.headers)

    @property
    def calls(self) -> list[tuple[str, str]]:
        """(method, path relative to the service URL) of every request received."""
        result = []
        for request in self.requests:
            path = request.url.raw_path.decode().split("?")[0]
            if path.startswith(SERVICE_PATH):
                path = path[len(SERVICE_PATH):]
            result.append((request.method, path))
        return result


@pytest.fixture
def fake_service() -> FakeQueueService:
    """A recording fake of the queue service."""
    return FakeQueueService()


@pytest.fixture
def api_client(fake_service: FakeQueueService) -> APIClient:
    """An APIClient wired to the fake service."""
    return APIClient(
        base_url=SERVICE_URL,
        timeout=5.0,
        transport=httpx.MockTransport(fake_service.handle),
    )


@pytest.fixture
def installed_client(api_client: APIClient) -> Generator[APIClient, None, None]:
    """Install the fake-backed client as the CLI's client singleton."""
    client_module._client = api_client
    yield api_client
    client_module._client = None
