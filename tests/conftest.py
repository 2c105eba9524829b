"""
Test fixtures: a fake Harbor API served through httpx.MockTransport.

Every request the client sends is recorded so tests can assert on method,
path, query string and headers.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from harbor_client import Client, new_client

BASE_URL = "https://harbor.test/api"
USERNAME = "admin"
PASSWORD = "Harbor12345"


class FakeHarbor:
    """Routes keyed by (method, path) returning canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content, headers=headers)
            return httpx.Response(status, json=json, headers=headers)

        self._routes[(method, f"/api/{path}")] = respond

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._routes[(method, f"/api/{path}")] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        return route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def harbor() -> FakeHarbor:
    return FakeHarbor()


@pytest.fixture
def http(harbor: FakeHarbor):
    client = httpx.Client(transport=httpx.MockTransport(harbor))
    yield client
    client.close()


@pytest.fixture
def client(http: httpx.Client) -> Client:
    return new_client(http, BASE_URL, USERNAME, PASSWORD)
