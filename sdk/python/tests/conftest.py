"""
Shared test helpers: a fake GitLit server on top of httpx.MockTransport.
"""

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from gitlit.client import GitLitClient
from gitlit.testing import InMemoryCredentialStore

BASE_URL = "https://gitlit.test"


def repository_payload(**overrides: Any) -> dict[str, Any]:
    """Repository JSON as the server sends it."""
    data: dict[str, Any] = {
        "_id": "repo-1",
        "user": "alice",
        "name": "demo",
        "description": "a demo repository",
        "is_private": False,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-16T08:00:00Z",
        "forked_from": None,
    }
    data.update(overrides)
    return data


class FakeServer:
    """Routes requests by (method, path) and records everything it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def route(
        self,
        method: str,
        endpoint: str,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        content: bytes | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if json is not None:
                return httpx.Response(status, json=json)
            if text is not None:
                return httpx.Response(status, text=text)
            return httpx.Response(status, content=content or b"")

        self._routes[(method, f"/api/v1/{endpoint}")] = respond

    def fail(self, method: str, endpoint: str, error: type[httpx.RequestError]) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error("connection refused", request=request)

        self._routes[(method, f"/api/v1/{endpoint}")] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self._routes.get((request.method, request.url.path))
        if respond is None:
            return httpx.Response(404, json={"error": "no route"})
        return respond(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def logged_in_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore({BASE_URL: "secret-token"})


@pytest.fixture
def client(
    server: FakeServer, store: InMemoryCredentialStore
) -> Generator[GitLitClient, None, None]:
    client = GitLitClient(BASE_URL, credential_store=store, http_transport=server.transport())
    yield client
    client.close()


@pytest.fixture
def authed_client(
    server: FakeServer, logged_in_store: InMemoryCredentialStore
) -> Generator[GitLitClient, None, None]:
    client = GitLitClient(
        BASE_URL, credential_store=logged_in_store, http_transport=server.transport()
    )
    yield client
    client.close()
