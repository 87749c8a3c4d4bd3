"""
Shared fixtures for SDK tests.

FakeTransport implements the Transport contract in memory: responses and
stream chunks are scripted per path, and every call is recorded so tests
can assert that nothing was sent.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from sauron.client import SauronClient
from sauron.transport.base import HttpResponse, Transport


class FakeTransport(Transport):
    def __init__(self, base_url: str = "http://gateway.test"):
        self._base_url = base_url
        self.default_headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self.responses: dict[tuple[str, str], HttpResponse] = {}
        # path -> (chunks, status)
        self.streams: dict[str, tuple[list[str], int]] = {}
        self.delivered: list[tuple[str, bool]] = []
        self.closed = False

    # ── Scripting ──────────────────────────────────────────────

    def respond(self, method: str, path: str, status: int, body: Any = None) -> None:
        text = body if isinstance(body, str) else json.dumps(body if body is not None else {})
        self.responses[(method, path)] = HttpResponse(status_code=status, body=text)

    def stream(self, path: str, chunks: list[str], status: int = 200) -> None:
        self.streams[path] = (chunks, status)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def authorization(self) -> str | None:
        return self.default_headers.get("Authorization")

    # ── Transport ──────────────────────────────────────────────

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._base_url = url

    def set_default_header(self, name: str, value: str) -> None:
        self.default_headers[name] = value

    def remove_default_header(self, name: str) -> None:
        self.default_headers.pop(name, None)

    def set_bearer_token(self, token: str) -> None:
        if not token:
            self.clear_authorization()
            return
        self.default_headers["Authorization"] = f"Bearer {token}"

    def clear_authorization(self) -> None:
        self.default_headers.pop("Authorization", None)

    def get(self, path, headers=None) -> HttpResponse:
        return self._record("GET", path, None, headers)

    def post(self, path, body, headers=None) -> HttpResponse:
        return self._record("POST", path, body, headers)

    def post_text(self, path, body, content_type, headers=None) -> HttpResponse:
        merged = dict(headers or {})
        merged["Content-Type"] = content_type
        return self._record("POST", path, body, merged)

    def post_stream(self, path, body, callback, headers=None) -> int:
        self.calls.append(
            {
                "method": "POST",
                "path": path,
                "body": body,
                "authorization": self.authorization,
                "stream": True,
            }
        )
        chunks, status = self.streams.get(path, ([], 404))
        if status != 200:
            return status
        for chunk in chunks:
            self.delivered.append((chunk, False))
            if not callback(chunk, False):
                return status
        self.delivered.append(("", True))
        callback("", True)
        return status

    def close(self) -> None:
        self.closed = True

    def _record(self, method, path, body, headers) -> HttpResponse:
        self.calls.append(
            {
                "method": method,
                "path": path,
                "body": body,
                "headers": dict(headers or {}),
                "authorization": self.authorization,
            }
        )
        return self.responses.get((method, path), HttpResponse(status_code=404, body=""))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> SauronClient:
    return SauronClient(transport=transport)


@pytest.fixture
def authed_client(transport: FakeTransport) -> SauronClient:
    c = SauronClient(transport=transport)
    c.set_token("jwt-initial")
    return c
