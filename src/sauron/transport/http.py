"""
HttpxTransport — the production Transport on top of a pooled httpx.Client.

Default headers live on the httpx.Client itself, so a bearer token set once
is sent on every call until clear_authorization() removes it.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

import sauron.core.config as config_module
from sauron.core.config import ClientConfig
from sauron.core.errors import TransportError
from sauron.transport.base import Headers, HttpResponse, StreamCallback, Transport

logger = logging.getLogger(__name__)

AUTHORIZATION = "Authorization"


class HttpxTransport(Transport):
    def __init__(
        self,
        base_url: str | None = None,
        settings: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ):
        self._settings = settings or config_module.config
        url = base_url if base_url is not None else self._settings.base_url
        self._stream_timeout = httpx.Timeout(
            self._settings.timeout, read=self._settings.stream_timeout
        )
        # An injected client (tests, custom pools) is used as-is
        self._client = client or httpx.Client(
            timeout=self._settings.timeout,
            verify=self._settings.verify_ssl,
        )
        self._client.base_url = url.rstrip("/")
        self._client.headers["User-Agent"] = self._settings.user_agent
        self._client.headers["Accept"] = "application/json"

    # ── Base URL / headers ─────────────────────────────────────

    @property
    def base_url(self) -> str:
        return str(self._client.base_url).rstrip("/")

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._client.base_url = url.rstrip("/")

    def set_default_header(self, name: str, value: str) -> None:
        self._client.headers[name] = value

    def remove_default_header(self, name: str) -> None:
        self._client.headers.pop(name, None)

    def set_bearer_token(self, token: str) -> None:
        # "Bearer " with no credential is not a legal header value
        if not token:
            self.clear_authorization()
            return
        self._client.headers[AUTHORIZATION] = f"Bearer {token}"

    def clear_authorization(self) -> None:
        self._client.headers.pop(AUTHORIZATION, None)

    # ── Verbs ──────────────────────────────────────────────────

    def get(self, path: str, headers: Headers = None) -> HttpResponse:
        return self._send("GET", path, headers=headers)

    def post(self, path: str, body: Any, headers: Headers = None) -> HttpResponse:
        return self._send("POST", path, headers=headers, json=body)

    def post_text(
        self,
        path: str,
        body: str,
        content_type: str,
        headers: Headers = None,
    ) -> HttpResponse:
        merged = dict(headers or {})
        merged["Content-Type"] = content_type
        return self._send("POST", path, headers=merged, content=body.encode("utf-8"))

    def post_stream(
        self,
        path: str,
        body: Any,
        callback: StreamCallback,
        headers: Headers = None,
    ) -> int:
        start = time.monotonic()
        chunks = 0
        aborted = False
        try:
            with self._client.stream(
                "POST",
                path,
                json=body,
                headers=dict(headers or {}),
                timeout=self._stream_timeout,
            ) as resp:
                status = resp.status_code
                if status != 200:
                    # Error bodies are not part of the stream; leave them unread
                    logger.debug("Stream POST %s -> %d", path, status)
                    return status

                for text in resp.iter_text():
                    if not text:
                        continue
                    chunks += 1
                    if not callback(text, False):
                        aborted = True
                        break

                if not aborted:
                    callback("", True)
        except httpx.HTTPError as e:
            raise TransportError(f"stream POST {path} failed: {e}") from e

        logger.debug(
            "Stream POST %s -> %d (%d chunks%s)",
            path,
            status,
            chunks,
            ", aborted" if aborted else "",
            extra={
                "method": "POST",
                "path": path,
                "status": status,
                "chunks": chunks,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return status

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ── Internals ──────────────────────────────────────────────

    def _send(self, method: str, path: str, headers: Headers = None, **kwargs) -> HttpResponse:
        start = time.monotonic()
        try:
            resp = self._client.request(method, path, headers=dict(headers or {}), **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        logger.debug(
            "%s %s -> %d",
            method,
            path,
            resp.status_code,
            extra={
                "method": method,
                "path": path,
                "status": resp.status_code,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return HttpResponse(
            status_code=resp.status_code,
            body=resp.text,
            headers=dict(resp.headers),
        )
