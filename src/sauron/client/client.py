"""
SauronClient — authenticate against the gateway and run AI queries.

Every call follows the same pipeline:

    validate request -> check session -> attach bearer token
        -> transport call -> interpret status -> decode record

Validation and the session check happen before any network I/O, so a
malformed or unauthenticated call never leaves the process. Nothing is
retried; every failure is raised to the caller as a SauronError subclass.

One client holds one Session and assumes one call in flight at a time.
Share a client across threads only behind a lock, or build one per session.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from sauron.client.session import Session
import sauron.core.config as config_module
from sauron.core.config import ClientConfig
from sauron.core.errors import ApiError, AuthError, DecodeError
from sauron.models import (
    AIAlgorithmResponse,
    AIQueryRequest,
    AIQueryResponse,
    ErrorRecord,
    HealthResponse,
    LoginRequest,
    Record,
    TokenResponse,
)
from sauron.transport.base import HttpResponse, StreamCallback, Transport
from sauron.transport.http import HttpxTransport

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)

# Gateway endpoints, relative to the base URL
LOGIN_PATH = "/auth/login"
REFRESH_PATH = "/auth/refresh"
QUERY_PATH = "/ai/query"
QUERY_STREAM_PATH = "/ai/query/stream"
QUERY_ALGORITHM_PATH = "/ai/query/algorithm"
HEALTH_PATH = "/health"

HTTP_OK = 200


class SauronClient:
    """Client for the Sauron AI authentication and query API."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: Transport | None = None,
        session: Session | None = None,
        settings: ClientConfig | None = None,
    ):
        if transport is None:
            transport = HttpxTransport(base_url=base_url, settings=settings)
        elif base_url is not None:
            transport.base_url = base_url
        self._transport = transport
        self._session = session if session is not None else Session()
        # An injected session may already carry a credential
        if self._session.authenticated:
            self._transport.set_bearer_token(self._session.token)

    @classmethod
    def from_config(cls, settings: ClientConfig | None = None) -> SauronClient:
        """Build a client from ClientConfig, starting authenticated if it has a token."""
        settings = settings or config_module.config
        client = cls(base_url=settings.base_url, settings=settings)
        if settings.token:
            client.set_token(settings.token)
        return client

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session.authenticated

    # ── Authentication ─────────────────────────────────────────

    def login(self, request: LoginRequest) -> TokenResponse:
        """Exchange provider credentials for a JWT and install it."""
        request.validate()
        response = self._transport.post(LOGIN_PATH, request.to_dict())
        token = self._decode(response, TokenResponse)
        self.set_token(token.token)
        logger.info("Logged in (provider=%s)", request.provider.value)
        return token

    def refresh_token(self) -> TokenResponse:
        """Rotate the current JWT. Requires a prior login or set_token()."""
        if not self._session.authenticated:
            raise AuthError("no token available")

        self._authorize()
        response = self._transport.post(REFRESH_PATH, {})
        token = self._decode(response, TokenResponse)
        self.set_token(token.token)
        logger.info("Token refreshed")
        return token

    def set_token(self, token: str) -> None:
        self._session.set(token)
        self._transport.set_bearer_token(token)

    def get_token(self) -> str:
        return self._session.token

    def clear_token(self) -> None:
        # The transport caches headers, so the credential is removed there too
        self._session.clear()
        self._transport.clear_authorization()
        logger.debug("Token cleared")

    # ── Queries ────────────────────────────────────────────────

    def query(self, request: AIQueryRequest) -> AIQueryResponse:
        return self._authorized_query(QUERY_PATH, request, AIQueryResponse)

    def query_algorithm(self, request: AIQueryRequest) -> AIAlgorithmResponse:
        """Ask for an algorithm: code, explanation and time/space complexity."""
        return self._authorized_query(QUERY_ALGORITHM_PATH, request, AIAlgorithmResponse)

    def query_stream(self, request: AIQueryRequest, on_chunk: StreamCallback) -> bool:
        """
        Stream a query, handing each chunk to ``on_chunk(text, is_final)``.

        Returns True once the gateway reports success. The answer is only
        delivered through the callback; nothing is aggregated here. Returning
        False from the callback stops the stream early.
        """
        request.validate()
        self._require_login()
        self._authorize()

        status = self._transport.post_stream(QUERY_STREAM_PATH, request.to_dict(), on_chunk)
        if status != HTTP_OK:
            raise ApiError(
                f"stream request failed with status code: {status}",
                status_code=status,
            )
        logger.debug(
            "Stream query finished",
            extra={"provider": request.provider.value, "model": request.model},
        )
        return True

    def collect_stream(self, request: AIQueryRequest) -> str:
        """Run query_stream() to completion and return the joined text."""
        chunks: list[str] = []

        def collect(chunk: str, is_final: bool) -> bool:
            chunks.append(chunk)
            return True

        self.query_stream(request, collect)
        return "".join(chunks)

    def check_health(self) -> HealthResponse:
        """Ping the gateway. No authentication needed."""
        response = self._transport.get(HEALTH_PATH)
        return self._decode(response, HealthResponse)

    # ── Lifecycle ──────────────────────────────────────────────

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> SauronClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ── Internals ──────────────────────────────────────────────

    def _authorized_query(
        self,
        path: str,
        request: AIQueryRequest,
        record_type: type[R],
    ) -> R:
        request.validate()
        self._require_login()
        self._authorize()
        response = self._transport.post(path, request.to_dict())
        return self._decode(response, record_type)

    def _require_login(self) -> None:
        if not self._session.authenticated:
            raise AuthError("login required")

    def _authorize(self) -> None:
        self._transport.set_bearer_token(self._session.token)

    def _decode(self, response: HttpResponse, record_type: type[R]) -> R:
        if response.status_code != HTTP_OK:
            raise _api_error(response)

        data = _parse_json(response.body)
        if not isinstance(data, dict):
            raise DecodeError(
                f"expected a JSON object for {record_type.__name__}",
                body=response.body,
            )
        return record_type.from_dict(data)


def _parse_json(body: str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise DecodeError(f"response body is not valid JSON: {e}", body=body) from e


def _api_error(response: HttpResponse) -> ApiError:
    """Translate a non-success response, preferring the gateway's own message."""
    try:
        data = json.loads(response.body)
    except (json.JSONDecodeError, TypeError):
        data = None
    message = ErrorRecord.from_dict(data).error
    if not message:
        message = f"request failed with status {response.status_code}"
    return ApiError(message, status_code=response.status_code)
