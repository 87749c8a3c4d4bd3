"""
Base Transport Interface — the HTTP capability the client is written against.

The client never touches sockets, TLS or connection pools. It only needs
the verbs below plus control over default headers and the bearer credential.
HttpxTransport is the production implementation; tests supply a fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

# (chunk_text, is_final) -> keep going?
StreamCallback = Callable[[str, bool], bool]

Headers = Optional[Mapping[str, str]]


@dataclass
class HttpResponse:
    """Status, raw body text and response headers of one exchange."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class Transport(ABC):
    """
    HTTP transport contract.

    Paths are relative to ``base_url``. Per-call ``headers`` are merged over
    the transport's default headers for that call only.
    """

    @property
    @abstractmethod
    def base_url(self) -> str:
        ...

    @base_url.setter
    @abstractmethod
    def base_url(self, url: str) -> None:
        ...

    @abstractmethod
    def set_default_header(self, name: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_default_header(self, name: str) -> None:
        ...

    @abstractmethod
    def set_bearer_token(self, token: str) -> None:
        """Send ``Authorization: Bearer <token>`` on every following call."""
        ...

    @abstractmethod
    def clear_authorization(self) -> None:
        """Drop any cached Authorization header."""
        ...

    @abstractmethod
    def get(self, path: str, headers: Headers = None) -> HttpResponse:
        ...

    @abstractmethod
    def post(self, path: str, body: Any, headers: Headers = None) -> HttpResponse:
        """POST a JSON-serializable body."""
        ...

    @abstractmethod
    def post_text(
        self,
        path: str,
        body: str,
        content_type: str,
        headers: Headers = None,
    ) -> HttpResponse:
        """POST a raw string body with an explicit content type."""
        ...

    @abstractmethod
    def post_stream(
        self,
        path: str,
        body: Any,
        callback: StreamCallback,
        headers: Headers = None,
    ) -> int:
        """
        POST a JSON body and deliver the response incrementally.

        ``callback(chunk, is_final)`` is called synchronously for each chunk in
        arrival order, ending with exactly one ``is_final=True`` call. If the
        callback returns False, delivery stops immediately. Returns the HTTP
        status code of the exchange.
        """
        ...

    def close(self) -> None:
        """Release any pooled connections."""
