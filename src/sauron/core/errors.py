"""
Sauron errors — one hierarchy, one kind per failure class.

Every error raised by the client carries an ``ErrorKind`` so callers can
branch on ``err.kind`` instead of matching message text:

    try:
        client.query(request)
    except SauronError as err:
        match err.kind:
            case ErrorKind.AUTH:
                client.login(...)
            case ErrorKind.API:
                print(err.status_code, err.message)
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """What went wrong, independent of the exception class."""

    VALIDATION = "validation"  # request rejected locally, nothing sent
    AUTH = "auth"  # credential missing locally, nothing sent
    API = "api"  # gateway answered with a non-success status
    DECODE = "decode"  # success status but the body is not the expected shape
    TRANSPORT = "transport"  # the exchange itself failed


class SauronError(Exception):
    """Base class for every error the SDK raises."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(SauronError):
    """A record failed its own validation before serialization."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"{field} is required")
        self.field = field


class AuthError(SauronError):
    """The operation needs a credential the session does not hold."""

    kind = ErrorKind.AUTH


class ApiError(SauronError):
    """The gateway returned a non-success status."""

    kind = ErrorKind.API

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SauronError):
    """A success response body could not be parsed into a record."""

    kind = ErrorKind.DECODE

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class TransportError(SauronError):
    """The transport could not complete the HTTP exchange."""

    kind = ErrorKind.TRANSPORT
