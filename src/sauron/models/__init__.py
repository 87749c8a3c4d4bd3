"""Sauron records — typed request and response payloads."""

from sauron.models.base import Record
from sauron.models.provider import AIProvider
from sauron.models.requests import AIQueryRequest, LoginRequest
from sauron.models.responses import (
    AIAlgorithmResponse,
    AIQueryResponse,
    AlgorithmComplexity,
    ComplexityInfo,
    ErrorRecord,
    HealthResponse,
    TokenResponse,
)

__all__ = [
    "Record",
    "AIProvider",
    "LoginRequest",
    "AIQueryRequest",
    "TokenResponse",
    "AIQueryResponse",
    "AIAlgorithmResponse",
    "AlgorithmComplexity",
    "ComplexityInfo",
    "HealthResponse",
    "ErrorRecord",
]
