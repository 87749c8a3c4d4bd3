"""
Sauron SDK — authenticate against the Sauron AI gateway and run queries.

Usage:
    from sauron import SauronClient, LoginRequest, AIQueryRequest, AIProvider

    with SauronClient("http://localhost:3000") as client:
        client.login(LoginRequest(api_key="sk-...", provider=AIProvider.OPENAI))
        answer = client.query(AIQueryRequest(prompt="Hello"))
        print(answer.response)
"""

from sauron.client import SauronClient, Session
from sauron.core.errors import (
    ApiError,
    AuthError,
    DecodeError,
    ErrorKind,
    SauronError,
    TransportError,
    ValidationError,
)
from sauron.models import (
    AIAlgorithmResponse,
    AIProvider,
    AIQueryRequest,
    AIQueryResponse,
    AlgorithmComplexity,
    ComplexityInfo,
    ErrorRecord,
    HealthResponse,
    LoginRequest,
    TokenResponse,
)
from sauron.transport import HttpResponse, HttpxTransport, StreamCallback, Transport
from sauron.version import VERSION

__version__ = VERSION

__all__ = [
    "SauronClient",
    "Session",
    "Transport",
    "HttpxTransport",
    "HttpResponse",
    "StreamCallback",
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
    "SauronError",
    "ErrorKind",
    "ValidationError",
    "AuthError",
    "ApiError",
    "DecodeError",
    "TransportError",
    "VERSION",
    "__version__",
]
