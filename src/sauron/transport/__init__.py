"""
Sauron Transport Layer

The client talks to the gateway only through the Transport interface:
- Transport — abstract HTTP capability (verbs, default headers, bearer token)
- HttpxTransport — production implementation backed by httpx
"""

from sauron.transport.base import HttpResponse, StreamCallback, Transport
from sauron.transport.http import HttpxTransport

__all__ = ["Transport", "HttpResponse", "StreamCallback", "HttpxTransport"]
