from .base import HttpRequest, HttpResponse, Transport, TransportError
from .httpx_transport import HttpxTransport

__all__ = [
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Transport",
    "TransportError",
]
