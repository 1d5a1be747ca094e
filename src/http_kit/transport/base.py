# src/http_kit/transport/base.py

from dataclasses import dataclass, field
from typing import Protocol

from http_kit.observability.base import MetricsHook


@dataclass(frozen=True)
class HttpRequest:
    """A fully substituted request, ready to go on the wire."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    tls_verify: bool = True


@dataclass(frozen=True)
class HttpResponse:
    """Normalized response. Provider objects never leak past the transport."""

    status: int
    status_text: str
    headers: dict[str, str]
    body: str

    @property
    def content_type(self) -> str:
        for key, value in self.headers.items():
            if key.lower() == "content-type":
                return value
        return ""


class TransportError(Exception):
    """The request never produced a response (DNS, connect, TLS, timeout...)."""


class Transport(Protocol):
    """Protocol for the network collaborator.

    Design principles:
    - Transport only: no variable handling, no scripts
    - Retries only on network errors, never on HTTP status codes
    - No leakage: client library objects never escape the adapter
    """

    metrics_hook: MetricsHook

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send one request and return the normalized response.

        Raises:
            TransportError: If no response could be obtained.
        """
        ...
