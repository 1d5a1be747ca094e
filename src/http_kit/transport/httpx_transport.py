# src/http_kit/transport/httpx_transport.py

import logging

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from http_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import HttpRequest, HttpResponse, Transport, TransportError

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Transport backed by `httpx.AsyncClient`.

    Stateless: a client is opened per request so TLS verification can vary
    per call. Transport-only retries.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = 0,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._timeout = timeout
        self._max_retries = max_retries
        self._follow_redirects = follow_redirects
        self._transport = transport
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized HttpxTransport with timeout=%s, max_retries=%s",
            timeout,
            max_retries,
        )

    async def send(self, request: HttpRequest) -> HttpResponse:
        logger.debug("Sending %s %s", request.method, request.url)
        try:
            raw = await self._send_with_retries(request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        # Normalize immediately - httpx objects never escape
        return HttpResponse(
            status=raw.status_code,
            status_text=raw.reason_phrase,
            headers={key.lower(): value for key, value in raw.headers.items()},
            body=raw.text,
        )

    async def _send_with_retries(self, request: HttpRequest) -> httpx.Response:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                async with httpx.AsyncClient(
                    verify=request.tls_verify,
                    timeout=self._timeout,
                    follow_redirects=self._follow_redirects,
                    transport=self._transport,
                ) as client:
                    return await client.request(
                        request.method,
                        request.url,
                        headers=request.headers,
                        content=request.body,
                    )
