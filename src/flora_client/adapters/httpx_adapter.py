"""HTTP adapters backed by httpx."""

from __future__ import annotations

import asyncio
import logging

import httpx

from ..config import FloraClientConfig
from ..core.errors import FloraError, FloraTimeoutError, FloraTransportError
from ..core.models import ResponseEnvelope, TransportRequest
from ..core.response_parsing import classify_response
from ..core.transport_shared import build_default_headers, build_default_timeout, encode_body

logger = logging.getLogger("flora_client")


class HttpxAdapter:
    """Synchronous adapter using ``httpx.Client``.

    The configured timeout is passed on every call, so an injected client
    cannot override it.
    """

    def __init__(
        self,
        config: FloraClientConfig,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._timeout_ms = config.timeout_ms
        self._timeout = build_default_timeout(config)
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=self._timeout,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def send(self, request: TransportRequest) -> ResponseEnvelope:
        if self._closed:
            raise FloraTransportError("adapter is already closed")

        logger.debug("request start method=%s url=%s", request.http_method, _log_target(request))
        try:
            response = self._client.request(
                request.http_method,
                request.url,
                headers=dict(request.headers),
                content=encode_body(request),
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            logger.error("request timed out method=%s url=%s", request.http_method, _log_target(request))
            raise FloraTimeoutError(self._timeout_ms) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                request.http_method,
                _log_target(request),
                exc.__class__.__name__,
            )
            raise FloraTransportError("network/transport error", code=exc.__class__.__name__) from exc

        return _classify(request, response)


class AsyncHttpxAdapter:
    """Asynchronous adapter using ``httpx.AsyncClient``.

    The timeout bounds the whole exchange, not only single socket operations.
    """

    def __init__(
        self,
        config: FloraClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout_ms = config.timeout_ms
        self._timeout = build_default_timeout(config)
        self._timeout_seconds = config.timeout_seconds
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=self._timeout,
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def send(self, request: TransportRequest) -> ResponseEnvelope:
        if self._closed:
            raise FloraTransportError("adapter is already closed")

        logger.debug("request start method=%s url=%s", request.http_method, _log_target(request))
        try:
            response = await asyncio.wait_for(
                self._client.request(
                    request.http_method,
                    request.url,
                    headers=dict(request.headers),
                    content=encode_body(request),
                    timeout=self._timeout,
                ),
                timeout=self._timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.error("request timed out method=%s url=%s", request.http_method, _log_target(request))
            raise FloraTimeoutError(self._timeout_ms) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                request.http_method,
                _log_target(request),
                exc.__class__.__name__,
            )
            raise FloraTransportError("network/transport error", code=exc.__class__.__name__) from exc

        return _classify(request, response)


def _log_target(request: TransportRequest) -> str:
    # Query strings may carry access tokens.
    return request.url.split("?", 1)[0]


def _classify(request: TransportRequest, response: httpx.Response) -> ResponseEnvelope:
    logger.debug(
        "response received method=%s url=%s http_status=%s",
        request.http_method,
        _log_target(request),
        response.status_code,
    )
    try:
        envelope = classify_response(response)
    except FloraError as exc:
        logger.error(
            "request failed method=%s url=%s http_status=%s error=%s",
            request.http_method,
            _log_target(request),
            response.status_code,
            exc.__class__.__name__,
        )
        raise
    logger.info("request success method=%s url=%s", request.http_method, _log_target(request))
    return envelope


__all__ = [
    "HttpxAdapter",
    "AsyncHttpxAdapter",
]
