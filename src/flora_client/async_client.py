"""Public async client entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from types import TracebackType

from .adapters.httpx_adapter import AsyncHttpxAdapter
from .client_shared import prepare_request, validate_client_config
from .config import FloraClientConfig
from .core.assembly import build_transport_request
from .core.errors import FloraClientClosedError
from .core.models import ResponseEnvelope
from .core.request import Request
from .core.transport import AsyncTransportAdapter

logger = logging.getLogger("flora_client")

AsyncAuthHandler = Callable[[Request], Awaitable[None]]


class AsyncFloraClient:
    """Async client for a single Flora API endpoint.

    ``authenticate`` is awaited for requests flagged with
    ``authenticate=True`` before anything is sent. It receives a private copy
    of the request and may add headers or parameters to it, e.g. an
    ``Authorization`` header or an ``access_token`` parameter.
    """

    def __init__(
        self,
        config: FloraClientConfig,
        *,
        adapter: AsyncTransportAdapter | None = None,
        authenticate: AsyncAuthHandler | None = None,
    ) -> None:
        self._config = validate_client_config(config)
        self._adapter = adapter or AsyncHttpxAdapter(self._config)
        self._authenticate = authenticate
        self._closed = False

    @property
    def config(self) -> FloraClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._config.base_url

    async def execute(self, request: Request | Mapping[str, object]) -> ResponseEnvelope:
        self._ensure_open()
        prepared = prepare_request(request, has_auth_handler=self._authenticate is not None)

        if prepared.authenticate:
            logger.debug("authenticating request resource=%s", prepared.resource)
            await self._authenticate(prepared)  # type: ignore[misc]

        transport_request = build_transport_request(self._config, prepared)
        self._ensure_open()
        return await self._adapter.send(transport_request)

    def _ensure_open(self) -> None:
        if self._closed:
            raise FloraClientClosedError("AsyncFloraClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self._adapter.close()

    async def __aenter__(self) -> "AsyncFloraClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncAuthHandler",
    "AsyncFloraClient",
]
