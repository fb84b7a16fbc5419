"""Public client entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import TracebackType

from .adapters.httpx_adapter import HttpxAdapter
from .client_shared import prepare_request, validate_client_config
from .config import FloraClientConfig
from .core.assembly import build_transport_request
from .core.errors import FloraClientClosedError
from .core.models import ResponseEnvelope
from .core.request import Request
from .core.transport import SyncTransportAdapter

logger = logging.getLogger("flora_client")

AuthHandler = Callable[[Request], None]


class FloraClient:
    """Blocking client for a single Flora API endpoint."""

    def __init__(
        self,
        config: FloraClientConfig,
        *,
        adapter: SyncTransportAdapter | None = None,
        authenticate: AuthHandler | None = None,
    ) -> None:
        self._config = validate_client_config(config)
        self._adapter = adapter or HttpxAdapter(self._config)
        self._authenticate = authenticate
        self._closed = False

    @property
    def config(self) -> FloraClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._config.base_url

    def execute(self, request: Request | Mapping[str, object]) -> ResponseEnvelope:
        self._ensure_open()
        prepared = prepare_request(request, has_auth_handler=self._authenticate is not None)

        if prepared.authenticate:
            logger.debug("authenticating request resource=%s", prepared.resource)
            self._authenticate(prepared)  # type: ignore[misc]

        return self._adapter.send(build_transport_request(self._config, prepared))

    def _ensure_open(self) -> None:
        if self._closed:
            raise FloraClientClosedError("FloraClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._adapter.close()
        self._closed = True

    def __enter__(self) -> "FloraClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "AuthHandler",
    "FloraClient",
]
