"""Transport adapter contracts consumed by the clients."""

from __future__ import annotations

from typing import Protocol

from .models import ResponseEnvelope, TransportRequest


class SyncTransportAdapter(Protocol):
    def send(self, request: TransportRequest) -> ResponseEnvelope: ...
    def close(self) -> None: ...


class AsyncTransportAdapter(Protocol):
    async def send(self, request: TransportRequest) -> ResponseEnvelope: ...
    async def close(self) -> None: ...


__all__ = [
    "SyncTransportAdapter",
    "AsyncTransportAdapter",
]
