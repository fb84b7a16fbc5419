"""Core request/response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportRequest:
    """Finalized request handed to a transport adapter.

    ``params`` holds form-encoded body parameters; it is never set together
    with ``json_body``.
    """

    url: str
    http_method: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, object] | None = None
    json_body: str | None = None

    def __post_init__(self) -> None:
        if self.params is not None and self.json_body is not None:
            raise ValueError("params and json_body are mutually exclusive")


@dataclass(slots=True, frozen=True)
class ResponseEnvelope:
    meta: Mapping[str, object]
    data: object
    error: Mapping[str, object] | None
    cursor: Mapping[str, object] | None
    payload: Mapping[str, object] = field(repr=False, compare=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ResponseEnvelope":
        meta = payload.get("meta")
        error = payload.get("error")
        cursor = payload.get("cursor")
        return cls(
            meta=meta if isinstance(meta, Mapping) else {},
            data=payload.get("data"),
            error=error if isinstance(error, Mapping) else None,
            cursor=cursor if isinstance(cursor, Mapping) else None,
            payload=payload,
        )


__all__ = [
    "TransportRequest",
    "ResponseEnvelope",
]
