"""Response classification shared by sync/async adapters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import (
    FloraApiError,
    FloraContentTypeError,
    FloraParseError,
    extract_error_message,
)
from .models import ResponseEnvelope

DEFAULT_ERROR_MESSAGE = "error"


class JsonPayloadResponse(Protocol):
    status_code: int
    reason_phrase: str
    headers: Mapping[str, str]

    def json(self) -> object: ...


def is_json_content_type(content_type: str) -> bool:
    return content_type.strip().lower().startswith("application/json")


def ensure_json_content_type(response: JsonPayloadResponse) -> None:
    content_type = response.headers.get("content-type") or ""
    if is_json_content_type(content_type):
        return
    http_status = response.status_code
    if http_status >= 400 and response.reason_phrase:
        message = f'Server Error: {response.reason_phrase} (invalid content type: "{content_type}")'
    else:
        message = f'Server Error: Invalid content type: "{content_type}"'
    raise FloraContentTypeError(message, content_type=content_type, http_status=http_status)


def parse_json_payload(response: JsonPayloadResponse) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except ValueError as exc:
        raise FloraParseError(
            "response body is not valid JSON",
            http_status=response.status_code,
        ) from exc

    if not isinstance(payload, dict):
        raise FloraParseError(
            "response JSON root must be an object",
            http_status=response.status_code,
        )
    return payload


def classify_response(response: JsonPayloadResponse) -> ResponseEnvelope:
    """Turn a raw HTTP response into an envelope or raise a classified error."""

    ensure_json_content_type(response)
    payload = parse_json_payload(response)
    if response.status_code < 400:
        return ResponseEnvelope.from_payload(payload)
    raise FloraApiError(
        extract_error_message(payload) or DEFAULT_ERROR_MESSAGE,
        http_status=response.status_code,
        response=payload,
    )


__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "is_json_content_type",
    "ensure_json_content_type",
    "parse_json_payload",
    "classify_response",
]
