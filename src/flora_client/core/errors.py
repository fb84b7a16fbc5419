"""Error types raised by the client and its adapters."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_message(payload: Mapping[str, object] | None) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if not isinstance(error, Mapping):
        return None
    message = error.get("message")
    if message is None or message == "":
        return None
    return str(message)


class FloraError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        code: str | None = None,
        response: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.code = code
        self.response = response


class FloraConfigError(FloraError):
    """Invalid client configuration."""


class FloraClientClosedError(FloraError):
    """Raised when client is used after close."""


class FloraValidationError(FloraError):
    """Request rejected before any network activity."""


class FloraRequestIdError(FloraValidationError):
    """Request id is neither a string nor a finite number."""


class FloraFormatError(FloraValidationError):
    """Response format other than JSON requested."""


class FloraAuthNotConfiguredError(FloraValidationError):
    """Authenticated request without an authentication handler."""


class FloraTransportError(FloraError):
    """Network/transport-level failure."""


class FloraTimeoutError(FloraTransportError):
    """Request exceeded the configured timeout."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(
            f"Request timed out after {timeout_ms} milliseconds",
            code="ETIMEDOUT",
        )
        self.timeout_ms = timeout_ms


class FloraContentTypeError(FloraError):
    """Response content type is not JSON."""

    def __init__(
        self,
        message: str,
        *,
        content_type: str,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status)
        self.content_type = content_type


class FloraParseError(FloraError):
    """Response claimed JSON but the body could not be decoded."""


class FloraApiError(FloraError):
    """API answered with an HTTP error status and a JSON envelope."""


__all__ = [
    "FloraError",
    "FloraConfigError",
    "FloraClientClosedError",
    "FloraValidationError",
    "FloraRequestIdError",
    "FloraFormatError",
    "FloraAuthNotConfiguredError",
    "FloraTransportError",
    "FloraTimeoutError",
    "FloraContentTypeError",
    "FloraParseError",
    "FloraApiError",
    "extract_error_message",
]
