"""Request assembly, codecs, models and errors."""

from .errors import (
    FloraApiError,
    FloraAuthNotConfiguredError,
    FloraClientClosedError,
    FloraConfigError,
    FloraContentTypeError,
    FloraError,
    FloraFormatError,
    FloraParseError,
    FloraRequestIdError,
    FloraTimeoutError,
    FloraTransportError,
    FloraValidationError,
)
from .models import ResponseEnvelope, TransportRequest
from .request import Request

__all__ = [
    "Request",
    "TransportRequest",
    "ResponseEnvelope",
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
]
