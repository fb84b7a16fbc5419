"""Public package exports for Flora API client."""

from ._version import __version__
from .async_client import AsyncFloraClient
from .client import FloraClient
from .config import FloraClientConfig
from .core.models import ResponseEnvelope
from .core.request import Request

__all__ = [
    "__version__",
    "FloraClient",
    "AsyncFloraClient",
    "FloraClientConfig",
    "Request",
    "ResponseEnvelope",
]
