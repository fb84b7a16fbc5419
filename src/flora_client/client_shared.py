"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping

from .config import FloraClientConfig
from .core.errors import (
    FloraAuthNotConfiguredError,
    FloraConfigError,
    FloraRequestIdError,
)
from .core.request import Request, coerce_request
from .core.request_id import is_valid_request_id


def validate_client_config(config: FloraClientConfig | None) -> FloraClientConfig:
    if config is None:
        raise FloraConfigError("Flora API url must be set")
    try:
        config.validate()
    except ValueError as exc:
        raise FloraConfigError(str(exc)) from exc
    return config


def prepare_request(
    request: Request | Mapping[str, object],
    *,
    has_auth_handler: bool,
) -> Request:
    """Validate a request before any I/O and return a private working copy."""

    prepared = coerce_request(request)
    if prepared.id is not None and not is_valid_request_id(prepared.id):
        raise FloraRequestIdError("Request id must be of type number or string")
    if prepared.authenticate and not has_auth_handler:
        raise FloraAuthNotConfiguredError(
            "Authenticated requests require an authentication handler"
        )
    return prepared.working_copy()


__all__ = [
    "validate_client_config",
    "prepare_request",
]
