"""Request assembly: turns a request descriptor into a transport request."""

from __future__ import annotations

import json
import time
from collections.abc import Callable

from ..config import FloraClientConfig
from .codec import encode_params, format_param_value, sorted_params
from .errors import FloraFormatError
from .http_method import DEFAULT_ACTION, resolve_http_method
from .models import TransportRequest
from .request import Request
from .select import stringify_select

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Methods whose leftover parameters travel as a form-encoded body.
_FORM_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})

_PARAM_FIELDS = ("format", "action", "select", "filter", "order", "search", "limit", "page")


def _now_ms() -> int:
    return int(time.time() * 1000)


def build_url(config: FloraClientConfig, request: Request) -> str:
    suffix = "" if request.id is None else format_param_value(request.id)
    return f"{config.base_url}{request.resource}/{suffix}"


def collect_params(config: FloraClientConfig, request: Request) -> dict[str, object]:
    params: dict[str, object] = {}
    for name in _PARAM_FIELDS:
        value = getattr(request, name)
        if value is None:
            continue
        if name == "select" and not isinstance(value, str):
            value = stringify_select(value)
        params[name] = value
    for key, value in request.params.items():
        if value is not None:
            params[key] = value

    for key, value in config.default_params.items():
        if value is not None and key not in params:
            params[key] = value

    if params.get("action") == DEFAULT_ACTION:
        del params["action"]
    return params


def build_transport_request(
    config: FloraClientConfig,
    request: Request,
    *,
    clock_ms: Callable[[], int] | None = None,
) -> TransportRequest:
    """Assemble URL, method, headers and body for ``request``.

    The request itself is left untouched.
    """

    if request.format is not None and str(request.format).lower() != "json":
        raise FloraFormatError("Only JSON format supported")

    url = build_url(config, request)
    headers: dict[str, str] = dict(request.http_headers)

    json_body: str | None = None
    if request.data is not None:
        json_body = json.dumps(request.data, separators=(",", ":"), ensure_ascii=False)
        headers["Content-Type"] = JSON_CONTENT_TYPE

    params = collect_params(config, request)

    if request.http_method:
        http_method = request.http_method.upper()
    else:
        http_method = resolve_http_method(params, has_json_body=json_body is not None)

    query_params: dict[str, object] = {}
    for name in config.query_string_params:
        if params.get(name):
            query_params[name] = params.pop(name)

    if json_body is not None or http_method not in _FORM_BODY_METHODS:
        query_params.update(params)
        params = {}

    body_params: dict[str, object] | None = None
    if params:
        body_params = params
        headers["Content-Type"] = FORM_CONTENT_TYPE

    if query_params:
        url += "?" + encode_params(sorted_params(query_params))

    if not request.cache:
        stamp = (clock_ms or _now_ms)()
        url += ("&" if "?" in url else "?") + f"_={stamp}"

    return TransportRequest(
        url=url,
        http_method=http_method,
        headers=headers,
        params=body_params,
        json_body=json_body,
    )


__all__ = [
    "JSON_CONTENT_TYPE",
    "FORM_CONTENT_TYPE",
    "build_url",
    "collect_params",
    "build_transport_request",
]
