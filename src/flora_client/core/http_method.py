"""HTTP method inference."""

from __future__ import annotations

from collections.abc import Mapping

from .codec import encode_params

DEFAULT_ACTION = "retrieve"
MAX_QUERY_STRING_LENGTH = 2000


def resolve_http_method(params: Mapping[str, object], *, has_json_body: bool) -> str:
    if has_json_body:
        return "POST"
    action = params.get("action")
    if action and action != DEFAULT_ACTION:
        return "POST"
    if len(encode_params(params)) > MAX_QUERY_STRING_LENGTH:
        return "POST"
    return "GET"


__all__ = [
    "DEFAULT_ACTION",
    "MAX_QUERY_STRING_LENGTH",
    "resolve_http_method",
]
