"""Shared helpers for sync/async adapter implementations."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

import httpx

from ..config import FloraClientConfig
from .codec import encode_params
from .models import TransportRequest


def build_referer(argv: list[str] | None = None) -> str:
    args = sys.argv if argv is None else argv
    if not args or not args[0]:
        return ""
    return "file://" + os.path.abspath(args[0])


def build_default_headers(config: FloraClientConfig) -> Mapping[str, str]:
    headers = {"User-Agent": config.user_agent}
    referer = build_referer()
    if referer:
        headers["Referer"] = referer
    return headers


def build_default_timeout(config: FloraClientConfig) -> httpx.Timeout:
    return httpx.Timeout(config.timeout_seconds)


def encode_body(request: TransportRequest) -> bytes | None:
    if request.json_body is not None:
        return request.json_body.encode("utf-8")
    if request.params and request.http_method != "GET":
        return encode_params(request.params).encode("ascii")
    return None


__all__ = [
    "build_referer",
    "build_default_headers",
    "build_default_timeout",
    "encode_body",
]
