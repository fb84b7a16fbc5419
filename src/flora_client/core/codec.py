"""Query-string encoding helpers."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import quote

# Characters left untouched by encodeURIComponent.
_UNRESERVED = "-_.!~*'()"


def format_param_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_component(value: object) -> str:
    return quote(format_param_value(value), safe=_UNRESERVED)


def encode_params(params: Mapping[str, object]) -> str:
    """Encode params as ``key=value`` pairs joined by ``&``, in mapping order."""

    return "&".join(
        f"{encode_component(key)}={encode_component(value)}" for key, value in params.items()
    )


def sorted_params(params: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of ``params`` with keys in ascending order."""

    return {key: params[key] for key in sorted(params)}


__all__ = [
    "format_param_value",
    "encode_component",
    "encode_params",
    "sorted_params",
]
