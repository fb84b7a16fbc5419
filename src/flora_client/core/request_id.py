"""Request id validation."""

from __future__ import annotations

import math


def is_valid_request_id(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return True
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


__all__ = [
    "is_valid_request_id",
]
