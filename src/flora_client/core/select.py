"""Select expression serializer.

Turns a nested field-selection tree into the compact select grammar::

    ["id", {"address": ["city", "zip"]}, {"author": ["name"]}]
    -> "id,address[city,zip],author.name"
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

SelectSpec = str | Sequence["SelectSpec"] | Mapping[str, "SelectSpec"]


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _count_sub_items(value: object) -> int:
    # Nested sequences are flattened; a mapping counts one item per key.
    if isinstance(value, Mapping):
        return len(value)
    if _is_sequence(value):
        return sum(_count_sub_items(item) for item in value)  # type: ignore[union-attr]
    return 1


def _has_multiple_sub_items(value: object) -> bool:
    return _count_sub_items(value) > 1


def stringify_select(spec: SelectSpec) -> str:
    if isinstance(spec, str):
        return spec
    if isinstance(spec, Mapping):
        parts: list[str] = []
        for key, value in spec.items():
            child = stringify_select(value)
            if _has_multiple_sub_items(value):
                parts.append(f"{key}[{child}]")
            else:
                parts.append(f"{key}.{child}")
        return ",".join(parts)
    if _is_sequence(spec):
        return ",".join(stringify_select(item) for item in spec)
    raise TypeError(f"unsupported select spec type: {type(spec).__name__}")


__all__ = [
    "SelectSpec",
    "stringify_select",
]
