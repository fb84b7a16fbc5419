"""Request descriptor."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace

from .errors import FloraRequestIdError
from .select import SelectSpec

# camelCase keys accepted in the dict form.
_FIELD_ALIASES = {
    "httpMethod": "http_method",
    "httpHeaders": "http_headers",
}


@dataclass(slots=True)
class Request:
    """Declarative description of one API call.

    Fields left at ``None`` are not transmitted. ``params`` carries any
    additional API parameter (``client_id``, ``access_token``, ...).
    """

    resource: str
    id: str | int | float | None = None
    format: str | None = None
    action: str | None = None
    select: SelectSpec | None = None
    filter: str | None = None
    order: str | None = None
    search: str | None = None
    limit: int | None = None
    page: int | None = None
    data: object = None
    cache: bool = True
    http_method: str | None = None
    http_headers: dict[str, str] = field(default_factory=dict)
    authenticate: bool = False
    params: dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "Request":
        """Build a request from its dict form.

        Known keys fill the matching fields; a nested ``params`` mapping is
        merged with every other key as API parameters. An ``id`` key that is
        present must hold a value.
        """

        if "resource" not in values:
            raise TypeError("request requires a resource")
        if "id" in values and values["id"] is None:
            raise FloraRequestIdError("Request id must be of type number or string")
        names = {item.name for item in fields(cls)} - {"params"}
        kwargs: dict[str, object] = {}
        params: dict[str, object] = {}
        nested = values.get("params")
        if isinstance(nested, Mapping):
            params.update(nested)
        for key, value in values.items():
            if key == "params" and isinstance(nested, Mapping):
                continue
            name = _FIELD_ALIASES.get(key, key)
            if name in names:
                kwargs[name] = value
            else:
                params[key] = value
        if kwargs.get("http_headers") is None:
            kwargs.pop("http_headers", None)
        else:
            kwargs["http_headers"] = dict(kwargs["http_headers"])  # type: ignore[call-overload]
        if "cache" in kwargs:
            kwargs["cache"] = bool(kwargs["cache"])
        return cls(params=params, **kwargs)  # type: ignore[arg-type]

    def working_copy(self) -> "Request":
        """Copy with private header and parameter dicts, safe to mutate."""

        return replace(
            self,
            http_headers=dict(self.http_headers),
            params=dict(self.params),
        )


def coerce_request(request: Request | Mapping[str, object]) -> Request:
    if isinstance(request, Request):
        return request
    if isinstance(request, Mapping):
        return Request.from_mapping(request)
    raise TypeError("request must be Request or Mapping")


__all__ = [
    "Request",
    "coerce_request",
]
