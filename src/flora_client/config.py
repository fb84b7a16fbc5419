"""Client configuration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from ._version import __version__

DEFAULT_TIMEOUT_MS = 15000
BASE_QUERY_STRING_PARAMS: tuple[str, ...] = ("client_id", "action", "access_token")


@dataclass(slots=True, frozen=True)
class FloraClientConfig:
    """Runtime configuration for a Flora API endpoint."""

    url: str
    default_params: Mapping[str, object] = field(default_factory=dict)
    force_query_string_params: Sequence[str] = ()
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = f"flora-client/{__version__}"

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "default_params",
            MappingProxyType(dict(self.default_params or {})),
        )
        if isinstance(self.force_query_string_params, str):
            raise TypeError("force_query_string_params must be a sequence of str, not str")
        object.__setattr__(
            self,
            "force_query_string_params",
            tuple(self.force_query_string_params or ()),
        )

    @property
    def base_url(self) -> str:
        return self.url.rstrip("/") + "/"

    @property
    def query_string_params(self) -> tuple[str, ...]:
        names = list(BASE_QUERY_STRING_PARAMS)
        for name in self.force_query_string_params:
            if name not in names:
                names.append(name)
        return tuple(names)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    def validate(self) -> None:
        if not isinstance(self.url, str) or not self.url:
            raise ValueError("Flora API url must be set")
        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ValueError("timeout_ms must be int")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be > 0")
        for key in self.default_params:
            if not isinstance(key, str):
                raise ValueError("default_params keys must be str")
        for name in self.force_query_string_params:
            if not isinstance(name, str) or name == "":
                raise ValueError("force_query_string_params entries must be non-empty str")


__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "BASE_QUERY_STRING_PARAMS",
    "FloraClientConfig",
]
