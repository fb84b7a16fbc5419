"""Transport adapters."""

from .httpx_adapter import AsyncHttpxAdapter, HttpxAdapter

__all__ = ["HttpxAdapter", "AsyncHttpxAdapter"]
