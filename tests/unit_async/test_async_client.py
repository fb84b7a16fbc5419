from __future__ import annotations

import asyncio
import math

import pytest

from flora_client.async_client import AsyncFloraClient
from flora_client.config import FloraClientConfig
from flora_client.core.errors import (
    FloraApiError,
    FloraAuthNotConfiguredError,
    FloraClientClosedError,
    FloraConfigError,
    FloraFormatError,
    FloraRequestIdError,
)
from flora_client.core.request import Request
from tests.shared.adapters import AsyncRecordingAdapter, make_payload

URL = "http://api.example.com/"


def _client(adapter: AsyncRecordingAdapter, **kwargs) -> AsyncFloraClient:
    return AsyncFloraClient(FloraClientConfig(url=URL), adapter=adapter, **kwargs)


def test_async_client_requires_url():
    with pytest.raises(FloraConfigError):
        AsyncFloraClient(FloraClientConfig(url=""), adapter=AsyncRecordingAdapter())


@pytest.mark.asyncio
async def test_async_client_context_manager_closes_adapter():
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        assert client is not None
    assert adapter.closed is True


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close():
    adapter = AsyncRecordingAdapter()
    client = _client(adapter)
    await client.close()
    with pytest.raises(FloraClientClosedError):
        await client.execute({"resource": "user"})
    assert adapter.calls == 0


@pytest.mark.asyncio
async def test_async_client_resolves_adapter_envelope():
    adapter = AsyncRecordingAdapter([make_payload([{"id": 1337}])])
    async with _client(adapter) as client:
        response = await client.execute({"resource": "user", "id": 1337})
    assert response.data == [{"id": 1337}]
    assert adapter.last.url == URL + "user/1337"
    assert adapter.last.http_method == "GET"


@pytest.mark.asyncio
async def test_async_client_posts_json_data():
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        await client.execute({"resource": "article", "action": "create", "data": {"title": "x"}})
    sent = adapter.last
    assert sent.http_method == "POST"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.json_body == '{"title":"x"}'
    assert sent.url == URL + "article/?action=create"


@pytest.mark.asyncio
@pytest.mark.parametrize("invalid_id", [None, True, math.nan, math.inf], ids=["null", "boolean", "NaN", "Infinity"])
async def test_async_client_rejects_invalid_request_id(invalid_id):
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        with pytest.raises(FloraRequestIdError):
            await client.execute({"resource": "user", "id": invalid_id})
    assert adapter.calls == 0


@pytest.mark.asyncio
async def test_async_client_rejects_non_json_format():
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        with pytest.raises(FloraFormatError, match="Only JSON format supported"):
            await client.execute({"resource": "user", "format": "pdf"})
    assert adapter.calls == 0


@pytest.mark.asyncio
async def test_async_authenticate_completes_before_dispatch():
    events: list[str] = []
    adapter = AsyncRecordingAdapter()

    async def authenticate(request: Request) -> None:
        await asyncio.sleep(0)
        events.append(f"auth:{adapter.calls}")
        request.http_headers["Authorization"] = "Bearer __token__"

    async with _client(adapter, authenticate=authenticate) as client:
        await client.execute(Request(resource="user", authenticate=True))
    assert events == ["auth:0"]
    assert adapter.calls == 1
    assert adapter.last.headers["Authorization"] == "Bearer __token__"
    assert adapter.last.url == URL + "user/"


@pytest.mark.asyncio
async def test_async_authenticate_without_handler_never_dispatches():
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        with pytest.raises(FloraAuthNotConfiguredError):
            await client.execute({"resource": "user", "authenticate": True})
    assert adapter.calls == 0


@pytest.mark.asyncio
async def test_async_authenticate_failure_is_propagated_as_is():
    failure = PermissionError("login rejected")

    async def authenticate(request: Request) -> None:
        raise failure

    adapter = AsyncRecordingAdapter()
    async with _client(adapter, authenticate=authenticate) as client:
        with pytest.raises(PermissionError) as exc_info:
            await client.execute({"resource": "user", "authenticate": True})
    assert exc_info.value is failure
    assert adapter.calls == 0


@pytest.mark.asyncio
async def test_async_client_propagates_api_error_with_envelope():
    payload = {"meta": {}, "data": None, "error": {"message": "Account already locked"}}
    adapter = AsyncRecordingAdapter([FloraApiError("Account already locked", response=payload)])
    async with _client(adapter) as client:
        with pytest.raises(FloraApiError) as exc_info:
            await client.execute({"resource": "user", "id": 1337, "action": "lock"})
    assert exc_info.value.response == payload
    assert adapter.last.url == URL + "user/1337?action=lock"
    assert adapter.last.params is None


@pytest.mark.asyncio
async def test_async_client_handles_concurrent_calls_independently():
    adapter = AsyncRecordingAdapter()
    async with _client(adapter) as client:
        await asyncio.gather(
            client.execute({"resource": "user", "id": 1}),
            client.execute({"resource": "user", "id": 2, "action": "lock"}),
            client.execute({"resource": "article", "limit": 5}),
        )
    urls = sorted(request.url for request in adapter.requests)
    assert urls == [
        URL + "article/?limit=5",
        URL + "user/1",
        URL + "user/2?action=lock",
    ]
