from __future__ import annotations

import pytest

from flora_client.core.errors import FloraRequestIdError
from flora_client.core.request import Request, coerce_request


def test_from_mapping_maps_known_keys_and_collects_extra_params():
    request = Request.from_mapping(
        {
            "resource": "user",
            "id": 1337,
            "action": "update",
            "httpMethod": "HEAD",
            "httpHeaders": {"X-Awesome": "test"},
            "authenticate": True,
            "access_token": "__token__",
        }
    )
    assert request.resource == "user"
    assert request.id == 1337
    assert request.action == "update"
    assert request.http_method == "HEAD"
    assert request.http_headers == {"X-Awesome": "test"}
    assert request.authenticate is True
    assert request.params == {"access_token": "__token__"}


def test_from_mapping_requires_resource():
    with pytest.raises(TypeError):
        Request.from_mapping({"id": 1})


def test_from_mapping_copies_headers():
    headers = {"X-Awesome": "test"}
    request = Request.from_mapping({"resource": "user", "httpHeaders": headers})
    request.http_headers["Authorization"] = "Bearer x"
    assert headers == {"X-Awesome": "test"}


def test_working_copy_isolates_mutable_members():
    original = Request(resource="user", http_headers={"A": "1"}, params={"p": 1})
    copy = original.working_copy()
    copy.http_headers["B"] = "2"
    copy.params["access_token"] = "t"
    assert original.http_headers == {"A": "1"}
    assert original.params == {"p": 1}


def test_coerce_request_passes_request_through_and_rejects_other_types():
    request = Request(resource="user")
    assert coerce_request(request) is request
    with pytest.raises(TypeError):
        coerce_request("user")  # type: ignore[arg-type]


def test_from_mapping_rejects_present_but_empty_id():
    with pytest.raises(FloraRequestIdError, match="Request id must be of type number or string"):
        Request.from_mapping({"resource": "user", "id": None})


def test_from_mapping_merges_nested_params_with_top_level_keys():
    request = Request.from_mapping(
        {
            "resource": "user",
            "params": {"lang": "de", "client_id": "nested"},
            "client_id": "top",
        }
    )
    assert request.params == {"lang": "de", "client_id": "top"}
