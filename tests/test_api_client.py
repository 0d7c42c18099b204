import json

import httpx
import pytest

from user_management.application.dtos.user_dto import UserCreate, UserUpdate
from user_management.web.api_client import DEFAULT_GROUPS, UserManagementApiClient

USER_JSON = {
    "id": 7,
    "firstName": "Grace",
    "lastName": "Hopper",
    "email": "grace@example.com",
    "createdAt": "2024-01-02T03:04:05",
    "updatedAt": None,
    "groups": [{"id": 1, "name": "Admin", "description": "Administrator group"}],
}


def _client(handler) -> UserManagementApiClient:
    return UserManagementApiClient(
        httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api/")
    )


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"detail": "boom"})


def _user_data():
    return {"first_name": "Grace", "last_name": "Hopper", "email": "grace@example.com", "group_ids": [1]}


@pytest.mark.asyncio
async def test_get_all_users_parses_camel_case():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[USER_JSON])

    users = await _client(handler).get_all_users()

    assert seen[0].url == "http://api/api/users"
    assert users[0].first_name == "Grace"
    assert users[0].groups[0].name == "Admin"


@pytest.mark.asyncio
async def test_create_user_sends_camel_case_body():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(201, json=USER_JSON)

    user = await _client(handler).create_user(UserCreate(**_user_data()))

    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {
        "firstName": "Grace",
        "lastName": "Hopper",
        "email": "grace@example.com",
        "groupIds": [1],
    }
    assert user.id == 7


@pytest.mark.asyncio
@pytest.mark.parametrize("handler", [_unreachable, _server_error])
async def test_failures_degrade_to_none(handler):
    client = _client(handler)

    assert await client.get_all_users() is None
    assert await client.get_user(7) is None
    assert await client.create_user(UserCreate(**_user_data())) is None
    assert await client.update_user(7, UserUpdate(**_user_data())) is None
    assert await client.delete_user(7) is False


@pytest.mark.asyncio
async def test_get_user_not_found_returns_none():
    client = _client(lambda request: httpx.Response(404, json={"detail": "missing"}))

    assert await client.get_user(7) is None


@pytest.mark.asyncio
async def test_delete_user_success():
    client = _client(lambda request: httpx.Response(204))

    assert await client.delete_user(7) is True


@pytest.mark.asyncio
async def test_invalid_json_returns_none():
    client = _client(lambda request: httpx.Response(200, content=b"<html>"))

    assert await client.get_user(7) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("handler", [_unreachable, _server_error])
async def test_groups_fall_back_to_defaults(handler):
    groups = await _client(handler).get_all_groups()

    assert groups == DEFAULT_GROUPS
    assert [group.name for group in groups] == ["Admin", "Level 1", "Level 2"]


@pytest.mark.asyncio
async def test_groups_from_api():
    client = _client(lambda request: httpx.Response(200, json=[
        {"id": 9, "name": "Auditors", "description": "", "permissions": []}
    ]))

    groups = await client.get_all_groups()

    assert [(group.id, group.name) for group in groups] == [(9, "Auditors")]


@pytest.mark.asyncio
async def test_from_settings_configures_client():
    client = UserManagementApiClient.from_settings("http://localhost:8000/", 5.0)
    try:
        assert str(client.http.base_url) == "http://localhost:8000/"
        assert client.http.headers["accept"] == "application/json"
        assert client.http.timeout.connect == 5.0
    finally:
        await client.aclose()
