import pytest


@pytest.mark.asyncio
async def test_list_groups(api_client):
    response = await api_client.get("/api/groups")

    assert response.status_code == 200
    groups = response.json()
    assert [(group["id"], group["name"]) for group in groups] == [
        (1, "Admin"), (2, "Level 1"), (3, "Level 2")
    ]
    assert [permission["name"] for permission in groups[0]["permissions"]] == [
        "Read", "Write", "Delete", "Manage Users"
    ]
    assert groups[1]["permissions"] == [
        {"id": 1, "name": "Read", "description": "Read access to resources"}
    ]
