# tests/resources/test_users_client.py
import json

import pytest

from shelfloom.client import BookStackClient
from shelfloom.constants import RolePermissions
from shelfloom.endpoints import ListingOptions
from shelfloom.models import (
    CreateRoleArgs,
    CreateUserArgs,
    RoleSummary,
    UpdateUserArgs,
    UserItem,
    UserSummary,
)

BASE_URL = "https://wiki.example.org/api/"
TS = "2024-05-01T10:20:30.000000Z"
USER = {
    "id": 7,
    "name": "Dana",
    "slug": "dana",
    "email": "dana@example.org",
    "created_at": TS,
    "updated_at": TS,
}


@pytest.mark.asyncio
async def test_list_users_with_filter(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}users?filter[email:like]=dana",
        json={"data": [{**USER, "last_activity_at": TS}], "total": 1},
    )

    result = await client.users.list(
        ListingOptions(filters=[("email:like", "dana")])
    )

    assert isinstance(result.data[0], UserSummary)
    assert result.data[0].last_activity_at is not None


@pytest.mark.asyncio
async def test_create_user_sends_json(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}users", json=USER)

    user = await client.users.create(
        CreateUserArgs(name="Dana", email="dana@example.org", roles=[2], send_invite=True)
    )

    assert isinstance(user, UserItem)
    assert json.loads(httpx_mock.get_request().read()) == {
        "name": "Dana",
        "email": "dana@example.org",
        "roles": [2],
        "send_invite": True,
    }


@pytest.mark.asyncio
async def test_update_and_delete_user(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(method="PUT", url=f"{BASE_URL}users/7", json=USER)
    httpx_mock.add_response(method="DELETE", url=f"{BASE_URL}users/7", status_code=204)

    await client.users.update(7, UpdateUserArgs(name="Dana R."))
    assert await client.users.delete(7) is None

    put, delete = httpx_mock.get_requests()
    assert json.loads(put.read()) == {"name": "Dana R."}
    assert delete.method == "DELETE"


@pytest.mark.asyncio
async def test_roles_create_and_list(client: BookStackClient, httpx_mock):
    role = {
        "id": 3,
        "display_name": "Editors",
        "description": "Can edit",
        "mfa_enforced": False,
        "permissions": [RolePermissions.CREATE_ALL_PAGES],
        "users": [],
        "created_at": TS,
        "updated_at": TS,
    }
    httpx_mock.add_response(method="POST", url=f"{BASE_URL}roles", json=role)
    httpx_mock.add_response(
        method="GET",
        url=f"{BASE_URL}roles?sort=display_name",
        json={
            "data": [{**role, "permissions_count": 1, "users_count": 0}],
            "total": 1,
        },
    )

    created = await client.roles.create(
        CreateRoleArgs(
            display_name="Editors", permissions=[RolePermissions.CREATE_ALL_PAGES]
        )
    )
    listed = await client.roles.list(ListingOptions(sorts=["display_name"]))

    assert created.id == 3
    assert isinstance(listed.data[0], RoleSummary)
    assert listed.data[0].permissions_count == 1
