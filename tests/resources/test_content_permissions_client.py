# tests/resources/test_content_permissions_client.py
from unittest.mock import AsyncMock, MagicMock

import pytest

from shelfloom.client import BookStackClient
from shelfloom.constants import ContentType
from shelfloom.models import (
    ContentPermissionsItem,
    FallbackPermission,
    RolePermission,
    UpdateContentPermissionsArgs,
)
from shelfloom.resources import ContentPermissionsClient


@pytest.fixture
def mock_api_client() -> MagicMock:
    api_client = MagicMock(spec=BookStackClient)
    api_client.request = AsyncMock()
    return api_client


@pytest.fixture
def permissions_client(mock_api_client: MagicMock) -> ContentPermissionsClient:
    return ContentPermissionsClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_read_builds_typed_path(permissions_client, mock_api_client):
    await permissions_client.read("book", 3)

    mock_api_client.request.assert_called_once_with(
        "GET", "content-permissions/book/3", model=ContentPermissionsItem
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method_name", "expected_path"),
    [
        ("read_shelf", "content-permissions/bookshelf/9"),
        ("read_book", "content-permissions/book/9"),
        ("read_chapter", "content-permissions/chapter/9"),
        ("read_page", "content-permissions/page/9"),
    ],
)
async def test_read_shortcuts(
    permissions_client, mock_api_client, method_name: str, expected_path: str
):
    await getattr(permissions_client, method_name)(9)

    assert mock_api_client.request.call_args.args == ("GET", expected_path)


@pytest.mark.asyncio
async def test_update_sends_permissions_body(permissions_client, mock_api_client):
    args = UpdateContentPermissionsArgs(
        owner_id=2,
        role_permissions=[RolePermission(role_id=4, view=True)],
        fallback_permissions=FallbackPermission.inherit(),
    )

    await permissions_client.update_page(11, args)

    mock_api_client.request.assert_called_once_with(
        "PUT",
        "content-permissions/page/11",
        json={
            "owner_id": 2,
            "role_permissions": [
                {
                    "role_id": 4,
                    "view": True,
                    "create": False,
                    "update": False,
                    "delete": False,
                }
            ],
            "fallback_permissions": {
                "inheriting": True,
                "view": False,
                "create": False,
                "update": False,
                "delete": False,
            },
        },
        model=ContentPermissionsItem,
    )


@pytest.mark.asyncio
async def test_update_accepts_enum_content_type(permissions_client, mock_api_client):
    await permissions_client.update(
        ContentType.CHAPTER, 5, UpdateContentPermissionsArgs(owner_id=1)
    )

    assert mock_api_client.request.call_args.args == (
        "PUT",
        "content-permissions/chapter/5",
    )


@pytest.mark.asyncio
async def test_unknown_content_type_is_rejected(permissions_client, mock_api_client):
    with pytest.raises(ValueError):
        await permissions_client.read("shelf", 1)
    mock_api_client.request.assert_not_called()
