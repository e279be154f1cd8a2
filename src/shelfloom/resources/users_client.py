"""Clients for the BookStack users and roles endpoints."""

from ..endpoints import ROLES, USERS
from ..models import (
    CreateRoleArgs,
    CreateUserArgs,
    ListRolesResult,
    ListUsersResult,
    RoleItem,
    UpdateRoleArgs,
    UpdateUserArgs,
    UserItem,
)
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ListableMixin,
    ReadableMixin,
)


class UsersClient(ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient):
    """Client for user accounts. Requires the ``users-manage`` permission."""

    _entity_path: str = USERS
    _list_model = ListUsersResult
    _read_model = UserItem

    async def create(self, args: CreateUserArgs) -> UserItem:
        return await self._api_client.request(
            "POST", self._entity_path, json=args.to_body(), model=UserItem
        )

    async def update(self, user_id: int, args: UpdateUserArgs) -> UserItem:
        return await self._api_client.request(
            "PUT", self._item_path(user_id), json=args.to_body(), model=UserItem
        )


class RolesClient(ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient):
    """Client for roles. Requires the ``user-roles-manage`` permission.

    Permission names for `CreateRoleArgs.permissions` are listed on
    `RolePermissions`.
    """

    _entity_path: str = ROLES
    _list_model = ListRolesResult
    _read_model = RoleItem

    async def create(self, args: CreateRoleArgs) -> RoleItem:
        return await self._api_client.request(
            "POST", self._entity_path, json=args.to_body(), model=RoleItem
        )

    async def update(self, role_id: int, args: UpdateRoleArgs) -> RoleItem:
        return await self._api_client.request(
            "PUT", self._item_path(role_id), json=args.to_body(), model=RoleItem
        )
