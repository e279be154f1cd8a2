"""Pydantic models for per-item content permissions."""

from typing import Self

from pydantic import Field

from .base import ApiModel, ArgsModel, User


class RoleShort(ApiModel):
    id: int
    display_name: str


class RolePermission(ArgsModel):
    """Permissions granted to one role on one item."""

    role_id: int
    view: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False


class RolePermissionEx(ApiModel):
    """A role permission entry as reported by the server, with the role's name."""

    role_id: int
    role: RoleShort
    view: bool = False
    create: bool = False
    update: bool = False
    delete: bool = False


class FallbackPermission(ArgsModel):
    """Permissions for roles without an explicit entry.

    When ``inheriting`` is true the item follows its parent's permissions and
    the individual flags are ignored.
    """

    inheriting: bool
    view: bool | None = None
    create: bool | None = None
    update: bool | None = None
    delete: bool | None = None

    @classmethod
    def inherit(cls) -> Self:
        return cls(inheriting=True, view=False, create=False, update=False, delete=False)

    @classmethod
    def appoint(cls, view: bool, create: bool, update: bool, delete: bool) -> Self:
        return cls(
            inheriting=False, view=view, create=create, update=update, delete=delete
        )


class ContentPermissionsItem(ApiModel):
    owner: User
    role_permissions: list[RolePermissionEx] = Field(default_factory=list)
    fallback_permissions: FallbackPermission


class UpdateContentPermissionsArgs(ArgsModel):
    """Changes to an item's permissions.

    ``role_permissions`` replaces the full set of role entries when given.
    """

    owner_id: int | None = None
    role_permissions: list[RolePermission] | None = None
    fallback_permissions: FallbackPermission | None = None
