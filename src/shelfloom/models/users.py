"""Pydantic models for BookStack users and roles."""

from datetime import datetime

from pydantic import Field

from .base import ApiModel, ArgsModel, ListResult, User


class UserRole(ApiModel):
    id: int
    display_name: str


class UserSummary(ApiModel):
    """A user as it appears in the user listing."""

    id: int
    name: str
    slug: str
    email: str
    external_auth_id: str | None = None
    profile_url: str = ""
    edit_url: str = ""
    avatar_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_activity_at: datetime | None = None


class UserItem(ApiModel):
    """A user as created, read or updated."""

    id: int
    name: str
    slug: str
    email: str
    external_auth_id: str | None = None
    roles: list[UserRole] | None = None
    profile_url: str = ""
    edit_url: str = ""
    avatar_url: str = ""
    created_at: datetime
    updated_at: datetime


ListUsersResult = ListResult[UserSummary]


class CreateUserArgs(ArgsModel):
    name: str
    email: str
    external_auth_id: str | None = None
    language: str | None = None
    password: str | None = None
    roles: list[int] | None = None
    send_invite: bool | None = None


class UpdateUserArgs(ArgsModel):
    name: str | None = None
    email: str | None = None
    external_auth_id: str | None = None
    language: str | None = None
    password: str | None = None
    roles: list[int] | None = None
    send_invite: bool | None = None


class RoleSummary(ApiModel):
    """A role as it appears in the role listing."""

    id: int
    display_name: str
    system_name: str | None = None
    description: str | None = None
    permissions_count: int = 0
    users_count: int = 0
    mfa_enforced: bool = False
    external_auth_id: str | None = None
    created_at: datetime
    updated_at: datetime


class RoleItem(ApiModel):
    """A role as created, read or updated, with its permission names and members."""

    id: int
    display_name: str
    description: str | None = None
    mfa_enforced: bool = False
    permissions: list[str] = Field(default_factory=list)
    users: list[User] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


ListRolesResult = ListResult[RoleSummary]


class CreateRoleArgs(ArgsModel):
    """Arguments for a new role. See ``RolePermissions`` for permission names."""

    display_name: str
    description: str | None = None
    mfa_enforced: bool | None = None
    external_auth_id: str | None = None
    permissions: list[str] | None = None


class UpdateRoleArgs(ArgsModel):
    display_name: str | None = None
    description: str | None = None
    mfa_enforced: bool | None = None
    external_auth_id: str | None = None
    permissions: list[str] | None = None
