"""Pydantic models for the BookStack audit log."""

from datetime import datetime

from .base import ApiModel, ListResult, User


class AuditLogItem(ApiModel):
    """A single recorded activity.

    ``loggable_id`` and ``loggable_type`` identify the affected item when the
    activity relates to one.
    """

    id: int
    type: str
    detail: str = ""
    loggable_id: int | None = None
    loggable_type: str | None = None
    user_id: int
    ip: str = ""
    created_at: datetime
    user: User


ListAuditLogResult = ListResult[AuditLogItem]
