"""Pydantic models for BookStack page attachments (uploaded files and links)."""

from datetime import datetime

from .base import ApiModel, ArgsModel, ListResult, User


class AttachmentItem(ApiModel):
    """An attachment as listed, created or updated."""

    id: int
    name: str
    extension: str = ""
    uploaded_to: int
    external: bool
    order: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


class AttachmentLink(ApiModel):
    html: str
    markdown: str


class ReadAttachmentResult(ApiModel):
    """An attachment read in full.

    For uploaded files ``content`` holds the base64 encoded file data; for
    link attachments it holds the link target.
    """

    id: int
    name: str
    extension: str = ""
    uploaded_to: int
    external: bool
    order: int = 0
    links: AttachmentLink
    content: str
    created_by: User
    updated_by: User
    created_at: datetime
    updated_at: datetime


ListAttachmentsResult = ListResult[AttachmentItem]


class CreateAttachmentArgs(ArgsModel):
    name: str
    uploaded_to: int


class CreateLinkAttachmentArgs(ArgsModel):
    name: str
    uploaded_to: int
    link: str


class UpdateAttachmentArgs(ArgsModel):
    name: str | None = None
    uploaded_to: int | None = None


class UpdateLinkAttachmentArgs(ArgsModel):
    name: str | None = None
    uploaded_to: int | None = None
    link: str | None = None
