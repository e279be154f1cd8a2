"""Pydantic models for the BookStack image gallery.

Single image reads report timestamps without a time zone
(``2024-05-01 10:11:12``); those are read as UTC.
"""

from datetime import datetime

from ..constants import ImageType
from .base import AmbiguousDateTime, ApiModel, ArgsModel, ListResult, User


class ImageSummary(ApiModel):
    id: int
    name: str
    url: str
    path: str
    type: str
    uploaded_to: int
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


class ImageThumbs(ApiModel):
    gallery: str
    display: str


class ImageRef(ApiModel):
    html: str
    markdown: str


class ImageItem(ApiModel):
    """An image as created, read or updated."""

    id: int
    name: str
    url: str
    path: str
    type: str
    uploaded_to: int
    thumbs: ImageThumbs
    content: ImageRef
    created_at: AmbiguousDateTime
    updated_at: AmbiguousDateTime
    created_by: User
    updated_by: User


ListImagesResult = ListResult[ImageSummary]


class CreateImageArgs(ArgsModel):
    uploaded_to: int
    type: ImageType = ImageType.GALLERY
    name: str | None = None


class UpdateImageArgs(ArgsModel):
    name: str | None = None
