"""Pydantic models for BookStack ZIP imports."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import ApiModel, ArgsModel, ListResult


class ImportsSummary(ApiModel):
    id: int
    name: str
    size: int
    type: str
    created_at: datetime
    updated_at: datetime
    created_by: int


class ImportsItem(ImportsSummary):
    """An uploaded import awaiting execution."""

    path: str


class ImportsTag(ApiModel):
    name: str


class ImportsAttachment(ApiModel):
    id: int
    name: str


class ImportsImage(ApiModel):
    id: int
    name: str
    type: str
    file: str


class ImportsPageDetails(ApiModel):
    id: int
    name: str
    priority: int | None = None
    attachments: list[ImportsAttachment] = Field(default_factory=list)
    images: list[ImportsImage] = Field(default_factory=list)
    tags: list[ImportsTag] = Field(default_factory=list)


class ImportsChapterDetails(ApiModel):
    id: int
    name: str
    priority: int | None = None
    pages: list[ImportsPageDetails] = Field(default_factory=list)
    tags: list[ImportsTag] = Field(default_factory=list)


class ImportsContentDetails(ApiModel):
    """Content tree found inside an uploaded ZIP file."""

    id: int
    name: str
    chapters: list[ImportsChapterDetails] | None = None
    pages: list[ImportsPageDetails] | None = None
    tags: list[ImportsTag] = Field(default_factory=list)


class ImportsItemDetails(ImportsItem):
    details: ImportsContentDetails


ListImportsResult = ListResult[ImportsSummary]


class RunImportsArgs(ArgsModel):
    """Where to place imported content. Books need no parent."""

    parent_type: Literal["book", "chapter"] | None = None
    parent_id: int | None = None


class RunImportsResult(ApiModel):
    id: int
    name: str
    slug: str
    book_id: int | None = None
    description: str = ""
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int
    default_template_id: int | None = None
