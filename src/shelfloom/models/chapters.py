"""Pydantic models for BookStack chapters."""

from datetime import datetime

from pydantic import Field

from .base import ApiModel, ArgsModel, ContentTag, ListResult, Tag, User


class ChapterSummary(ApiModel):
    """A chapter as it appears in the chapter listing."""

    id: int
    name: str
    slug: str
    description: str = ""
    book_id: int
    book_slug: str | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class ChapterItem(ApiModel):
    """A chapter as returned by create and update."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    book_id: int
    book_slug: str | None = None
    default_template_id: int | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int
    tags: list[ContentTag] = Field(default_factory=list)


class ChapterContentPage(ApiModel):
    id: int
    name: str
    slug: str
    revision_count: int = 0
    draft: bool = False
    template: bool = False
    book_id: int
    chapter_id: int
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


class ReadChapterResult(ApiModel):
    """A chapter read in full, including its pages."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    default_template_id: int | None = None
    book_id: int
    book_slug: str | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: User
    updated_by: User
    owned_by: User
    tags: list[ContentTag] | None = None
    pages: list[ChapterContentPage] = Field(default_factory=list)


ListChaptersResult = ListResult[ChapterSummary]


class CreateChapterArgs(ArgsModel):
    book_id: int
    name: str
    description: str | None = None
    description_html: str | None = None
    default_template_id: int | None = None
    priority: int | None = None
    tags: list[Tag] | None = None


class UpdateChapterArgs(ArgsModel):
    """Fields to change on a chapter. Setting ``book_id`` moves the chapter."""

    name: str | None = None
    description: str | None = None
    description_html: str | None = None
    default_template_id: int | None = None
    priority: int | None = None
    tags: list[Tag] | None = None
    book_id: int | None = None
