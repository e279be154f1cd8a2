"""Pydantic models for BookStack pages."""

from datetime import datetime

from pydantic import Field, model_validator

from .base import ApiModel, ArgsModel, ContentTag, ListResult, Tag, User


class PageSummary(ApiModel):
    """A page as it appears in the page listing."""

    id: int
    name: str
    slug: str
    editor: str = ""
    revision_count: int = 0
    draft: bool = False
    template: bool = False
    book_id: int
    book_slug: str | None = None
    chapter_id: int | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class PageItem(ApiModel):
    """A page as returned by create and update."""

    id: int
    name: str
    slug: str
    editor: str = ""
    markdown: str = ""
    html: str = ""
    revision_count: int = 0
    draft: bool = False
    template: bool = False
    book_id: int
    chapter_id: int | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime
    created_by: User
    updated_by: User
    owned_by: User
    tags: list[ContentTag] = Field(default_factory=list)


class ReadPageResult(PageItem):
    """A page read in full, including its stored (unrendered) HTML."""

    raw_html: str = ""


ListPagesResult = ListResult[PageSummary]


class CreatePageArgs(ArgsModel):
    """Arguments for a new page.

    Exactly one of ``book_id`` or ``chapter_id`` places the page, and one of
    ``html`` or ``markdown`` provides its content.
    """

    name: str
    book_id: int | None = None
    chapter_id: int | None = None
    html: str | None = None
    markdown: str | None = None
    priority: int | None = None
    tags: list[Tag] | None = None

    @model_validator(mode="after")
    def check_placement_and_content(self) -> "CreatePageArgs":
        if (self.book_id is None) == (self.chapter_id is None):
            raise ValueError("Exactly one of 'book_id' or 'chapter_id' is required")
        if (self.html is None) == (self.markdown is None):
            raise ValueError("Exactly one of 'html' or 'markdown' is required")
        return self


class UpdatePageArgs(ArgsModel):
    """Fields to change on a page. Setting ``book_id`` or ``chapter_id`` moves it."""

    name: str | None = None
    book_id: int | None = None
    chapter_id: int | None = None
    html: str | None = None
    markdown: str | None = None
    priority: int | None = None
    tags: list[Tag] | None = None
