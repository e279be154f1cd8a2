"""Pydantic models for BookStack books and their contents.

A book read returns its direct contents as a mixed list of chapters and pages,
told apart by each element's ``type`` field. Older BookStack releases did not
send ``type`` for pages, so elements without it are read as pages.
"""

from datetime import datetime

from pydantic import Field

from ..variants import VariantFamily
from .base import (
    ApiModel,
    ArgsModel,
    ContentTag,
    ListResult,
    Tag,
    User,
    variant_tag,
)

PageTag = variant_tag("page")
ChapterTag = variant_tag("chapter")


class BookCoverSummary(ApiModel):
    id: int
    name: str
    url: str


class BookCoverThumbs(ApiModel):
    display: str
    gallery: str


class BookCover(ApiModel):
    """Cover image of a book as returned by create, read and update."""

    id: int
    name: str
    type: str
    uploaded_to: int
    path: str
    url: str
    thumbs: BookCoverThumbs | None = None
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


class BookSummary(ApiModel):
    """A book as it appears in the book listing."""

    id: int
    name: str
    slug: str
    description: str = ""
    cover: BookCoverSummary | None = None
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class BookItem(ApiModel):
    """A book as returned by create and update."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    default_template_id: int | None = None
    sort_rule_id: int | None = None
    tags: list[ContentTag] | None = None
    cover: BookCover | None = None
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class BookContentPage(ApiModel):
    """A page placed directly in a book, or inside one of its chapters."""

    id: int
    name: str
    slug: str
    type: PageTag = "page"
    book_id: int
    chapter_id: int | None = None
    draft: bool = False
    template: bool = False
    url: str = ""
    priority: int = 0
    created_at: datetime
    updated_at: datetime


class BookContentChapter(ApiModel):
    """A chapter of a book, with the pages it contains."""

    id: int
    name: str
    slug: str
    type: ChapterTag = "chapter"
    book_id: int
    url: str = ""
    pages: list[BookContentPage] | None = None
    priority: int = 0
    created_at: datetime
    updated_at: datetime


BOOK_CONTENTS: VariantFamily[BookContentPage | BookContentChapter] = VariantFamily(
    "book content",
    {"page": BookContentPage, "chapter": BookContentChapter},
    default_tag="page",
)
BookContent = BOOK_CONTENTS.annotation


class ReadBookResult(ApiModel):
    """A book read in full, including its chapters and pages."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    default_template_id: int | None = None
    sort_rule_id: int | None = None
    contents: list[BookContent] = Field(default_factory=list)
    tags: list[ContentTag] | None = None
    cover: BookCover | None = None
    created_at: datetime
    updated_at: datetime
    created_by: User
    updated_by: User
    owned_by: User

    def chapters(self) -> list[BookContentChapter]:
        return [c for c in self.contents if isinstance(c, BookContentChapter)]

    def pages(self) -> list[BookContentPage]:
        """Pages placed directly in the book (not those inside chapters)."""
        return [c for c in self.contents if isinstance(c, BookContentPage)]


ListBooksResult = ListResult[BookSummary]


class CreateBookArgs(ArgsModel):
    name: str
    description: str | None = None
    description_html: str | None = None
    default_template_id: int | None = None
    tags: list[Tag] | None = None


class UpdateBookArgs(ArgsModel):
    name: str | None = None
    description: str | None = None
    description_html: str | None = None
    default_template_id: int | None = None
    tags: list[Tag] | None = None
