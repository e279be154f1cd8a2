"""Pydantic models for BookStack shelves."""

from datetime import datetime

from pydantic import Field

from .base import ApiModel, ArgsModel, ContentTag, ListResult, Tag, User


class ShelfCoverSummary(ApiModel):
    id: int
    name: str
    url: str


class ShelfCover(ApiModel):
    id: int
    name: str
    type: str
    uploaded_to: int
    path: str
    url: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int


class ShelfSummary(ApiModel):
    """A shelf as it appears in the shelf listing."""

    id: int
    name: str
    slug: str
    description: str = ""
    cover: ShelfCoverSummary | None = None
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class ShelfItem(ApiModel):
    """A shelf as returned by create and update."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    tags: list[ContentTag] | None = None
    cover: ShelfCover | None = None
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class ShelfContentBook(ApiModel):
    id: int
    name: str
    slug: str
    description: str = ""
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int


class ReadShelfResult(ApiModel):
    """A shelf read in full, including the books placed on it."""

    id: int
    name: str
    slug: str
    description: str = ""
    description_html: str = ""
    books: list[ShelfContentBook] = Field(default_factory=list)
    tags: list[ContentTag] | None = None
    cover: ShelfCover | None = None
    created_at: datetime
    updated_at: datetime
    created_by: User
    updated_by: User
    owned_by: User


ListShelvesResult = ListResult[ShelfSummary]


class CreateShelfArgs(ArgsModel):
    name: str
    description: str | None = None
    description_html: str | None = None
    books: list[int] | None = None
    tags: list[Tag] | None = None


class UpdateShelfArgs(ArgsModel):
    """Fields to change on a shelf. ``books`` replaces the whole book list."""

    name: str | None = None
    description: str | None = None
    description_html: str | None = None
    books: list[int] | None = None
    tags: list[Tag] | None = None
