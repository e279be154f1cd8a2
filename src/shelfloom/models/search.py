"""Pydantic models for BookStack search results.

A search returns books, chapters, pages and shelves in one list; the
``type`` field of each result says which one it is.
"""

from datetime import datetime

from ..variants import VariantFamily
from .base import ApiModel, ContentTag, ListResult


class SearchContentPreview(ApiModel):
    name: str
    content: str


class SearchContentEnvelope(ApiModel):
    """Short reference to the book or chapter containing a result."""

    id: int
    name: str
    slug: str


class SearchContentBook(ApiModel):
    id: int
    name: str
    slug: str
    type: str = "book"
    url: str
    tags: list[ContentTag] | None = None
    preview_html: SearchContentPreview | None = None
    created_at: datetime
    updated_at: datetime


class SearchContentShelf(ApiModel):
    id: int
    name: str
    slug: str
    type: str = "bookshelf"
    url: str
    tags: list[ContentTag] | None = None
    preview_html: SearchContentPreview | None = None
    created_at: datetime
    updated_at: datetime


class SearchContentChapter(ApiModel):
    id: int
    name: str
    slug: str
    type: str = "chapter"
    url: str
    tags: list[ContentTag] | None = None
    preview_html: SearchContentPreview | None = None
    created_at: datetime
    updated_at: datetime
    book_id: int
    priority: int = 0
    book: SearchContentEnvelope | None = None


class SearchContentPage(ApiModel):
    id: int
    name: str
    slug: str
    type: str = "page"
    url: str
    tags: list[ContentTag] | None = None
    preview_html: SearchContentPreview | None = None
    created_at: datetime
    updated_at: datetime
    book_id: int
    chapter_id: int | None = None
    draft: bool = False
    template: bool = False
    priority: int = 0
    book: SearchContentEnvelope | None = None
    chapter: SearchContentEnvelope | None = None


SEARCH_CONTENTS: VariantFamily[
    SearchContentBook | SearchContentChapter | SearchContentPage | SearchContentShelf
] = VariantFamily(
    "search result",
    {
        "book": SearchContentBook,
        "chapter": SearchContentChapter,
        "page": SearchContentPage,
        "bookshelf": SearchContentShelf,
    },
)
SearchContent = SEARCH_CONTENTS.annotation


class SearchResult(ListResult[SearchContent]):
    """One page of search results, in relevance order."""

    def books(self) -> list[SearchContentBook]:
        return [c for c in self.data if isinstance(c, SearchContentBook)]

    def chapters(self) -> list[SearchContentChapter]:
        return [c for c in self.data if isinstance(c, SearchContentChapter)]

    def pages(self) -> list[SearchContentPage]:
        return [c for c in self.data if isinstance(c, SearchContentPage)]

    def shelves(self) -> list[SearchContentShelf]:
        return [c for c in self.data if isinstance(c, SearchContentShelf)]
