"""Client for the BookStack books endpoint."""

from ..endpoints import BOOKS
from ..log_config import logger
from ..models import (
    BookItem,
    CreateBookArgs,
    ListBooksResult,
    ReadBookResult,
    UpdateBookArgs,
)
from ..types import FileInput
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ExportableMixin,
    ListableMixin,
    ReadableMixin,
)


class BooksClient(
    ListableMixin, ReadableMixin, DeletableMixin, ExportableMixin, BaseResourceClient
):
    """Client for books.

    `list`, `iterate`, `read`, `delete` and the exports come from the mixins.
    `read` returns a `ReadBookResult` whose ``contents`` mixes chapters and
    pages in book order.
    """

    _entity_path: str = BOOKS
    _list_model = ListBooksResult
    _read_model = ReadBookResult

    async def create(
        self, args: CreateBookArgs, image: FileInput | None = None
    ) -> BookItem:
        """Create a book, optionally with a cover image.

        Args:
            args: The new book's fields and tags.
            image: Optional cover image, uploaded as the ``image`` field.
        """
        logger.info(f"Creating book '{args.name}'")
        return await self._send_form(
            self._entity_path, args, {"image": image}, BookItem
        )

    async def update(
        self, book_id: int, args: UpdateBookArgs, image: FileInput | None = None
    ) -> BookItem:
        """Update a book, optionally replacing its cover image."""
        return await self._send_form(
            self._item_path(book_id), args, {"image": image}, BookItem, update=True
        )
