"""Client for the BookStack content-permissions endpoint."""

from ..constants import ContentType
from ..endpoints import CONTENT_PERMISSIONS, content_permissions_path
from ..models import ContentPermissionsItem, UpdateContentPermissionsArgs
from .base_client import BaseResourceClient


class ContentPermissionsClient(BaseResourceClient):
    """Client for the permissions of individual shelves, books, chapters and pages.

    Items are addressed by content type and id, e.g. ``("book", 3)``.
    """

    _entity_path: str = CONTENT_PERMISSIONS

    async def read(
        self, content_type: ContentType | str, content_id: int
    ) -> ContentPermissionsItem:
        return await self._api_client.request(
            "GET",
            content_permissions_path(ContentType(content_type).value, content_id),
            model=ContentPermissionsItem,
        )

    async def update(
        self,
        content_type: ContentType | str,
        content_id: int,
        args: UpdateContentPermissionsArgs,
    ) -> ContentPermissionsItem:
        """Change the owner, role entries or fallback permissions of an item.

        Raises:
            ValueError: If ``content_type`` is not a known content type.
        """
        return await self._api_client.request(
            "PUT",
            content_permissions_path(ContentType(content_type).value, content_id),
            json=args.to_body(),
            model=ContentPermissionsItem,
        )

    async def read_shelf(self, shelf_id: int) -> ContentPermissionsItem:
        return await self.read(ContentType.SHELF, shelf_id)

    async def read_book(self, book_id: int) -> ContentPermissionsItem:
        return await self.read(ContentType.BOOK, book_id)

    async def read_chapter(self, chapter_id: int) -> ContentPermissionsItem:
        return await self.read(ContentType.CHAPTER, chapter_id)

    async def read_page(self, page_id: int) -> ContentPermissionsItem:
        return await self.read(ContentType.PAGE, page_id)

    async def update_shelf(
        self, shelf_id: int, args: UpdateContentPermissionsArgs
    ) -> ContentPermissionsItem:
        return await self.update(ContentType.SHELF, shelf_id, args)

    async def update_book(
        self, book_id: int, args: UpdateContentPermissionsArgs
    ) -> ContentPermissionsItem:
        return await self.update(ContentType.BOOK, book_id, args)

    async def update_chapter(
        self, chapter_id: int, args: UpdateContentPermissionsArgs
    ) -> ContentPermissionsItem:
        return await self.update(ContentType.CHAPTER, chapter_id, args)

    async def update_page(
        self, page_id: int, args: UpdateContentPermissionsArgs
    ) -> ContentPermissionsItem:
        return await self.update(ContentType.PAGE, page_id, args)
