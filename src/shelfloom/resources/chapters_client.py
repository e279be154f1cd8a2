"""Client for the BookStack chapters endpoint."""

from ..endpoints import CHAPTERS
from ..models import (
    ChapterItem,
    CreateChapterArgs,
    ListChaptersResult,
    ReadChapterResult,
    UpdateChapterArgs,
)
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ExportableMixin,
    ListableMixin,
    ReadableMixin,
)


class ChaptersClient(
    ListableMixin, ReadableMixin, DeletableMixin, ExportableMixin, BaseResourceClient
):
    """Client for chapters. Moving a chapter is done by updating its ``book_id``."""

    _entity_path: str = CHAPTERS
    _list_model = ListChaptersResult
    _read_model = ReadChapterResult

    async def create(self, args: CreateChapterArgs) -> ChapterItem:
        return await self._api_client.request(
            "POST", self._entity_path, json=args.to_body(), model=ChapterItem
        )

    async def update(self, chapter_id: int, args: UpdateChapterArgs) -> ChapterItem:
        return await self._api_client.request(
            "PUT", self._item_path(chapter_id), json=args.to_body(), model=ChapterItem
        )
