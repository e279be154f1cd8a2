"""Client for the BookStack pages endpoint."""

from ..endpoints import PAGES
from ..models import (
    CreatePageArgs,
    ListPagesResult,
    PageItem,
    ReadPageResult,
    UpdatePageArgs,
)
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ExportableMixin,
    ListableMixin,
    ReadableMixin,
)


class PagesClient(
    ListableMixin, ReadableMixin, DeletableMixin, ExportableMixin, BaseResourceClient
):
    """Client for pages.

    `read` returns the rendered ``html`` and, for markdown pages, the
    ``markdown`` source.
    """

    _entity_path: str = PAGES
    _list_model = ListPagesResult
    _read_model = ReadPageResult

    async def create(self, args: CreatePageArgs) -> PageItem:
        return await self._api_client.request(
            "POST", self._entity_path, json=args.to_body(), model=PageItem
        )

    async def update(self, page_id: int, args: UpdatePageArgs) -> PageItem:
        return await self._api_client.request(
            "PUT", self._item_path(page_id), json=args.to_body(), model=PageItem
        )
