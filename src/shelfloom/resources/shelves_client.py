"""Client for the BookStack shelves endpoint."""

from ..endpoints import SHELVES
from ..models import (
    CreateShelfArgs,
    ListShelvesResult,
    ReadShelfResult,
    ShelfItem,
    UpdateShelfArgs,
)
from ..types import FileInput
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ListableMixin,
    ReadableMixin,
)


class ShelvesClient(ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient):
    """Client for shelves.

    The ``books`` of the create and update arguments is the ordered list of
    book ids on the shelf; on update it replaces the current list.
    """

    _entity_path: str = SHELVES
    _list_model = ListShelvesResult
    _read_model = ReadShelfResult

    async def create(
        self, args: CreateShelfArgs, image: FileInput | None = None
    ) -> ShelfItem:
        return await self._send_form(
            self._entity_path, args, {"image": image}, ShelfItem
        )

    async def update(
        self, shelf_id: int, args: UpdateShelfArgs, image: FileInput | None = None
    ) -> ShelfItem:
        return await self._send_form(
            self._item_path(shelf_id), args, {"image": image}, ShelfItem, update=True
        )
