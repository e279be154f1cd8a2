"""Client for the BookStack recycle bin endpoint."""

from ..endpoints import RECYCLE_BIN
from ..log_config import logger
from ..models import ListRecycleBinResult, RestoreRecycleItemResult
from ..types import ResponseKind
from .base_client import BaseResourceClient, ListableMixin


class RecycleBinClient(ListableMixin, BaseResourceClient):
    """Client for deleted content awaiting restore or permanent removal.

    Listed entries carry the deleted item decoded according to its kind
    (shelf, book, chapter or page).
    """

    _entity_path: str = RECYCLE_BIN
    _list_model = ListRecycleBinResult

    async def restore(self, recycle_id: int) -> RestoreRecycleItemResult:
        """Restore a deleted item, along with the children deleted with it."""
        return await self._api_client.request(
            "PUT",
            self._item_path(recycle_id),
            json={},
            model=RestoreRecycleItemResult,
        )

    async def destroy(self, recycle_id: int) -> None:
        """Permanently delete an item from the recycle bin."""
        logger.info(f"Permanently destroying recycle bin entry {recycle_id}")
        await self._api_client.request(
            "DELETE", self._item_path(recycle_id), kind=ResponseKind.EMPTY
        )
