"""Client for the BookStack imports endpoint.

An import is a BookStack ZIP export that has been uploaded but not yet turned
into content. Running it creates the book, chapter or page it describes.
"""

from ..endpoints import IMPORTS
from ..log_config import logger
from ..models import (
    ImportsItem,
    ImportsItemDetails,
    ListImportsResult,
    RunImportsArgs,
    RunImportsResult,
)
from ..types import FileInput
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ListableMixin,
    ReadableMixin,
    file_part,
)


class ImportsClient(ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient):
    """Client for pending ZIP imports. `read` includes the parsed ZIP details."""

    _entity_path: str = IMPORTS
    _list_model = ListImportsResult
    _read_model = ImportsItemDetails

    async def create(self, file: FileInput) -> ImportsItem:
        """Upload a BookStack ZIP export as a pending import."""
        return await self._api_client.request(
            "POST", self._entity_path, files={"file": file_part(file)}, model=ImportsItem
        )

    async def run(
        self, import_id: int, args: RunImportsArgs | None = None
    ) -> RunImportsResult:
        """Run a pending import.

        Args:
            import_id: The import to run.
            args: Parent to import into. Chapter and page imports need one;
                book imports do not.
        """
        logger.info(f"Running import {import_id}")
        body = args.to_body() if args is not None else {}
        return await self._api_client.request(
            "POST", self._item_path(import_id), json=body, model=RunImportsResult
        )
