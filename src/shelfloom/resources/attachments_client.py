"""Client for the BookStack attachments endpoint.

Attachments belong to a page (``uploaded_to``) and are either an uploaded file
or an external link. Files are sent as multipart uploads, links as JSON.
"""

from collections.abc import AsyncIterator

from ..endpoints import ATTACHMENTS, Filter
from ..models import (
    AttachmentItem,
    CreateAttachmentArgs,
    CreateLinkAttachmentArgs,
    ListAttachmentsResult,
    ReadAttachmentResult,
    UpdateAttachmentArgs,
    UpdateLinkAttachmentArgs,
)
from ..types import FileInput
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ListableMixin,
    ReadableMixin,
)


class AttachmentsClient(
    ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient
):
    """Client for page attachments."""

    _entity_path: str = ATTACHMENTS
    _list_model = ListAttachmentsResult
    _read_model = ReadAttachmentResult

    async def create_file(
        self, args: CreateAttachmentArgs, file: FileInput
    ) -> AttachmentItem:
        """Upload a file as a new attachment.

        Args:
            args: Attachment name and the id of the page it belongs to.
            file: Path of the file, or a ``(filename, content)`` pair.
        """
        return await self._send_form(
            self._entity_path, args, {"file": file}, AttachmentItem
        )

    async def create_link(self, args: CreateLinkAttachmentArgs) -> AttachmentItem:
        return await self._api_client.request(
            "POST", self._entity_path, json=args.to_body(), model=AttachmentItem
        )

    async def update_file(
        self, attachment_id: int, args: UpdateAttachmentArgs, file: FileInput
    ) -> AttachmentItem:
        """Replace the uploaded file of an attachment, and optionally rename or move it."""
        return await self._send_form(
            self._item_path(attachment_id),
            args,
            {"file": file},
            AttachmentItem,
            update=True,
        )

    async def update_link(
        self, attachment_id: int, args: UpdateLinkAttachmentArgs
    ) -> AttachmentItem:
        return await self._api_client.request(
            "PUT",
            self._item_path(attachment_id),
            json=args.to_body(),
            model=AttachmentItem,
        )

    async def iterate_for_page(
        self, page_id: int, *, batch_size: int | None = None
    ) -> AsyncIterator[AttachmentItem]:
        """Iterate through the attachments of one page."""
        async for item in self.iterate(
            filters=[Filter(field="uploaded_to", expr=str(page_id))],
            batch_size=batch_size,
        ):
            yield item
