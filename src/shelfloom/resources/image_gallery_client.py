"""Client for the BookStack image gallery endpoint."""

from collections.abc import AsyncIterator

from ..endpoints import IMAGE_GALLERY, Filter
from ..models import CreateImageArgs, ImageItem, ListImagesResult, UpdateImageArgs
from ..types import FileInput
from .base_client import (
    BaseResourceClient,
    DeletableMixin,
    ListableMixin,
    ReadableMixin,
)


class ImageGalleryClient(
    ListableMixin, ReadableMixin, DeletableMixin, BaseResourceClient
):
    """Client for gallery and draw.io images uploaded to pages.

    Timestamps of this endpoint come without a zone and are read as UTC.
    """

    _entity_path: str = IMAGE_GALLERY
    _list_model = ListImagesResult
    _read_model = ImageItem

    async def create(self, args: CreateImageArgs, image: FileInput) -> ImageItem:
        """Upload an image to the page ``args.uploaded_to``."""
        return await self._send_form(
            self._entity_path, args, {"image": image}, ImageItem
        )

    async def update(
        self, image_id: int, args: UpdateImageArgs, image: FileInput | None = None
    ) -> ImageItem:
        """Rename an image, and optionally replace its file."""
        return await self._send_form(
            self._item_path(image_id), args, {"image": image}, ImageItem, update=True
        )

    async def iterate_for_page(
        self, page_id: int, *, batch_size: int | None = None
    ) -> AsyncIterator[ImageItem]:
        """Iterate through the images uploaded to one page."""
        async for item in self.iterate(
            filters=[Filter(field="uploaded_to", expr=str(page_id))],
            batch_size=batch_size,
        ):
            yield item
