"""Base class and reusable mixins for the BookStack resource clients.

Most BookStack resources share the same shape: a paged listing under
``<resource>``, single items under ``<resource>/<id>``, and for books, chapters
and pages an ``export/<format>`` sub-resource. The mixins here implement those
operations once. A concrete client inherits the ones its resource supports and
sets the path and models they need.

To use the mixins, a class must:
1. Inherit from `BaseResourceClient`.
2. Define `_entity_path: str`, the resource path relative to the API root.
3. Define `_list_model` for `ListableMixin` and `_read_model` for
   `ReadableMixin`.
"""

from collections.abc import AsyncIterator, Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel

from ..endpoints import Filter, ListingOptions
from ..log_config import logger
from ..models.base import ArgsModel, form_fields
from ..types import FileInput, ResponseKind

if TYPE_CHECKING:
    from ..client import BookStackClient


def file_part(file: FileInput) -> tuple[str, bytes]:
    """Turn a path or ``(filename, content)`` pair into an httpx file tuple."""
    if isinstance(file, tuple):
        return file
    path = Path(file)
    return path.name, path.read_bytes()


class ResourceClientProtocol(Protocol):
    """Attributes the resource mixins rely on."""

    _api_client: "BookStackClient"
    _entity_path: str
    _list_model: type[BaseModel]
    _read_model: type[BaseModel]

    def _item_path(self, item_id: int) -> str: ...


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The `BookStackClient` used for making requests.
        _entity_path: The resource path relative to the API root (e.g. ``books``).
    """

    _entity_path: str = ""

    def __init__(self, api_client: "BookStackClient"):
        """Initialize the base resource client.

        Args:
            api_client: An instance of BookStackClient.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")

    def _item_path(self, item_id: int) -> str:
        return f"{self._entity_path}/{item_id}"

    async def _send_form(
        self,
        path: str,
        body: ArgsModel,
        files: Mapping[str, FileInput | None],
        model: type[BaseModel],
        *,
        update: bool = False,
    ) -> Any:
        """Send ``body`` as multipart form fields together with ``files``.

        BookStack only parses multipart bodies on POST, so updates are sent as
        POST with the ``_method=PUT`` override field. Without any file the body
        goes out as plain JSON (POST, or PUT for updates).
        """
        parts = {name: file_part(file) for name, file in files.items() if file}
        if not parts:
            return await self._api_client.request(
                "PUT" if update else "POST", path, json=body.to_body(), model=model
            )

        fields = form_fields(body.to_body())
        if update:
            fields["_method"] = "PUT"
        return await self._api_client.request(
            "POST", path, data=fields, files=parts, model=model
        )


class ListableMixin:
    """Provides `list()` for one page and `iterate()` for the whole collection."""

    async def list(
        self: ResourceClientProtocol, options: ListingOptions | None = None
    ) -> Any:
        """Fetch one page of the listing.

        Args:
            options: Paging, sorting and filtering; None lists with server defaults.

        Returns:
            Any: The resource's list result, with ``data`` and ``total``.
        """
        return await self._api_client.request(
            "GET", self._entity_path, options=options, model=self._list_model
        )

    async def iterate(
        self: ResourceClientProtocol,
        *,
        filters: Iterable[Filter | tuple[str, str]] = (),
        sorts: Iterable[str] = (),
        batch_size: int | None = None,
    ) -> AsyncIterator[Any]:
        """Iterate through every item of the listing, page by page.

        Pages are fetched through the client's rate-limit governor, so
        throttling is waited out rather than raised.

        Args:
            filters: Filters as `Filter` instances or ``(field, expr)`` pairs.
            sorts: Sort keys, optionally prefixed with ``+`` or ``-``.
            batch_size: Items per page; defaults to `settings.batch_count`.

        Yields:
            Any: Individual list items in server order.
        """
        filter_tuple = tuple(filters)
        sort_tuple = tuple(sorts)
        logger.info(
            f"Iterating {self._entity_path}: sorts={sort_tuple}, filters={filter_tuple}"
        )

        async def fetch_page(offset: int, count: int) -> Any:
            options = ListingOptions(
                offset=offset, count=count, sorts=sort_tuple, filters=filter_tuple
            )
            return await self._api_client.request(
                "GET", self._entity_path, options=options, model=self._list_model
            )

        async for item in self._api_client.enumerate(fetch_page, batch_size=batch_size):
            yield item


class ReadableMixin:
    """Provides `read()` for a single item by id."""

    async def read(self: ResourceClientProtocol, item_id: int) -> Any:
        return await self._api_client.request(
            "GET", self._item_path(item_id), model=self._read_model
        )


class DeletableMixin:
    """Provides `delete()` for a single item by id."""

    async def delete(self: ResourceClientProtocol, item_id: int) -> None:
        """Delete an item. The response body, if any, is ignored."""
        logger.info(f"Deleting {self._entity_path} item {item_id}")
        await self._api_client.request(
            "DELETE", self._item_path(item_id), kind=ResponseKind.EMPTY
        )


class ExportableMixin:
    """Provides the ``export/<format>`` downloads of books, chapters and pages."""

    async def _export(
        self: ResourceClientProtocol, item_id: int, fmt: str, kind: ResponseKind
    ) -> Any:
        return await self._api_client.request(
            "GET", f"{self._item_path(item_id)}/export/{fmt}", kind=kind
        )

    async def export_html(self, item_id: int) -> str:
        """Export as a single self-contained HTML document."""
        return await self._export(item_id, "html", ResponseKind.TEXT)  # type: ignore[misc]

    async def export_plaintext(self, item_id: int) -> str:
        return await self._export(item_id, "plaintext", ResponseKind.TEXT)  # type: ignore[misc]

    async def export_markdown(self, item_id: int) -> str:
        return await self._export(item_id, "markdown", ResponseKind.TEXT)  # type: ignore[misc]

    async def export_pdf(self, item_id: int) -> bytes:
        return await self._export(item_id, "pdf", ResponseKind.BINARY)  # type: ignore[misc]

    async def export_zip(self, item_id: int) -> bytes:
        """Export as a BookStack ZIP, the format accepted by the imports endpoint."""
        return await self._export(item_id, "zip", ResponseKind.BINARY)  # type: ignore[misc]
