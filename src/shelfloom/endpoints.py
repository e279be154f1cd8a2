"""BookStack API endpoint paths and request URI construction.

Paths are kept relative (no leading slash) so that they resolve beneath the
configured API root, e.g. ``https://wiki.example.org/api/`` + ``books``.
"""

from collections.abc import Sequence
from typing import Any
from urllib.parse import urljoin

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Resource paths ---
DOCS = "docs.json"
SYSTEM = "system"
ATTACHMENTS = "attachments"
BOOKS = "books"
CHAPTERS = "chapters"
PAGES = "pages"
SHELVES = "shelves"
IMAGE_GALLERY = "image-gallery"
SEARCH = "search"
USERS = "users"
ROLES = "roles"
CONTENT_PERMISSIONS = "content-permissions"
RECYCLE_BIN = "recycle-bin"
AUDIT_LOG = "audit-log"
IMPORTS = "imports"


class Filter(BaseModel):
    """A single listing filter, serialized as ``filter[<field>]=<expr>``.

    ``field`` may carry an operator suffix understood by BookStack, such as
    ``name:like`` or ``id:gt``.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    expr: str


class ListingOptions(BaseModel):
    """Paging, sorting and filtering for list endpoints.

    Sort keys are field names, optionally prefixed with ``+`` (ascending) or
    ``-`` (descending). Filters and sorts are sent in the order given.
    """

    model_config = ConfigDict(frozen=True)

    offset: int | None = Field(default=None, ge=0)
    count: int | None = Field(default=None, ge=0)
    sorts: tuple[str, ...] = ()
    filters: tuple[Filter, ...] = ()

    @field_validator("filters", mode="before")
    @classmethod
    def coerce_filter_pairs(cls, v: Any) -> Any:
        """Accept ``(field, expr)`` pairs alongside ``Filter`` instances."""
        if v is None:
            return ()
        return tuple(
            Filter(field=item[0], expr=item[1])
            if isinstance(item, tuple | list)
            else item
            for item in v
        )


class SearchOptions(BaseModel):
    """Arguments for the search endpoint.

    ``query`` is sent as-is; escaping of BookStack search syntax (for example
    ``{type:page}`` tags) is left to the caller.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    page: int | None = Field(default=None, ge=1)
    count: int | None = Field(default=None, ge=1)


def _listing_query(options: ListingOptions) -> list[str]:
    parts: list[str] = []
    if options.offset is not None:
        parts.append(f"offset={options.offset}")
    if options.count is not None:
        parts.append(f"count={options.count}")
    parts.extend(f"sort={sort}" for sort in options.sorts)
    parts.extend(f"filter[{f.field}]={f.expr}" for f in options.filters)
    return parts


def _search_query(options: SearchOptions) -> list[str]:
    parts = [f"query={options.query}"]
    if options.page is not None:
        parts.append(f"page={options.page}")
    if options.count is not None:
        parts.append(f"count={options.count}")
    return parts


def resolve_endpoint(
    path: str,
    base_url: str,
    options: ListingOptions | SearchOptions | None = None,
) -> str:
    """Build the absolute request URI for an API path.

    The path is joined onto ``base_url`` with standard relative reference
    resolution, so a base ending in ``/`` gets the path appended while a base
    without it has its last segment replaced. Query parameters are written in a
    fixed order and are not escaped.

    Args:
        path: Relative resource path, e.g. ``"books"`` or ``"books/3"``.
        base_url: Absolute API root.
        options: Optional listing or search options.

    Returns:
        str: The absolute request URI.
    """
    parts: Sequence[str] = ()
    if isinstance(options, ListingOptions):
        parts = _listing_query(options)
    elif isinstance(options, SearchOptions):
        parts = _search_query(options)

    relative = f"{path}?{'&'.join(parts)}" if parts else path
    return urljoin(base_url, relative)


def content_permissions_path(content_type: str, content_id: int) -> str:
    """Path of the permissions resource for a shelf, book, chapter or page."""
    return f"{CONTENT_PERMISSIONS}/{content_type}/{content_id}"
