"""Base Pydantic models shared across BookStack API entities and responses.

This module defines the common model configuration, the small value types
reused by many resources (tags, user references), the generic listing
envelope returned by every list endpoint, and the tolerant timestamp type
used by the image gallery.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

ItemType = TypeVar("ItemType")


class ApiModel(BaseModel):
    """Base for all response models.

    Unknown fields returned by newer BookStack versions are kept rather than
    rejected.
    """

    model_config = ConfigDict(extra="allow")


class ArgsModel(BaseModel):
    """Base for request bodies. Fields left as None are not sent."""

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def _parse_ambiguous_time(value: Any) -> Any:
    """Parse ISO 8601 timestamps and BookStack's zone-less ``YYYY-MM-DD HH:MM:SS``.

    Zone-less values are taken to be UTC.
    """
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


AmbiguousDateTime = Annotated[datetime, BeforeValidator(_parse_ambiguous_time)]


def variant_tag(tag: str) -> Any:
    """A ``type`` field that reads a non-string value as ``tag``.

    Used by variants of families with a default tag, so a payload whose
    discriminator is present but not a string still decodes.
    """
    return Annotated[
        str, BeforeValidator(lambda value: value if isinstance(value, str) else tag)
    ]


class Tag(ArgsModel):
    """A name/value tag as sent when creating or updating content."""

    name: str
    value: str = ""


class ContentTag(ApiModel):
    """A tag attached to a shelf, book, chapter or page, with its display order."""

    name: str
    value: str = ""
    order: int = 0


class User(ApiModel):
    """Short user reference embedded in other resources."""

    id: int
    name: str
    slug: str | None = None


class ListResult(ApiModel, Generic[ItemType]):
    """Envelope of every listing endpoint: one page of items plus the total count.

    Attributes:
        data: The items of the requested page, in server order.
        total: Number of items matching the listing across all pages.
    """

    data: list[ItemType]
    total: int


def form_fields(body: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a JSON-style body into bracketed multipart form fields.

    ``{"tags": [{"name": "a"}], "books": [3]}`` becomes
    ``{"tags[0][name]": "a", "books[0]": "3"}``. Booleans are sent as ``1``/``0``.
    """
    fields: dict[str, str] = {}
    for key, value in body.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            fields.update(form_fields(value, name))
        elif isinstance(value, list | tuple):
            fields.update(form_fields(dict(enumerate(value)), name))
        elif isinstance(value, bool):
            fields[name] = "1" if value else "0"
        else:
            fields[name] = str(value)
    return fields
