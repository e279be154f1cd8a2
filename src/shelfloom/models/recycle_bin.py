"""Pydantic models for the BookStack recycle bin.

Each recycle-bin entry wraps one deleted item (shelf, book, chapter or page)
in its ``deletable`` field. The envelope's ``deletable_type`` says which kind
it is, because deleted items do not necessarily carry a ``type`` of their own.
Page and chapter deletables also embed their parent, which is tagged by its
own ``type`` field.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, model_validator

from ..variants import VariantFamily
from .base import ApiModel, ListResult


class DeletableContentParentBook(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int
    type: str = "book"
    description: str = ""
    default_template_id: int | None = None


class DeletableContentParentChapter(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int
    type: str = "chapter"
    description: str = ""
    default_template_id: int | None = None
    book_id: int
    priority: int = 0


DELETABLE_PARENTS: VariantFamily[
    DeletableContentParentBook | DeletableContentParentChapter
] = VariantFamily(
    "deleted item parent",
    {"book": DeletableContentParentBook, "chapter": DeletableContentParentChapter},
)
DeletableContentParent = DELETABLE_PARENTS.annotation


class DeletableContentShelf(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int | None = None
    description: str = ""


class DeletableContentBook(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int | None = None
    description: str = ""
    default_template_id: int | None = None
    chapters_count: int = 0
    pages_count: int = 0


class DeletableContentChapter(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int | None = None
    description: str = ""
    default_template_id: int | None = None
    book_id: int
    parent: DeletableContentParentBook
    priority: int = 0
    pages_count: int = 0


class DeletableContentPage(ApiModel):
    id: int
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime
    created_by: int
    updated_by: int
    owned_by: int | None = None
    book_id: int
    chapter_id: int | None = None
    parent: DeletableContentParent
    draft: bool = False
    template: bool = False
    editor: str = ""
    priority: int = 0
    revision_count: int = 0


DELETABLE_CONTENTS: VariantFamily[
    DeletableContentBook
    | DeletableContentChapter
    | DeletableContentPage
    | DeletableContentShelf
] = VariantFamily(
    "deleted item",
    {
        "book": DeletableContentBook,
        "chapter": DeletableContentChapter,
        "page": DeletableContentPage,
        "bookshelf": DeletableContentShelf,
    },
)
DeletableContent = DELETABLE_CONTENTS.annotation


class RecycleItemFrame(BaseModel):
    """The envelope fields of a recycle-bin entry, without the deleted item."""

    id: int
    deletable_type: str
    deletable_id: int
    deleted_by: int
    created_at: datetime
    updated_at: datetime


class RecycleItem(ApiModel):
    """One entry of the recycle bin."""

    id: int
    deletable_type: str
    deletable_id: int
    deleted_by: int
    deletable: DeletableContent
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def decode_deletable(cls, data: Any) -> Any:
        """Decode the envelope, then the deleted item according to its kind.

        The incoming mapping is read twice and never modified: once for the
        envelope fields and once for the nested ``deletable`` object.
        """
        if not isinstance(data, Mapping) or isinstance(
            data.get("deletable"), BaseModel
        ):
            return data
        frame = RecycleItemFrame.model_validate(data)
        if "deletable" not in data:
            raise ValueError("Recycle bin entry has no 'deletable' object")
        content = DELETABLE_CONTENTS.decode(
            data["deletable"], fallback_tag=frame.deletable_type
        )
        return {**data, **frame.model_dump(), "deletable": content}


ListRecycleBinResult = ListResult[RecycleItem]


class RestoreRecycleItemResult(ApiModel):
    restore_count: int
