# tests/resources/test_recycle_bin_client.py
import json

import pytest

from shelfloom.client import BookStackClient
from shelfloom.models import (
    DeletableContentBook,
    DeletableContentPage,
    DeletableContentParentChapter,
    DeletableContentShelf,
    RestoreRecycleItemResult,
)

BASE_URL = "https://wiki.example.org/api/"
TS = "2024-05-01T10:20:30.000000Z"
AUDIT = {
    "created_at": TS,
    "updated_at": TS,
    "created_by": 1,
    "updated_by": 1,
    "owned_by": 1,
}


def entry(entry_id: int, deletable_type: str, deletable: dict) -> dict:
    return {
        "id": entry_id,
        "deleted_by": 1,
        "created_at": TS,
        "updated_at": TS,
        "deletable_type": deletable_type,
        "deletable_id": deletable["id"],
        "deletable": deletable,
    }


@pytest.mark.asyncio
async def test_list_decodes_each_deleted_kind(client: BookStackClient, httpx_mock):
    page = {
        "id": 30,
        "name": "Old page",
        "slug": "old-page",
        "book_id": 1,
        "chapter_id": 2,
        **AUDIT,
        "parent": {
            "id": 2,
            "name": "Chapter",
            "slug": "chapter",
            "type": "chapter",
            "book_id": 1,
            **AUDIT,
        },
    }
    httpx_mock.add_response(
        url=f"{BASE_URL}recycle-bin",
        json={
            "data": [
                entry(1, "bookshelf", {"id": 10, "name": "S", "slug": "s", **AUDIT}),
                entry(2, "book", {"id": 20, "name": "B", "slug": "b", **AUDIT}),
                entry(3, "page", page),
            ],
            "total": 3,
        },
    )

    result = await client.recycle_bin.list()

    kinds = [type(item.deletable) for item in result.data]
    assert kinds == [DeletableContentShelf, DeletableContentBook, DeletableContentPage]
    assert isinstance(result.data[2].deletable.parent, DeletableContentParentChapter)
    assert result.data[2].deletable_type == "page"


@pytest.mark.asyncio
async def test_restore_and_destroy(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(
        method="PUT", url=f"{BASE_URL}recycle-bin/3", json={"restore_count": 2}
    )
    httpx_mock.add_response(
        method="DELETE", url=f"{BASE_URL}recycle-bin/4", json={"delete_count": 1}
    )

    restored = await client.recycle_bin.restore(3)
    destroyed = await client.recycle_bin.destroy(4)

    assert restored == RestoreRecycleItemResult(restore_count=2)
    assert destroyed is None
    put, _ = httpx_mock.get_requests()
    assert json.loads(put.read()) == {}
