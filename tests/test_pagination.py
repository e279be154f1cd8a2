"""Tests for enumerating offset-paged and page-numbered collections."""

import asyncio
import math
from unittest.mock import AsyncMock, MagicMock

import pytest

from shelfloom.exceptions import DecodeError, RateLimitedError
from shelfloom.models import ListResult
from shelfloom.pagination import enumerate_all, enumerate_pages


def offset_source(total: int, *, shrink_to: int | None = None):
    """A fake list endpoint over ``range(total)`` that records its calls."""
    calls: list[tuple[int, int]] = []

    async def fetch_page(offset: int, count: int) -> ListResult[int]:
        calls.append((offset, count))
        reported = total if shrink_to is None or not calls[:-1] else shrink_to
        return ListResult[int](
            data=list(range(total))[offset : offset + count], total=reported
        )

    return fetch_page, calls


async def collect(iterator) -> list:
    return [item async for item in iterator]


@pytest.mark.asyncio
@pytest.mark.parametrize(("total", "batch"), [(0, 3), (1, 3), (7, 3), (9, 3), (500, 500)])
async def test_yields_every_item_in_order_with_minimal_fetches(total: int, batch: int):
    fetch_page, calls = offset_source(total)

    items = await collect(enumerate_all(fetch_page, batch_size=batch))

    assert items == list(range(total))
    assert len(calls) == max(1, math.ceil(total / batch))
    assert [offset for offset, _ in calls] == list(range(0, max(total, 1), batch))
    assert all(count == batch for _, count in calls)


@pytest.mark.asyncio
async def test_stops_on_empty_page_even_if_total_says_more():
    fetch_page = AsyncMock(
        side_effect=[
            ListResult[int](data=[1, 2], total=10),
            ListResult[int](data=[], total=10),
        ]
    )
    assert await collect(enumerate_all(fetch_page, batch_size=2)) == [1, 2]
    assert fetch_page.await_count == 2


@pytest.mark.asyncio
async def test_stops_when_total_shrinks_below_offset():
    fetch_page, calls = offset_source(10, shrink_to=3)
    items = await collect(enumerate_all(fetch_page, batch_size=4))
    assert items == [0, 1, 2, 3, 4, 5, 6, 7]
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_each_enumeration_starts_from_offset_zero():
    fetch_page, calls = offset_source(4)
    iterator = enumerate_all(fetch_page, batch_size=3)
    assert await iterator.__anext__() == 0
    await iterator.aclose()

    assert await collect(enumerate_all(fetch_page, batch_size=3)) == [0, 1, 2, 3]
    assert [offset for offset, _ in calls] == [0, 0, 3]


@pytest.mark.asyncio
async def test_pages_are_fetched_lazily():
    fetch_page, calls = offset_source(10)
    iterator = enumerate_all(fetch_page, batch_size=5)
    assert calls == []
    await iterator.__anext__()
    assert len(calls) == 1
    await iterator.aclose()


@pytest.mark.asyncio
async def test_rate_limited_page_is_retried(monkeypatch):
    monkeypatch.setattr(asyncio, "sleep", AsyncMock())
    fetch_page = AsyncMock(
        side_effect=[
            ListResult[int](data=[1, 2], total=3),
            RateLimitedError(180, 1, "Too Many Requests"),
            ListResult[int](data=[3], total=3),
        ]
    )
    hook = MagicMock()

    items = await collect(
        enumerate_all(fetch_page, batch_size=2, on_rate_limited=hook)
    )

    assert items == [1, 2, 3]
    hook.assert_called_once()
    assert fetch_page.await_args_list[1].args == (2, 2)
    assert fetch_page.await_args_list[2].args == (2, 2)


@pytest.mark.asyncio
async def test_other_failures_end_enumeration():
    fetch_page = AsyncMock(
        side_effect=[ListResult[int](data=[1], total=5), DecodeError("bad page")]
    )
    seen = []
    with pytest.raises(DecodeError):
        async for item in enumerate_all(fetch_page, batch_size=1):
            seen.append(item)
    assert seen == [1]


@pytest.mark.asyncio
async def test_rejects_non_positive_batch_size():
    with pytest.raises(ValueError):
        await collect(enumerate_all(AsyncMock(), batch_size=0))


@pytest.mark.asyncio
async def test_page_numbered_enumeration():
    pages = {
        1: ListResult[str](data=["a", "b"], total=5),
        2: ListResult[str](data=["c", "d"], total=5),
        3: ListResult[str](data=["e"], total=5),
    }
    calls = []

    async def fetch_page(page: int, count: int) -> ListResult[str]:
        calls.append((page, count))
        return pages[page]

    items = await collect(enumerate_pages(fetch_page, batch_size=2))

    assert items == ["a", "b", "c", "d", "e"]
    assert calls == [(1, 2), (2, 2), (3, 2)]


@pytest.mark.asyncio
async def test_page_numbered_enumeration_stops_on_empty_page():
    fetch_page = AsyncMock(
        side_effect=[
            ListResult[str](data=["a"], total=99),
            ListResult[str](data=[], total=99),
        ]
    )
    assert await collect(enumerate_pages(fetch_page, batch_size=1)) == ["a"]
