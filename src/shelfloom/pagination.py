"""Lazy enumeration of whole BookStack collections.

List endpoints return one page at a time (``offset``/``count`` in, ``data``
and ``total`` out). ``enumerate_all`` walks such an endpoint from offset 0
until every item has been seen, yielding items as pages arrive. Each page is
fetched through ``try_call`` so throttling is waited out transparently.
"""

from collections.abc import AsyncIterator
from typing import Any

from .constants import DEFAULT_BATCH_SIZE
from .log_config import logger
from .retry import try_call
from .types import PageFetcher, RateLimitHook


async def enumerate_all(
    fetch_page: PageFetcher,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_attempts: int | None = None,
    on_rate_limited: RateLimitHook | None = None,
) -> AsyncIterator[Any]:
    """Yield every item of an offset-paged collection, in server order.

    Stops after a page with no items, or once the offset reaches the
    ``total`` reported by the latest page.

    Args:
        fetch_page: Called with ``(offset, batch_size)`` for each page.
        batch_size: Number of items requested per page.
        max_attempts: Attempt cap per page while rate limited.
        on_rate_limited: Hook passed on to ``try_call``.

    Yields:
        The items of each page, one by one.
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be greater than 0")

    offset = 0
    while True:
        current = offset
        page = await try_call(
            lambda: fetch_page(current, batch_size),
            max_attempts=max_attempts,
            on_rate_limited=on_rate_limited,
        )
        items = page.data
        logger.debug(
            f"Fetched {len(items)} items at offset {current} (total {page.total})"
        )
        for item in items:
            yield item

        offset += len(items)
        if not items or page.total <= offset:
            break


async def enumerate_pages(
    fetch_page: PageFetcher,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_attempts: int | None = None,
    on_rate_limited: RateLimitHook | None = None,
) -> AsyncIterator[Any]:
    """Yield every item of a page-numbered collection, such as search results.

    ``fetch_page`` is called with ``(page_number, batch_size)`` where page
    numbers start at 1. Stops after an empty page, or once the number of
    items seen reaches the reported ``total``.
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be greater than 0")

    page_number = 1
    seen = 0
    while True:
        current = page_number
        page = await try_call(
            lambda: fetch_page(current, batch_size),
            max_attempts=max_attempts,
            on_rate_limited=on_rate_limited,
        )
        items = page.data
        for item in items:
            yield item

        seen += len(items)
        page_number += 1
        if not items or page.total <= seen:
            break
