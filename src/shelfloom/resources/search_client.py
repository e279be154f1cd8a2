"""Client for the BookStack search endpoint."""

from collections.abc import AsyncIterator

from ..endpoints import SEARCH, SearchOptions
from ..log_config import logger
from ..models import SearchContent, SearchResult
from .base_client import BaseResourceClient


class SearchClient(BaseResourceClient):
    """Client for full-text search across shelves, books, chapters and pages.

    Results are page-numbered rather than offset-paged.
    """

    _entity_path: str = SEARCH

    async def search(self, options: SearchOptions) -> SearchResult:
        """Run one search request.

        Args:
            options: The query in BookStack search syntax, plus optional page
                number and page size.

        Returns:
            SearchResult: One page of typed results and the total hit count.
        """
        return await self._api_client.request(
            "GET", self._entity_path, options=options, model=SearchResult
        )

    async def iterate(
        self, options: SearchOptions, *, batch_size: int | None = None
    ) -> AsyncIterator[SearchContent]:
        """Iterate through every result of a query, page by page.

        ``options.page`` and ``options.count`` are ignored; paging is driven
        from page 1 with ``batch_size`` results per page.
        """
        logger.info(f"Iterating search results for query '{options.query}'")

        async def fetch_page(page: int, count: int) -> SearchResult:
            return await self.search(
                SearchOptions(query=options.query, page=page, count=count)
            )

        async for item in self._api_client.enumerate_pages(
            fetch_page, batch_size=batch_size
        ):
            yield item
