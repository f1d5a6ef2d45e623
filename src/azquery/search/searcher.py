"""Search execution: request, optional caching and result shaping."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from azquery.cache.decorators import cached
from azquery.cache.keys import CacheKeys
from azquery.search.shaper import SearchResults, shape

if TYPE_CHECKING:
    from azquery.cache.client import AsyncRedisClient
    from azquery.query.builder import QueryRequest
    from azquery.search.client import AsyncSearchClient

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT")


class Searcher:
    """
    Runs built queries against the search service and shapes the results.

    When a cache is given, raw response bodies are cached per index and
    request, so identical requests within the TTL skip the service.
    """

    def __init__(
        self,
        client: AsyncSearchClient,
        cache: AsyncRedisClient | None = None,
        cache_ttl: int = 300,
    ) -> None:
        """
        Initialize the searcher.

        Args:
            client: Search service client
            cache: Optional Redis cache for response bodies
            cache_ttl: Cache TTL in seconds
        """
        self._client = client
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def search(
        self,
        index_name: str,
        request: QueryRequest,
        document_type: type[DocT] | None = None,
    ) -> SearchResults[Any]:
        """
        Search an index.

        Args:
            index_name: Name of the index to search
            request: Built query request
            document_type: Optional type to validate each document into

        Returns:
            Documents, facet labels and total count
        """
        raw = await self._fetch(index_name, request)
        results = shape(raw, document_type)
        logger.debug(
            f"Search on {index_name} returned {len(results.documents)} documents "
            f"(total: {results.total_count})"
        )
        return results

    @cached(CacheKeys.search)
    async def _fetch(self, index_name: str, request: QueryRequest) -> dict[str, Any]:
        return await self._client.search_raw(index_name, request)

    async def invalidate(self, index_name: str) -> int:
        """Drop every cached response for an index."""
        if self._cache is None:
            return 0
        removed = await self._cache.delete_matching(CacheKeys.index_pattern(index_name))
        logger.info(f"Invalidated {removed} cached searches on {index_name}")
        return removed


async def do_search(
    client: AsyncSearchClient,
    index_name: str,
    request: QueryRequest,
    document_type: type[DocT] | None = None,
) -> SearchResults[Any]:
    """Search an index with a client and shape the response (no caching)."""
    envelope = await client.search(index_name, request)
    return shape(envelope, document_type)
