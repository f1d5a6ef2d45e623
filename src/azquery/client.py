"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from azquery.config import AzquerySettings, get_settings
from azquery.query.builder import QueryBuilder, QueryRequest
from azquery.search.client import AsyncSearchClient
from azquery.search.searcher import Searcher
from azquery.search.shaper import SearchResults

if TYPE_CHECKING:
    from azquery.cache.client import AsyncRedisClient

logger = logging.getLogger(__name__)

DocT = TypeVar("DocT")


class AzqueryClient:
    """
    Main client for the azquery library.

    Wires the search service client, the optional Redis cache and the
    result shaper together from settings.

    Usage:
        async with AzqueryClient() as client:
            request = (
                client.query()
                .set_full_text("coffee")
                .set_filter(where_eq("Town", "London"))
                .include_total_count()
                .build()
            )
            documents, facets, total = await client.search("shops", request)

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: AzquerySettings | None = None,
        *,
        use_cache: bool = True,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Library settings. If not provided, loaded from environment.
            use_cache: Whether to use Redis caching if configured.
        """
        self._settings = settings or get_settings()
        self._use_cache = use_cache
        self._search_client: AsyncSearchClient | None = None
        self._cache: AsyncRedisClient | None = None
        self._searcher: Searcher | None = None

    async def __aenter__(self) -> AzqueryClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        level = "DEBUG" if self._settings.debug else self._settings.log_level.upper()
        logging.getLogger("azquery").setLevel(level)

        self._search_client = AsyncSearchClient(
            self._settings.service_name,
            self._settings.api_key,
            endpoint=self._settings.endpoint,
            api_version=self._settings.api_version,
            timeout=self._settings.timeout,
        )
        logger.info(f"Search client initialized for {self._search_client.base_url}")

        # Initialize cache if available
        if self._use_cache and self._settings.redis_url:
            try:
                from azquery.cache.client import AsyncRedisClient

                cache = AsyncRedisClient(str(self._settings.redis_url))
                await cache.connect()
                self._cache = cache
                logger.info("Redis cache initialized")
            except Exception as e:
                logger.warning(f"Failed to initialize cache: {e}")
                self._cache = None

        self._searcher = Searcher(
            self._search_client,
            cache=self._cache,
            cache_ttl=self._settings.cache_ttl,
        )

    async def close(self) -> None:
        """Close all resources."""
        if self._search_client:
            await self._search_client.close()
            self._search_client = None

        if self._cache:
            await self._cache.close()
            self._cache = None

        self._searcher = None

    def _ensure_initialized(self) -> Searcher:
        """Ensure client is initialized."""
        if self._searcher is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with AzqueryClient() as client:'"
            )
        return self._searcher

    @staticmethod
    def query() -> QueryBuilder:
        """Start building a query."""
        return QueryBuilder()

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
        searcher = self._ensure_initialized()
        return await searcher.search(index_name, request, document_type)

    async def invalidate(self, index_name: str) -> int:
        """Drop cached responses for an index (no-op without a cache)."""
        searcher = self._ensure_initialized()
        return await searcher.invalidate(index_name)


# Convenience function for one-off searches
async def search_index(
    index_name: str,
    request: QueryRequest,
    document_type: type[DocT] | None = None,
    *,
    settings: AzquerySettings | None = None,
) -> SearchResults[Any]:
    """
    Search an index (convenience function).

    For multiple searches, use AzqueryClient to reuse connections.
    """
    async with AzqueryClient(settings, use_cache=False) as client:
        return await client.search(index_name, request, document_type)
