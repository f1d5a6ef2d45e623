"""Cache key builders for consistent key formatting."""

import hashlib
import json

from azquery.query.builder import QueryRequest


class CacheKeys:
    """Cache key builders for consistent key formatting."""

    PREFIX = "azquery"

    @classmethod
    def search(cls, index_name: str, request: QueryRequest) -> str:
        """Key for the raw response of a search request on an index."""
        # Hash the request body for consistent key length
        body = json.dumps(request.to_search_body(), sort_keys=True)
        hash_value = hashlib.sha256(body.encode()).hexdigest()[:16]
        return f"{cls.PREFIX}:search:{index_name}:{hash_value}"

    @classmethod
    def index_pattern(cls, index_name: str) -> str:
        """Glob pattern matching every cached search on an index."""
        return f"{cls.PREFIX}:search:{index_name}:*"
