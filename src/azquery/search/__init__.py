"""Search layer: service client, response models and result shaping."""

from azquery.search.client import (
    DEFAULT_API_VERSION,
    AsyncSearchClient,
    make_client,
)
from azquery.search.models import FacetBucket, ResponseEnvelope, SearchResultEntry
from azquery.search.searcher import Searcher, do_search
from azquery.search.shaper import SearchResults, shape, shape_facets

__all__ = [
    # Client
    "AsyncSearchClient",
    "DEFAULT_API_VERSION",
    "make_client",
    # Models
    "FacetBucket",
    "ResponseEnvelope",
    "SearchResultEntry",
    # Shaping
    "SearchResults",
    "shape",
    "shape_facets",
    # Searcher
    "Searcher",
    "do_search",
]
