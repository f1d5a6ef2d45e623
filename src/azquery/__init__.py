"""azquery - Typed query construction for OData-style search services."""

from azquery.client import AzqueryClient, search_index
from azquery.config import AzquerySettings
from azquery.core.exceptions import (
    AzqueryError,
    SearchError,
    SearchServiceError,
    SearchServiceUnavailableError,
    ValidationError,
)
from azquery.core.types import Combiner, Comparison, Direction
from azquery.query import (
    IDENTITY_FILTER,
    BinaryFilter,
    ByDistance,
    ByField,
    FieldFilter,
    GeoDistanceFilter,
    QueryBuilder,
    QueryRequest,
    and_,
    combine,
    compile_filter,
    compile_sort,
    or_,
    where,
    where_eq,
    where_geo_distance,
)
from azquery.search import AsyncSearchClient, SearchResults, do_search, make_client, shape

__version__ = "0.1.0"
__all__ = [
    # Client
    "AzqueryClient",
    "AzquerySettings",
    "search_index",
    # Types
    "Combiner",
    "Comparison",
    "Direction",
    # Filters
    "BinaryFilter",
    "FieldFilter",
    "GeoDistanceFilter",
    "IDENTITY_FILTER",
    "and_",
    "combine",
    "compile_filter",
    "or_",
    "where",
    "where_eq",
    "where_geo_distance",
    # Sorting
    "ByDistance",
    "ByField",
    "compile_sort",
    # Building
    "QueryBuilder",
    "QueryRequest",
    # Searching
    "AsyncSearchClient",
    "SearchResults",
    "do_search",
    "make_client",
    "shape",
    # Errors
    "AzqueryError",
    "SearchError",
    "SearchServiceError",
    "SearchServiceUnavailableError",
    "ValidationError",
    # Version
    "__version__",
]
