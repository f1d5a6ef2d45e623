"""Filter, sort and query-building DSL."""

from azquery.query.builder import QueryBuilder, QueryRequest
from azquery.query.filters import (
    IDENTITY_FILTER,
    BinaryFilter,
    FieldFilter,
    FilterExpr,
    FilterValue,
    GeoDistanceFilter,
    and_,
    combine,
    compile_filter,
    or_,
    where,
    where_eq,
    where_geo_distance,
)
from azquery.query.sort import ByDistance, ByField, SortKey, compile_sort, compile_sorts

__all__ = [
    # Filters
    "BinaryFilter",
    "FieldFilter",
    "FilterExpr",
    "FilterValue",
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
    "SortKey",
    "compile_sort",
    "compile_sorts",
    # Builder
    "QueryBuilder",
    "QueryRequest",
]
