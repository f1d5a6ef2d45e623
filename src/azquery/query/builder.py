"""Query builder accumulating search options into a request descriptor."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from azquery.core.exceptions import ValidationError
from azquery.query.filters import FilterExpr, compile_filter
from azquery.query.sort import SortKey, compile_sorts


class QueryRequest(BaseModel):
    """Immutable description of a single search call."""

    model_config = ConfigDict(frozen=True)

    full_text: str | None = Field(default=None, description="Free-text search expression")
    filter: str | None = Field(default=None, description="Compiled $filter expression")
    order_by: tuple[str, ...] = Field(default=(), description="Compiled $orderby clauses")
    skip: int | None = Field(default=None, ge=0, description="Number of results to skip")
    top: int | None = Field(default=None, ge=0, description="Number of results to return")
    facets: tuple[str, ...] = Field(default=(), description="Facet expressions to compute")
    include_total_count: bool = Field(
        default=False, description="Whether the service should report the total count"
    )

    def to_search_body(self) -> dict[str, Any]:
        """
        Render the request as the JSON body of a POST search call.

        Options that were never set are left out so the service applies
        its own defaults. ``count`` is always sent.
        """
        body: dict[str, Any] = {}
        if self.full_text is not None:
            body["search"] = self.full_text
        if self.filter is not None:
            body["filter"] = self.filter
        if self.order_by:
            body["orderby"] = ",".join(self.order_by)
        if self.skip is not None:
            body["skip"] = self.skip
        if self.top is not None:
            body["top"] = self.top
        if self.facets:
            body["facets"] = list(self.facets)
        body["count"] = self.include_total_count
        return body


def _check_count(name: str, value: int) -> int:
    """Paging bounds must be non-negative integers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}",
            details={name: value},
        )
    if value < 0:
        raise ValidationError(f"{name} must not be negative", details={name: value})
    return value


class QueryBuilder:
    """
    Accumulates search options and builds a ``QueryRequest``.

    Every setter returns the builder so calls can be chained. Setting an
    option twice keeps the last value. No cross-option validation is done:
    the search service decides whether a combination makes sense.

    Usage:
        request = (
            QueryBuilder()
            .set_full_text("coffee")
            .set_filter(and_(where("Age", Comparison.GE, 18), where_eq("Town", "London")))
            .set_sort([ByField("Age", Direction.DESCENDING)])
            .set_top(5)
            .include_total_count()
            .build()
        )

    A builder is not meant to be shared between concurrent tasks.
    """

    def __init__(self) -> None:
        self._full_text: str | None = None
        self._filter: str | None = None
        self._order_by: tuple[str, ...] = ()
        self._skip: int | None = None
        self._top: int | None = None
        self._facets: tuple[str, ...] = ()
        self._include_total_count = False

    def set_filter(self, expr: FilterExpr) -> QueryBuilder:
        """Set the filter, replacing any previous one."""
        self._filter = compile_filter(expr)
        return self

    def set_facets(self, fields: Iterable[str]) -> QueryBuilder:
        """Set which facets the service should compute, in order."""
        if isinstance(fields, str):
            raise ValidationError(
                "Facets must be given as a list of expressions, not a single string",
                details={"facets": fields},
            )
        self._facets = tuple(fields)
        return self

    def set_skip(self, count: int) -> QueryBuilder:
        """Set the number of results to skip."""
        self._skip = _check_count("skip", count)
        return self

    def set_top(self, count: int) -> QueryBuilder:
        """Set the number of results to retrieve."""
        self._top = _check_count("top", count)
        return self

    def set_sort(self, keys: Iterable[SortKey]) -> QueryBuilder:
        """Set the sort keys; earlier keys take precedence."""
        self._order_by = tuple(compile_sorts(keys))
        return self

    def set_full_text(self, text: str) -> QueryBuilder:
        """Set the free-text query expression."""
        self._full_text = text
        return self

    def include_total_count(self) -> QueryBuilder:
        """Ask the service for the total number of matching documents."""
        self._include_total_count = True
        return self

    def build(self) -> QueryRequest:
        """Build the request from the options set so far."""
        return QueryRequest(
            full_text=self._full_text,
            filter=self._filter,
            order_by=self._order_by,
            skip=self._skip,
            top=self._top,
            facets=self._facets,
            include_total_count=self._include_total_count,
        )
