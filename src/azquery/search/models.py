"""Models for the search service response envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Prefix of the per-document metadata keys the service mixes into each result
SEARCH_METADATA_PREFIX = "@search."


class FacetBucket(BaseModel):
    """
    One bucket of a facet.

    Value facets carry ``value``; range facets carry ``from`` and/or ``to``.
    """

    model_config = ConfigDict(populate_by_name=True)

    value: Any = Field(default=None, description="Facet value")
    count: int | None = Field(default=None, description="Documents in this bucket")
    from_: Any = Field(default=None, alias="from", description="Range facet lower bound")
    to: Any = Field(default=None, description="Range facet upper bound")

    @property
    def label(self) -> str:
        """The bucket value as a string (empty when the bucket has none)."""
        return "" if self.value is None else str(self.value)


class SearchResultEntry(BaseModel):
    """A single result: the document plus the service's ranking metadata."""

    model_config = ConfigDict(populate_by_name=True)

    score: float | None = Field(default=None, alias="@search.score")
    highlights: dict[str, list[str]] | None = Field(default=None, alias="@search.highlights")
    document: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def split_raw(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Separate ``@search.*`` metadata from the document fields of a raw result."""
        metadata = {k: v for k, v in data.items() if k.startswith(SEARCH_METADATA_PREFIX)}
        document = {k: v for k, v in data.items() if not k.startswith(SEARCH_METADATA_PREFIX)}
        return {**metadata, "document": document}


class ResponseEnvelope(BaseModel):
    """Body of a search response."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[SearchResultEntry] = Field(default_factory=list, alias="value")
    count: int | None = Field(default=None, alias="@odata.count")
    facets: dict[str, list[FacetBucket]] | None = Field(default=None, alias="@search.facets")
    coverage: float | None = Field(default=None, alias="@search.coverage")
    next_link: str | None = Field(default=None, alias="@odata.nextLink")
    next_page_parameters: dict[str, Any] | None = Field(
        default=None, alias="@search.nextPageParameters"
    )

    @field_validator("results", mode="before")
    @classmethod
    def split_documents(cls, v: Any) -> Any:
        """Raw results are flat objects; split them into metadata and document."""
        if not isinstance(v, list):
            return v
        return [SearchResultEntry.split_raw(item) if isinstance(item, dict) else item for item in v]
