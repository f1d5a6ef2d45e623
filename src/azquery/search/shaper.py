"""Shape a search response envelope into documents, facets and a count."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, NamedTuple, TypeVar

from pydantic import TypeAdapter

from azquery.search.models import ResponseEnvelope

DocT = TypeVar("DocT")


class SearchResults(NamedTuple, Generic[DocT]):
    """Shaped search results; unpacks as ``documents, facets, total_count``."""

    documents: list[DocT]
    facets: dict[str, list[str]]
    total_count: int | None


def shape_facets(envelope: ResponseEnvelope) -> dict[str, list[str]]:
    """Flatten facet buckets to their labels, keeping the service's order."""
    if envelope.facets is None:
        return {}
    return {
        field: [bucket.label for bucket in buckets]
        for field, buckets in envelope.facets.items()
    }


def shape(
    envelope: ResponseEnvelope | Mapping[str, Any],
    document_type: type[DocT] | None = None,
) -> SearchResults[Any]:
    """
    Split a response envelope into its three parts.

    Per-document metadata (score, highlights) is dropped. The total count
    is only present when the service reported one.

    Args:
        envelope: Parsed envelope or the raw JSON body
        document_type: Optional type each document is validated into
            (pydantic model, dataclass, TypedDict...); raw dicts otherwise

    Returns:
        SearchResults with documents, facet labels and total count
    """
    if not isinstance(envelope, ResponseEnvelope):
        envelope = ResponseEnvelope.model_validate(envelope)

    if document_type is None:
        documents: list[Any] = [entry.document for entry in envelope.results]
    else:
        adapter = TypeAdapter(document_type)
        documents = [adapter.validate_python(entry.document) for entry in envelope.results]

    return SearchResults(
        documents=documents,
        facets=shape_facets(envelope),
        total_count=envelope.count,
    )
