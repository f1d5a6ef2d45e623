"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from azquery.config import AzquerySettings

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_documents() -> list[dict[str, Any]]:
    """Documents as stored in the index."""
    return [
        {"Id": "1", "Name": "Isaac", "Age": 34, "Town": "London"},
        {"Id": "2", "Name": "Ada", "Age": 28, "Town": "London"},
        {"Id": "3", "Name": "Alan", "Age": 41, "Town": "Manchester"},
    ]


@pytest.fixture
def sample_envelope(sample_documents: list[dict[str, Any]]) -> dict[str, Any]:
    """A full search response body with count and facets."""
    return {
        "@odata.context": "https://test.search.windows.net/indexes('people')/$metadata#docs(*)",
        "@odata.count": 42,
        "@search.facets": {
            "Town": [
                {"count": 2, "value": "London"},
                {"count": 1, "value": "Manchester"},
            ],
            "Age": [
                {"count": 1, "value": 41},
                {"count": 1, "value": 34},
            ],
        },
        "value": [
            {"@search.score": 2.5, **sample_documents[0]},
            {"@search.score": 1.5, **sample_documents[1]},
            {"@search.score": 0.5, **sample_documents[2]},
        ],
    }


@pytest.fixture
def sample_envelope_minimal(sample_documents: list[dict[str, Any]]) -> dict[str, Any]:
    """A search response body without count or facets."""
    return {
        "value": [{"@search.score": 1.0, **doc} for doc in sample_documents],
    }


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> AzquerySettings:
    """Create mock settings for testing."""
    return AzquerySettings(
        service_name="test",
        api_key="test-api-key",
        api_version="2020-06-30",
        timeout=5.0,
        redis_url=None,
        cache_ttl=60,
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_with_cache() -> AzquerySettings:
    """Create mock settings with a Redis cache configured."""
    return AzquerySettings(
        service_name="test",
        api_key="test-api-key",
        redis_url="redis://localhost:6379/15",  # Use DB 15 for tests
        cache_ttl=60,
    )
