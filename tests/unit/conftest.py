"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
import respx
from httpx import Response

from azquery.search.client import AsyncSearchClient

SERVICE_URL = "https://test.search.windows.net"


# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router scoped to the test search service."""
    with respx.mock(base_url=SERVICE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
async def search_client():
    """A search client pointed at the test service."""
    client = AsyncSearchClient("test", "test-api-key")
    yield client
    await client.close()


# ============================================================================
# Cache Fixtures
# ============================================================================


@pytest.fixture
def fake_cache() -> AsyncMock:
    """An in-memory stand-in for AsyncRedisClient."""
    store: dict[str, Any] = {}
    cache = AsyncMock()

    def _get(key: str) -> Any | None:
        return store.get(key)

    def _set(key: str, value: Any, ttl: int = 300) -> None:
        store[key] = value

    def _delete_matching(pattern: str) -> int:
        prefix = pattern.rstrip("*")
        keys = [k for k in store if k.startswith(prefix)]
        for key in keys:
            del store[key]
        return len(keys)

    cache.get.side_effect = _get
    cache.set.side_effect = _set
    cache.delete_matching.side_effect = _delete_matching
    cache.store = store
    return cache


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: dict[str, Any], status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error", code: str = "") -> Response:
    """Create a mock search service error response."""
    return Response(
        status_code=status_code,
        json={"error": {"code": code, "message": message}},
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def mock_responses():
    """Provide helper functions for creating mock responses."""
    return {
        "json": mock_json_response,
        "error": mock_error_response,
    }
