"""Tests for cache key builders."""

from __future__ import annotations

from fnmatch import fnmatchcase

from azquery.cache.keys import CacheKeys
from azquery.query.builder import QueryBuilder, QueryRequest
from azquery.query.filters import where_eq

# ============================================================================
# Search Key Tests
# ============================================================================


class TestSearchKeys:
    """Tests for search cache keys."""

    def test_search_key_prefix(self):
        """Search keys are namespaced by index."""
        key = CacheKeys.search("people", QueryRequest())
        assert key.startswith("azquery:search:people:")

    def test_search_key_deterministic(self):
        """Equal requests give equal keys."""
        key1 = CacheKeys.search("people", QueryBuilder().set_top(5).build())
        key2 = CacheKeys.search("people", QueryBuilder().set_top(5).build())
        assert key1 == key2

    def test_search_key_option_order_independent(self):
        """The order options were set in does not matter."""
        request1 = QueryBuilder().set_top(5).set_full_text("coffee").build()
        request2 = QueryBuilder().set_full_text("coffee").set_top(5).build()
        assert CacheKeys.search("people", request1) == CacheKeys.search("people", request2)

    def test_search_key_different_requests(self):
        """Different filters give different keys."""
        key1 = CacheKeys.search("people", QueryBuilder().set_filter(where_eq("A", 1)).build())
        key2 = CacheKeys.search("people", QueryBuilder().set_filter(where_eq("A", 2)).build())
        assert key1 != key2

    def test_search_key_count_flag(self):
        """The count flag is part of the key."""
        key1 = CacheKeys.search("people", QueryRequest())
        key2 = CacheKeys.search("people", QueryBuilder().include_total_count().build())
        assert key1 != key2

    def test_search_key_different_indexes(self):
        """The same request on two indexes gives two keys."""
        request = QueryRequest()
        assert CacheKeys.search("people", request) != CacheKeys.search("shops", request)

    def test_search_key_hash_length(self):
        """Search key hash should be truncated."""
        key = CacheKeys.search("people", QueryBuilder().set_full_text("a long query " * 50).build())
        parts = key.split(":")
        assert len(parts) == 4
        assert len(parts[3]) == 16

    def test_search_key_no_spaces(self):
        """Keys should not contain spaces."""
        key = CacheKeys.search("people", QueryBuilder().set_full_text("test query").build())
        assert " " not in key


# ============================================================================
# Index Pattern Tests
# ============================================================================


class TestIndexPattern:
    """Tests for the per-index invalidation pattern."""

    def test_pattern_matches_index_keys(self):
        """The pattern matches every search key of its index."""
        pattern = CacheKeys.index_pattern("people")
        assert fnmatchcase(CacheKeys.search("people", QueryRequest()), pattern)

    def test_pattern_excludes_other_indexes(self):
        """Keys of other indexes are not matched."""
        pattern = CacheKeys.index_pattern("people")
        assert not fnmatchcase(CacheKeys.search("people2", QueryRequest()), pattern)
        assert not fnmatchcase(CacheKeys.search("shops", QueryRequest()), pattern)
