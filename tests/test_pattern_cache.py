"""Tests for PatternCache."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from cldrdates import MalformedPatternError
from cldrdates.constants import MAX_PATTERN_CACHE_SIZE
from cldrdates.runtime import PatternCache
from cldrdates.syntax import parse_pattern


class TestPatternCache:
    """Read-through LRU behavior."""

    def test_miss_then_hit(self) -> None:
        """The second lookup returns the stored tuple."""
        cache = PatternCache()
        first = cache.get_or_parse("d MMM y")
        second = cache.get_or_parse("d MMM y")
        assert first is second
        assert first == parse_pattern("d MMM y")
        assert cache.info() == {
            "hits": 1,
            "misses": 1,
            "size": 1,
            "max_size": MAX_PATTERN_CACHE_SIZE,
        }

    def test_lru_eviction(self) -> None:
        """The least recently used pattern is evicted first."""
        cache = PatternCache(max_size=2)
        cache.get_or_parse("y")
        cache.get_or_parse("M")
        cache.get_or_parse("y")  # y is now most recent
        cache.get_or_parse("d")  # evicts M
        assert cache.size == 2
        misses = cache.info()["misses"]
        cache.get_or_parse("y")
        assert cache.info()["misses"] == misses
        cache.get_or_parse("M")
        assert cache.info()["misses"] == misses + 1

    def test_errors_not_cached(self) -> None:
        """Failed parses raise every time and are never stored."""
        cache = PatternCache()
        for _ in range(2):
            with pytest.raises(MalformedPatternError):
                cache.get_or_parse("'open")
        assert cache.size == 0
        assert cache.info()["misses"] == 2

    def test_clear(self) -> None:
        """clear() drops entries and statistics."""
        cache = PatternCache()
        cache.get_or_parse("y")
        cache.get_or_parse("y")
        cache.clear()
        assert cache.info() == {
            "hits": 0,
            "misses": 0,
            "size": 0,
            "max_size": MAX_PATTERN_CACHE_SIZE,
        }

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_invalid_size(self, max_size: int) -> None:
        """max_size must be positive."""
        with pytest.raises(ValueError, match="max_size"):
            PatternCache(max_size=max_size)

    def test_concurrent_access(self) -> None:
        """Concurrent lookups of one pattern agree on one stored tuple."""
        cache = PatternCache()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: cache.get_or_parse("EEEE, d MMMM y"), range(64)))
        assert all(result == results[0] for result in results)
        assert cache.size == 1
        stats = cache.info()
        assert stats["hits"] + stats["misses"] == 64
