"""Tests for the listing cache."""

from unittest.mock import patch

from api.services.cache import TTLCache


class TestTTLCache:
    """Tests for TTLCache."""

    def test_get_or_load_counts_hits(self):
        cache = TTLCache(maxsize=4, ttl=60)
        calls = []

        def loader():
            calls.append(1)
            return ["carrots"]

        assert cache.get_or_load("products:all", loader) == ["carrots"]
        assert cache.get_or_load("products:all", loader) == ["carrots"]
        assert len(calls) == 1
        assert cache.stats()["hits"] == 1

    def test_entries_expire(self):
        cache = TTLCache(maxsize=4, ttl=10)

        with patch("api.services.cache.time.monotonic", return_value=100.0):
            cache.set("k", "v")
        with patch("api.services.cache.time.monotonic", return_value=111.0):
            assert cache.get("k") is None

    def test_lru_eviction(self):
        cache = TTLCache(maxsize=2, ttl=60)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")
        cache.set("c", 3)

        assert cache.get("b") is None
        assert cache.get("a") == 1
        assert len(cache) == 2

    def test_invalidate_prefix(self):
        cache = TTLCache()
        cache.set("products:all", [])
        cache.set("categories", [])

        assert cache.invalidate("products:") == 1
        assert cache.get("categories") == []
