"""TTL cache for catalog listings."""

import time
from typing import Any, Callable, TypeVar
from collections import OrderedDict

T = TypeVar("T")


class TTLCache:
    """Small LRU cache whose entries expire after ``ttl`` seconds."""

    def __init__(self, maxsize: int = 16, ttl: int = 300):
        """Initialize cache.

        Args:
            maxsize: Maximum number of items to cache
            ttl: Time-to-live in seconds
        """
        self.maxsize = maxsize
        self.ttl = ttl
        self.hits = 0
        self.misses = 0
        self._cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> Any | None:
        """Get item from cache if not expired."""
        if key not in self._cache:
            return None

        timestamp, value = self._cache[key]
        if time.monotonic() - timestamp > self.ttl:
            del self._cache[key]
            return None

        self._cache.move_to_end(key)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set item in cache, evicting the least recently used entries."""
        self._cache.pop(key, None)
        while len(self._cache) >= self.maxsize:
            self._cache.popitem(last=False)

        self._cache[key] = (time.monotonic(), value)

    def get_or_load(self, key: str, loader: Callable[[], T]) -> T:
        """Return the cached value for ``key``, calling ``loader`` on a miss."""
        value = self.get(key)
        if value is not None:
            self.hits += 1
            return value

        self.misses += 1
        value = loader()
        self.set(key, value)
        return value

    def clear(self) -> None:
        """Clear all cached items."""
        self._cache.clear()

    def invalidate(self, prefix: str) -> int:
        """Invalidate entries whose key starts with ``prefix``.

        Returns:
            Number of entries invalidated
        """
        keys_to_remove = [k for k in self._cache if k.startswith(prefix)]
        for key in keys_to_remove:
            del self._cache[key]
        return len(keys_to_remove)

    def stats(self) -> dict[str, int]:
        """Get statistics about cache usage."""
        return {
            "size": len(self._cache),
            "maxsize": self.maxsize,
            "ttl": self.ttl,
            "hits": self.hits,
            "misses": self.misses,
        }
