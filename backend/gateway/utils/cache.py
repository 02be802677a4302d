"""In-memory LRU cache with per-entry TTL expiration.

Process-level store used when no Redis is configured. Each entry carries
its own expiry, since cached responses live anywhere from a day to a year.
"""

import time
from collections import OrderedDict
from typing import Any, Callable


class LRUCache:
    """TTL-aware LRU cache for JSON-serializable values."""

    def __init__(
        self,
        max_size: int = 512,
        ttl_seconds: int = 86400,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._max_size = max_size
        self._ttl = ttl_seconds
        self._clock = clock

    def get(self, key: str) -> Any | None:
        if key not in self._cache:
            return None
        expires_at, value = self._cache[key]
        if self._clock() >= expires_at:
            del self._cache[key]
            return None
        self._cache.move_to_end(key)
        return value

    def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self._ttl
        if key in self._cache:
            self._cache.move_to_end(key)
        self._cache[key] = (self._clock() + ttl, value)
        if len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def delete(self, key: str) -> bool:
        return self._cache.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._cache)
