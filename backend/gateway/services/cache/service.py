"""Cache service implementation.

This module provides an abstract cache service interface and concrete
Redis, in-memory and disabled implementations for storing gateway
responses.

The gateway only ever calls ``get`` and ``set``; which store sits behind
them is a configuration choice.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import redis.asyncio as redis

from gateway.utils.cache import LRUCache

logger = logging.getLogger(__name__)


class CacheService(ABC):
    """Abstract base class for cache services.

    Defines the interface for caching operations and a static method for
    building request cache keys.
    """

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to look up.

        Returns:
            The cached value if found, None otherwise.
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        """Store value in cache with optional TTL.

        Args:
            key: The cache key to store under.
            value: The value to cache (must be JSON serializable).
            ttl_seconds: Time-to-live in seconds.
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a specific key from the cache.

        Returns:
            True if the key was deleted, False if it didn't exist.
        """
        pass

    async def close(self) -> None:
        """Release any connection held by the cache."""

    @staticmethod
    def build_request_key(method: str, path: str, query: str = "") -> str:
        """Generate the cache key for an inbound request.

        The key format is ``{METHOD}:{path}`` with ``?{query}`` appended
        when the request has a query string.

        Example:
            >>> CacheService.build_request_key("get", "/api/trips/42", "a=1")
            'GET:/api/trips/42?a=1'
        """
        key = f"{method.upper()}:{path}"
        if query:
            key = f"{key}?{query}"
        return key


class RedisCacheService(CacheService):
    """Redis-based implementation of the cache service.

    Values are stored as JSON with a per-key expiry.

    Attributes:
        _client: The Redis async client instance.
        _default_ttl: Default TTL in seconds for cached values.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        default_ttl: int = 3600,
    ) -> None:
        self._redis_url = redis_url
        self._default_ttl = default_ttl
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Establish connection to Redis."""
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _ensure_connected(self) -> redis.Redis:
        if self._client is None:
            await self.connect()
        return self._client  # type: ignore

    async def get(self, key: str) -> Any | None:
        client = await self._ensure_connected()
        value = await client.get(key)
        if value is None:
            return None
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning(f"[CACHE] Dropping undecodable entry {key}")
            await client.delete(key)
            return None

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        client = await self._ensure_connected()
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        await client.set(key, json.dumps(value), ex=ttl)

    async def exists(self, key: str) -> bool:
        client = await self._ensure_connected()
        return bool(await client.exists(key))

    async def delete(self, key: str) -> bool:
        client = await self._ensure_connected()
        result = await client.delete(key)
        return result > 0

    @property
    def default_ttl(self) -> int:
        """Get the default TTL in seconds."""
        return self._default_ttl


class InMemoryCacheService(CacheService):
    """Process-local cache backed by a TTL-aware LRU."""

    def __init__(self, max_size: int = 512, default_ttl: int = 3600) -> None:
        self._store = LRUCache(max_size=max_size, ttl_seconds=default_ttl)

    async def get(self, key: str) -> Any | None:
        return self._store.get(key)

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        # Round-trip through JSON so hits never share state with the caller.
        self._store.set(key, json.loads(json.dumps(value)), ttl_seconds)

    async def exists(self, key: str) -> bool:
        return self._store.get(key) is not None

    async def delete(self, key: str) -> bool:
        return self._store.delete(key)


class NullCacheService(CacheService):
    """Caching disabled: every lookup misses and stores are dropped."""

    async def get(self, key: str) -> Any | None:
        return None

    async def set(self, key: str, value: Any, ttl_seconds: int | None = None) -> None:
        return None

    async def exists(self, key: str) -> bool:
        return False

    async def delete(self, key: str) -> bool:
        return False


def create_cache_service(
    backend: str = "memory",
    redis_url: str = "redis://localhost:6379",
    max_entries: int = 512,
) -> CacheService:
    """Build the cache service named by ``backend``."""
    if backend == "redis":
        logger.info(f"[CACHE] Using Redis at {redis_url}")
        return RedisCacheService(redis_url=redis_url)
    if backend == "none":
        logger.info("[CACHE] Response caching disabled")
        return NullCacheService()
    logger.info(f"[CACHE] Using in-memory cache ({max_entries} entries)")
    return InMemoryCacheService(max_size=max_entries)
