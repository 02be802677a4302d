"""Response cache services."""

from .service import (
    CacheService,
    InMemoryCacheService,
    NullCacheService,
    RedisCacheService,
    create_cache_service,
)

__all__ = [
    "CacheService",
    "InMemoryCacheService",
    "NullCacheService",
    "RedisCacheService",
    "create_cache_service",
]
