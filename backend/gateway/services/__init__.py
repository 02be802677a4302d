"""Trip Gateway Services.

Service layer components:
- Classifier: method check and endpoint allowlist
- Upstream: backend fetcher (httpx)
- Trip Verifier: active-trip check for live-location endpoints
- Redactor: protected-zone decoys and stationary-point removal
- Cache Policy: per-endpoint cacheability and TTL
- Cache: Redis, in-memory LRU or disabled response cache
- Pipeline: the request flow tying the above together
"""

from .cache import (
    CacheService,
    InMemoryCacheService,
    NullCacheService,
    RedisCacheService,
    create_cache_service,
)
from .cache_policy import decide_cache
from .classifier import Classification, Outcome, classify, match_allowlist
from .pipeline import TripGateway, create_gateway
from .redactor import redact_coordinates, redact_payload
from .trip_verifier import ensure_active_trip, verify_trip
from .upstream import UpstreamFetcher, UpstreamResponse

__all__ = [
    # Cache
    "CacheService",
    "InMemoryCacheService",
    "NullCacheService",
    "RedisCacheService",
    "create_cache_service",
    # Policy
    "decide_cache",
    # Classifier
    "Classification",
    "Outcome",
    "classify",
    "match_allowlist",
    # Pipeline
    "TripGateway",
    "create_gateway",
    # Redactor
    "redact_coordinates",
    "redact_payload",
    # Trip verifier
    "ensure_active_trip",
    "verify_trip",
    # Upstream
    "UpstreamFetcher",
    "UpstreamResponse",
]
