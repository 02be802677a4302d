"""Cache policy engine."""

from .service import (
    CACHE_DEBUG_HEADER,
    FINISHED_TRIP_DAYS,
    HISTORY_DAYS,
    HISTORY_MAX_SKEW_HOURS,
    TRIP_INDEX_DAYS,
    decide_cache,
    decide_for_match,
    freshness_headers,
)

__all__ = [
    "CACHE_DEBUG_HEADER",
    "FINISHED_TRIP_DAYS",
    "HISTORY_DAYS",
    "HISTORY_MAX_SKEW_HOURS",
    "TRIP_INDEX_DAYS",
    "decide_cache",
    "decide_for_match",
    "freshness_headers",
]
