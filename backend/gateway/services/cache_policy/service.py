"""Cache admission policy.

Decides, per endpoint, whether a successful response may be cached and for
how long:

- ``/api/trips``: 1 day. The trip index changes occasionally.
- ``/api/trips/<id>``: 365 days once the trip's ``endtime`` has passed.
  A trip still in progress is never cached.
- ``/api/location/history/timestamp/<ts>``: 365 days when the payload's
  ``time`` is a whole number of seconds away from ``<ts>`` and less than
  60 hours away.
- Everything else (``/api/location/latest``): never cached.
"""

import time
from datetime import datetime, timezone
from typing import Any, Optional

from gateway.models import CacheDecision, RouteKind
from gateway.services.classifier import PathMatch, match_allowlist
from gateway.utils.geo import is_finite_number

TRIP_INDEX_DAYS = 1
FINISHED_TRIP_DAYS = 365
HISTORY_DAYS = 365

# abs(payload.time - ts) / 3600 must stay below this.
HISTORY_MAX_SKEW_HOURS = 60

CACHE_DEBUG_HEADER = "X-Gateway-Cache"


def _field(payload: Any, name: str) -> Optional[float]:
    if not isinstance(payload, dict):
        return None
    value = payload.get(name)
    return value if is_finite_number(value) else None


def decide_for_match(
    matched: Optional[PathMatch], payload: Any, now: float
) -> CacheDecision:
    """Cache decision for an already-matched allowlist path."""
    if matched is None:
        return CacheDecision.not_cacheable()

    if matched.kind is RouteKind.TRIP_INDEX:
        return CacheDecision.for_days(TRIP_INDEX_DAYS)

    if matched.kind is RouteKind.TRIP_DETAIL:
        endtime = _field(payload, "endtime")
        if endtime is not None and endtime < now:
            return CacheDecision.for_days(FINISHED_TRIP_DAYS)
        return CacheDecision.not_cacheable()

    if matched.kind is RouteKind.LOCATION_HISTORY and matched.param is not None:
        reported = _field(payload, "time")
        if reported is None:
            return CacheDecision.not_cacheable()
        try:
            difference = reported - matched.param
            whole = isinstance(difference, int) or float(difference).is_integer()
        except OverflowError:
            return CacheDecision.not_cacheable()
        if whole and abs(difference) < HISTORY_MAX_SKEW_HOURS * 3600:
            return CacheDecision.for_days(HISTORY_DAYS)
        return CacheDecision.not_cacheable()

    return CacheDecision.not_cacheable()


def decide_cache(path: str, payload: Any, now: float | None = None) -> CacheDecision:
    """Compute the cache decision for ``path`` given the decoded payload.

    Args:
        path: Request path.
        payload: Decoded (and redacted) upstream JSON.
        now: Current Unix time in seconds. Defaults to ``time.time()``.
    """
    if now is None:
        now = time.time()
    return decide_for_match(match_allowlist(path), payload, now)


def freshness_headers(decision: CacheDecision, fetched_at: float) -> dict[str, str]:
    """Headers describing a cacheable response's TTL and fetch time."""
    if not decision.cacheable:
        return {}
    fetched = datetime.fromtimestamp(fetched_at, tz=timezone.utc)
    fetched_iso = fetched.isoformat(timespec="seconds").replace("+00:00", "Z")
    return {
        CACHE_DEBUG_HEADER: f"cacheable for {decision.days} day(s), fetched {fetched_iso}",
        "Cache-Control": f"public, max-age={decision.ttl_seconds}",
    }
