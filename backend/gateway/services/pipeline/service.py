"""Request pipeline for the trip gateway.

One request, start to finish:

    method check -> config check -> classify -> cache lookup -> fetch ->
    decode -> status check -> trip verification -> redaction ->
    cache decision -> cache store -> response

Every failure is raised as a ``GatewayError`` and left to the HTTP layer to
render. Nothing that failed is ever stored in the cache.
"""

import json
import logging
import time
from typing import Any, Callable

from gateway.config import GatewaySettings
from gateway.models import (
    GatewayResponse,
    MethodNotAllowedError,
    PolicyDeniedError,
    UpstreamStatusError,
)
from gateway.services.cache import CacheService, create_cache_service
from gateway.services.cache_policy import decide_for_match, freshness_headers
from gateway.services.classifier import Outcome, classify
from gateway.services.redactor import redact_payload
from gateway.services.trip_verifier import ensure_active_trip
from gateway.services.upstream import UpstreamFetcher

logger = logging.getLogger(__name__)

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}
CACHE_STATUS_HEADER = "X-Gateway-Cache-Status"


class TripGateway:
    """Allowlisting, redacting, caching front for the tracking backend."""

    def __init__(
        self,
        settings: GatewaySettings,
        fetcher: UpstreamFetcher,
        cache: CacheService,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._settings = settings
        self._fetcher = fetcher
        self._cache = cache
        self._clock = clock

    async def handle(self, method: str, path: str, query: str = "") -> GatewayResponse:
        """Process one inbound request.

        Args:
            method: HTTP method of the inbound request.
            path: Request path, without query string.
            query: Raw query string, used only for the cache key.

        Returns:
            The response to emit (for HEAD, the caller drops the body).

        Raises:
            GatewayError: For any terminal failure.
        """
        classification = classify(method, path)
        if classification.outcome is Outcome.METHOD_NOT_ALLOWED:
            raise MethodNotAllowedError()

        self._settings.validate_backend()

        if not classification.allowed:
            logger.info(f"[GATEWAY] Denied {method} {path}")
            raise PolicyDeniedError()

        cache_key = CacheService.build_request_key(method, path, query)
        cached = await self._lookup(cache_key)
        if cached is not None:
            logger.debug(f"[GATEWAY] Cache hit {cache_key}")
            return cached.model_copy(
                update={"headers": {**cached.headers, CACHE_STATUS_HEADER: "HIT"}}
            )

        upstream = await self._fetcher.fetch(path)
        payload = upstream.json()
        if not upstream.ok:
            logger.info(f"[GATEWAY] Upstream {upstream.status_code} for {path}")
            raise UpstreamStatusError(upstream.status_code)

        ensure_active_trip(classification.verify_trip, payload)
        payload = redact_payload(payload)

        fetched_at = self._clock()
        decision = decide_for_match(classification.match, payload, fetched_at)

        response = GatewayResponse(
            status_code=200,
            body=_dump(payload),
            headers={**CORS_HEADERS, **freshness_headers(decision, fetched_at)},
            media_type="application/json",
        )

        if decision.cacheable:
            await self._store(cache_key, response, decision.ttl_seconds)
            response.headers[CACHE_STATUS_HEADER] = "MISS"
        return response

    async def _lookup(self, key: str) -> GatewayResponse | None:
        try:
            value = await self._cache.get(key)
        except Exception as e:
            logger.warning(f"[CACHE] Lookup failed for {key}: {type(e).__name__}: {e}")
            return None
        if value is None:
            return None
        try:
            return GatewayResponse.model_validate(value)
        except ValueError:
            logger.warning(f"[CACHE] Ignoring malformed entry for {key}")
            return None

    async def _store(self, key: str, response: GatewayResponse, ttl_seconds: int) -> None:
        try:
            await self._cache.set(key, response.model_dump(), ttl_seconds=ttl_seconds)
        except Exception as e:
            logger.warning(f"[CACHE] Store failed for {key}: {type(e).__name__}: {e}")

    async def close(self) -> None:
        await self._fetcher.close()
        await self._cache.close()


def _dump(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"))


def create_gateway(settings: GatewaySettings) -> TripGateway:
    """Wire a gateway from settings."""
    fetcher = UpstreamFetcher(settings.service_host, timeout=settings.upstream_timeout)
    cache = create_cache_service(
        backend=settings.cache_backend,
        redis_url=settings.redis_url,
        max_entries=settings.cache_max_entries,
    )
    return TripGateway(settings, fetcher, cache)
