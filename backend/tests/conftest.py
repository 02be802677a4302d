"""Shared fixtures for gateway tests."""

from typing import Callable

import httpx
import pytest

from gateway.config import GatewaySettings
from gateway.services.cache import CacheService, InMemoryCacheService
from gateway.services.pipeline import TripGateway
from gateway.services.upstream import UpstreamFetcher

BACKEND = "http://backend.test"
NOW = 1_700_000_000.0


class RecordingBackend:
    """httpx MockTransport handler serving canned responses by path."""

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, response: httpx.Response | Exception) -> None:
        self.routes[path] = response

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.routes.get(request.url.path)
        if result is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def make_gateway(backend: RecordingBackend) -> Callable[..., TripGateway]:
    def _make(
        service_host: str = BACKEND,
        cache: CacheService | None = None,
        now: float = NOW,
    ) -> TripGateway:
        settings = GatewaySettings(service_host=service_host)
        client = httpx.AsyncClient(transport=httpx.MockTransport(backend))
        fetcher = UpstreamFetcher(service_host, timeout=5.0, client=client)
        return TripGateway(
            settings,
            fetcher,
            cache if cache is not None else InMemoryCacheService(),
            clock=lambda: now,
        )

    return _make
