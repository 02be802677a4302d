"""Backend fetcher.

Retrieves the raw JSON payload for an allowlisted path from the tracking
backend. One GET per request, bounded by a timeout, never retried.

Architecture:
- Shared httpx client with connection pooling
- Status codes are returned as-is; the caller decides what non-200 means
- Transport failures and undecodable bodies are raised as gateway errors
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from gateway.models import (
    ConfigurationError,
    UpstreamDecodeError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)


@dataclass
class UpstreamResponse:
    """Raw backend response."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def json(self) -> Any:
        """Decode the body.

        Raises:
            UpstreamDecodeError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise UpstreamDecodeError() from e


class UpstreamFetcher:
    """HTTP client for the tracking backend."""

    HEADERS = {
        "User-Agent": "TripGateway/1.0",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            base_url: Backend base address, scheme and host only.
            timeout: Request timeout in seconds.
            client: Optional preconfigured client (used by tests).
        """
        self._base_url = (base_url or "").rstrip("/")
        self._timeout = timeout
        self._client = client

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self.HEADERS,
                limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def fetch(self, path: str) -> UpstreamResponse:
        """GET ``base_url + path`` from the backend.

        Raises:
            ConfigurationError: If no backend address is configured.
            UpstreamTimeoutError: If the backend did not answer in time.
            UpstreamUnavailableError: On any other transport failure.
        """
        if not self._base_url:
            raise ConfigurationError()

        url = f"{self._base_url}{path}"
        client = self._get_client()
        try:
            response = await client.get(url, timeout=self._timeout)
        except httpx.TimeoutException as e:
            logger.warning(f"[UPSTREAM] Timeout after {self._timeout}s for {path}")
            raise UpstreamTimeoutError() from e
        except httpx.HTTPError as e:
            logger.warning(f"[UPSTREAM] {type(e).__name__} for {path}: {e}")
            raise UpstreamUnavailableError() from e

        logger.debug(f"[UPSTREAM] {path} -> {response.status_code}")
        return UpstreamResponse(status_code=response.status_code, text=response.text)

    @property
    def base_url(self) -> str:
        return self._base_url
