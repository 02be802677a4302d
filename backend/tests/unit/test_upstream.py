"""Unit tests for the backend fetcher."""

import httpx
import pytest

from gateway.models import (
    ConfigurationError,
    UpstreamDecodeError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from gateway.services.upstream import UpstreamFetcher, UpstreamResponse


def make_fetcher(handler, base_url: str = "http://backend.test/") -> UpstreamFetcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return UpstreamFetcher(base_url, timeout=2.0, client=client)


class TestUpstreamResponse:
    def test_json(self) -> None:
        assert UpstreamResponse(200, '{"trips": []}').json() == {"trips": []}

    def test_invalid_json(self) -> None:
        with pytest.raises(UpstreamDecodeError) as exc_info:
            UpstreamResponse(200, "<html>oops</html>").json()
        assert exc_info.value.status_code == 502

    def test_ok_only_for_200(self) -> None:
        assert UpstreamResponse(200, "{}").ok is True
        assert UpstreamResponse(204, "{}").ok is False
        assert UpstreamResponse(404, "{}").ok is False


class TestUpstreamFetcher:
    def test_base_url_trailing_slash_stripped(self) -> None:
        assert UpstreamFetcher("http://backend.test/").base_url == "http://backend.test"

    @pytest.mark.asyncio
    async def test_fetch_builds_url_from_path(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        fetcher = make_fetcher(handler)
        result = await fetcher.fetch("/api/trips/42")

        assert str(seen[0].url) == "http://backend.test/api/trips/42"
        assert seen[0].method == "GET"
        assert result.status_code == 200
        assert result.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_non_200_returned_as_is(self) -> None:
        fetcher = make_fetcher(lambda request: httpx.Response(503, text="down"))
        result = await fetcher.fetch("/api/trips")
        assert result.status_code == 503
        assert result.text == "down"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("base_url", ["", None])
    async def test_missing_base_url(self, base_url) -> None:
        fetcher = UpstreamFetcher(base_url)
        with pytest.raises(ConfigurationError):
            await fetcher.fetch("/api/trips")

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(UpstreamTimeoutError) as exc_info:
            await make_fetcher(handler).fetch("/api/trips")
        assert exc_info.value.status_code == 504

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await make_fetcher(handler).fetch("/api/trips")
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        fetcher = make_fetcher(lambda request: httpx.Response(200, json={}))
        await fetcher.close()
        await fetcher.close()
