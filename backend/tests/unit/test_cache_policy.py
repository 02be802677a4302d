"""Unit tests for the cache policy engine."""

import pytest

from gateway.models import CacheDecision
from gateway.services.cache_policy import (
    CACHE_DEBUG_HEADER,
    decide_cache,
    freshness_headers,
)

NOW = 1_700_000_000.0
TS = 1_000_000_000


class TestTripIndex:
    def test_always_one_day(self) -> None:
        decision = decide_cache("/api/trips", {}, now=NOW)
        assert decision.days == 1
        assert decision.ttl_seconds == 86400

    def test_payload_irrelevant(self) -> None:
        assert decide_cache("/api/trips", None, now=NOW).days == 1


class TestTripDetail:
    def test_finished_trip_cached_for_a_year(self) -> None:
        decision = decide_cache("/api/trips/42", {"endtime": NOW - 1}, now=NOW)
        assert decision.days == 365
        assert decision.ttl_seconds == 365 * 86400

    def test_future_endtime_not_cached(self) -> None:
        decision = decide_cache("/api/trips/42", {"endtime": NOW + 3600}, now=NOW)
        assert decision.cacheable is False

    def test_endtime_equal_to_now_not_cached(self) -> None:
        assert decide_cache("/api/trips/42", {"endtime": NOW}, now=NOW).cacheable is False

    @pytest.mark.parametrize(
        "payload",
        [{}, {"endtime": None}, {"endtime": "1000"}, {"endtime": True}, [], None],
    )
    def test_missing_or_bad_endtime_not_cached(self, payload) -> None:
        assert decide_cache("/api/trips/42", payload, now=NOW).cacheable is False

    def test_defaults_to_wall_clock(self) -> None:
        assert decide_cache("/api/trips/42", {"endtime": 1}).days == 365


class TestLocationHistory:
    path = f"/api/location/history/timestamp/{TS}"

    def test_exact_match_cached(self) -> None:
        assert decide_cache(self.path, {"time": TS}, now=NOW).days == 365

    def test_float_whole_seconds_cached(self) -> None:
        assert decide_cache(self.path, {"time": float(TS + 60)}, now=NOW).days == 365

    def test_fractional_difference_not_cached(self) -> None:
        assert decide_cache(self.path, {"time": TS + 0.5}, now=NOW).cacheable is False

    def test_within_sixty_hours(self) -> None:
        just_inside = TS + 60 * 3600 - 1
        assert decide_cache(self.path, {"time": just_inside}, now=NOW).days == 365
        assert decide_cache(self.path, {"time": TS - 59 * 3600}, now=NOW).days == 365

    def test_sixty_hours_or_more_not_cached(self) -> None:
        assert decide_cache(self.path, {"time": TS + 60 * 3600}, now=NOW).cacheable is False
        assert decide_cache(self.path, {"time": TS - 61 * 3600}, now=NOW).cacheable is False

    @pytest.mark.parametrize("payload", [{}, {"time": None}, {"time": "x"}, None])
    def test_missing_time_not_cached(self, payload) -> None:
        assert decide_cache(self.path, payload, now=NOW).cacheable is False


class TestNeverCached:
    @pytest.mark.parametrize("path", ["/api/location/latest", "/api/users", "/"])
    def test_not_cacheable(self, path: str) -> None:
        decision = decide_cache(path, {"time": TS, "endtime": 1}, now=NOW)
        assert decision == CacheDecision.not_cacheable()
        assert decision.ttl_seconds == 0


class TestFreshnessHeaders:
    def test_cacheable_headers(self) -> None:
        headers = freshness_headers(CacheDecision.for_days(1), NOW)
        assert headers["Cache-Control"] == "public, max-age=86400"
        assert headers[CACHE_DEBUG_HEADER] == (
            "cacheable for 1 day(s), fetched 2023-11-14T22:13:20Z"
        )

    def test_not_cacheable_has_no_headers(self) -> None:
        assert freshness_headers(CacheDecision.not_cacheable(), NOW) == {}


class TestHugeNumbers:
    """Values beyond float range are never cacheable and never raise."""

    def test_huge_path_timestamp(self) -> None:
        path = "/api/location/history/timestamp/" + "9" * 400
        assert decide_cache(path, {"time": 1000000000}, now=0).cacheable is False

    def test_huge_path_timestamp_with_float_time(self) -> None:
        path = "/api/location/history/timestamp/" + "9" * 400
        assert decide_cache(path, {"time": 1000000000.5}, now=0).cacheable is False

    def test_huge_integers_that_agree(self) -> None:
        big = 10**400
        path = f"/api/location/history/timestamp/{big}"
        assert decide_cache(path, {"time": big + 3600}, now=NOW).days == 365

    def test_huge_endtime(self) -> None:
        assert decide_cache("/api/trips/42", {"endtime": 10**400}, now=NOW).cacheable is False
        assert decide_cache("/api/trips/42", {"endtime": -(10**400)}, now=NOW).days == 365
