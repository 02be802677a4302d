"""Unit tests for gateway settings."""

import pytest
from pydantic import ValidationError

from gateway.config import GatewaySettings
from gateway.models import ConfigurationError


class TestGatewaySettings:
    def test_defaults(self) -> None:
        settings = GatewaySettings()
        assert settings.service_host == ""
        assert settings.upstream_timeout == 10.0
        assert settings.cache_backend == "memory"

    def test_service_host_trailing_slash(self) -> None:
        settings = GatewaySettings(service_host=" https://tracker.example.com/ ")
        assert settings.service_host == "https://tracker.example.com"

    def test_validate_backend_missing(self) -> None:
        with pytest.raises(ConfigurationError):
            GatewaySettings().validate_backend()

    def test_validate_backend_present(self) -> None:
        GatewaySettings(service_host="http://backend.test").validate_backend()

    def test_unknown_cache_backend(self) -> None:
        with pytest.raises(ValidationError):
            GatewaySettings(cache_backend="memcached")

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SERVICE_HOST", "http://backend.test/")
        monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")
        monkeypatch.setenv("CACHE_BACKEND", "REDIS")
        monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
        monkeypatch.setenv("CACHE_MAX_ENTRIES", "10")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = GatewaySettings.from_env()

        assert settings.service_host == "http://backend.test"
        assert settings.upstream_timeout == 2.5
        assert settings.cache_backend == "redis"
        assert settings.redis_url == "redis://cache:6379/1"
        assert settings.cache_max_entries == 10
        assert settings.log_level == "DEBUG"
