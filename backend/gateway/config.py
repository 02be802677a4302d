"""Gateway configuration.

Settings are read from the environment (and a ``.env`` file, if present)
once, into an explicit ``GatewaySettings`` object that is handed to the
services at construction time.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from gateway.models import ConfigurationError

CACHE_BACKENDS = ("redis", "memory", "none")


class GatewaySettings(BaseModel):
    """Runtime settings for the gateway."""

    service_host: str = Field(
        "", description="Backend base address (scheme + host, no path)"
    )
    upstream_timeout: float = Field(
        10.0, gt=0, description="Upstream request timeout in seconds"
    )
    cache_backend: str = Field("memory", description="redis, memory or none")
    redis_url: str = Field("redis://localhost:6379", description="Redis URL")
    cache_max_entries: int = Field(512, gt=0, description="In-memory cache size")
    log_level: str = Field("INFO", description="Root log level")

    @field_validator("service_host")
    @classmethod
    def _strip_service_host(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("cache_backend")
    @classmethod
    def _check_cache_backend(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in CACHE_BACKENDS:
            raise ValueError(f"cache_backend must be one of {CACHE_BACKENDS}")
        return value

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        """Build settings from environment variables."""
        load_dotenv()
        return cls(
            service_host=os.getenv("SERVICE_HOST", ""),
            upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", "10")),
            cache_backend=os.getenv("CACHE_BACKEND", "memory"),
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379"),
            cache_max_entries=int(os.getenv("CACHE_MAX_ENTRIES", "512")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate_backend(self) -> None:
        """Raise ConfigurationError if the backend address is missing."""
        if not self.service_host:
            raise ConfigurationError()
