"""Core data models for the trip gateway.

Pydantic models shared by the services and the HTTP layer: the allowlisted
route kinds, the cache decision produced by the cache policy and the final
response the gateway emits (which is also what the response cache stores).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SECONDS_PER_DAY = 86400


class RouteKind(str, Enum):
    """Allowlisted backend endpoints."""

    LOCATION_LATEST = "location_latest"
    LOCATION_HISTORY = "location_history"
    TRIP_INDEX = "trip_index"
    TRIP_DETAIL = "trip_detail"


class CacheDecision(BaseModel):
    """Whether a response may be cached, and for how many days.

    ``days`` is None when the response is not cacheable.
    """

    model_config = ConfigDict(frozen=True)

    days: Optional[int] = Field(None, gt=0, description="Days until expiry")

    @classmethod
    def not_cacheable(cls) -> "CacheDecision":
        return cls(days=None)

    @classmethod
    def for_days(cls, days: int) -> "CacheDecision":
        return cls(days=days)

    @property
    def cacheable(self) -> bool:
        return self.days is not None

    @property
    def ttl_seconds(self) -> int:
        """TTL in seconds, 0 when not cacheable."""
        return (self.days or 0) * SECONDS_PER_DAY


class GatewayResponse(BaseModel):
    """A response emitted by the gateway.

    Cache entries hold the JSON dump of this model, so a cached response is
    replayed byte for byte with the headers it was stored with.
    """

    status_code: int = Field(200, description="HTTP status code")
    body: str = Field("", description="Response body text")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Response headers"
    )
    media_type: str = Field("application/json", description="Content type")
