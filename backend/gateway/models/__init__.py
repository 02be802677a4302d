"""Gateway data models and error taxonomy."""

from .core import SECONDS_PER_DAY, CacheDecision, GatewayResponse, RouteKind
from .errors import (
    ConfigurationError,
    ErrorCode,
    GatewayError,
    MethodNotAllowedError,
    PolicyDeniedError,
    TripVerificationFailed,
    UpstreamDecodeError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

__all__ = [
    "SECONDS_PER_DAY",
    "CacheDecision",
    "GatewayResponse",
    "RouteKind",
    "ConfigurationError",
    "ErrorCode",
    "GatewayError",
    "MethodNotAllowedError",
    "PolicyDeniedError",
    "TripVerificationFailed",
    "UpstreamDecodeError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]
