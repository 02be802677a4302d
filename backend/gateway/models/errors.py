"""Gateway error taxonomy.

Every failure the gateway can produce for a request is a ``GatewayError``.
Each one is terminal for the request, is never retried and carries the
status code and plain-text body the HTTP layer responds with.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes, used in logs."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    POLICY_DENIED = "POLICY_DENIED"
    TRIP_VERIFICATION_FAILED = "TRIP_VERIFICATION_FAILED"
    UPSTREAM_DECODE_ERROR = "UPSTREAM_DECODE_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_STATUS = "UPSTREAM_STATUS"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GatewayError(Exception):
    """Base class for request-terminating gateway errors."""

    status_code: int = 500
    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_message: str = "Internal gateway error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(GatewayError):
    """The backend base address is not configured."""

    status_code = 500
    code = ErrorCode.CONFIGURATION_ERROR
    default_message = "Backend endpoint not specified"


class MethodNotAllowedError(GatewayError):
    status_code = 405
    code = ErrorCode.METHOD_NOT_ALLOWED
    default_message = "Method not allowed"


class PolicyDeniedError(GatewayError):
    status_code = 403
    code = ErrorCode.POLICY_DENIED
    default_message = "Endpoint not in allowlist"


class TripVerificationFailed(GatewayError):
    """The payload shows no active trip for a trip-gated endpoint."""

    status_code = 403
    code = ErrorCode.TRIP_VERIFICATION_FAILED
    default_message = "No valid trip for this time"


class UpstreamDecodeError(GatewayError):
    """The backend answered with a body that is not valid JSON."""

    status_code = 502
    code = ErrorCode.UPSTREAM_DECODE_ERROR
    default_message = "Invalid JSON from API"


class UpstreamUnavailableError(GatewayError):
    status_code = 502
    code = ErrorCode.UPSTREAM_UNAVAILABLE
    default_message = "Backend unavailable"


class UpstreamTimeoutError(GatewayError):
    status_code = 504
    code = ErrorCode.UPSTREAM_TIMEOUT
    default_message = "Backend timed out"


class UpstreamStatusError(GatewayError):
    """The backend answered with valid JSON but a non-200 status.

    The upstream status is passed through; the upstream body is not.
    """

    code = ErrorCode.UPSTREAM_STATUS

    def __init__(self, upstream_status: int) -> None:
        self.status_code = upstream_status
        super().__init__(f"Upstream returned status {upstream_status}")
