"""Privacy redactor: protected-zone decoys and stationary-point removal."""

from .service import (
    PROTECTED_ZONES,
    ProtectedZone,
    redact_coordinates,
    redact_payload,
    remove_stationary,
    substitute_point,
)

__all__ = [
    "PROTECTED_ZONES",
    "ProtectedZone",
    "redact_coordinates",
    "redact_payload",
    "remove_stationary",
    "substitute_point",
]
