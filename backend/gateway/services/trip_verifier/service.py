"""Trip verification for live-location endpoints."""

from typing import Any

from gateway.models import TripVerificationFailed


def verify_trip(verify: bool, payload: Any) -> bool:
    """Return True if the payload may be served.

    Only a ``trips`` list that is present and empty fails; an absent field
    (or a payload that is not a JSON object) passes.
    """
    if not verify:
        return True
    if not isinstance(payload, dict):
        return True
    trips = payload.get("trips")
    if isinstance(trips, list) and len(trips) < 1:
        return False
    return True


def ensure_active_trip(verify: bool, payload: Any) -> None:
    """Raise TripVerificationFailed if ``verify_trip`` fails."""
    if not verify_trip(verify, payload):
        raise TripVerificationFailed()
