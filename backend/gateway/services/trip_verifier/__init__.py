from .service import ensure_active_trip, verify_trip

__all__ = ["ensure_active_trip", "verify_trip"]
