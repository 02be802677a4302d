"""Gateway request pipeline."""

from .service import CACHE_STATUS_HEADER, CORS_HEADERS, TripGateway, create_gateway

__all__ = ["CACHE_STATUS_HEADER", "CORS_HEADERS", "TripGateway", "create_gateway"]
