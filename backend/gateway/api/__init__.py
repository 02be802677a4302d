from .routes import get_gateway, router, set_gateway

__all__ = ["get_gateway", "router", "set_gateway"]
