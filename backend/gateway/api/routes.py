"""API routes for the trip gateway.

A single catch-all route hands every request to the ``TripGateway``. The
gateway decides what is allowed, so the route accepts every method and
every path and only translates between HTTP and the pipeline.
"""

import logging

from fastapi import APIRouter, Request, Response

from gateway.config import GatewaySettings
from gateway.services.pipeline import TripGateway, create_gateway

logger = logging.getLogger(__name__)

router = APIRouter()

# Accept everything; the classifier answers 405 for the rest.
ROUTED_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]

# Service instance
_gateway: TripGateway | None = None


def get_gateway() -> TripGateway:
    global _gateway
    if _gateway is None:
        _gateway = create_gateway(GatewaySettings.from_env())
    return _gateway


def set_gateway(gateway: TripGateway | None) -> None:
    """Install the gateway used by the routes (None resets it)."""
    global _gateway
    _gateway = gateway


@router.api_route("/{full_path:path}", methods=ROUTED_METHODS, include_in_schema=False)
async def proxy(request: Request) -> Response:
    """Proxy an allowlisted request to the tracking backend."""
    gateway = get_gateway()
    result = await gateway.handle(
        request.method, request.url.path, request.url.query
    )
    body = result.body.encode("utf-8")
    headers = dict(result.headers)
    if request.method == "HEAD":
        # Advertise the length a GET would send.
        headers["content-length"] = str(len(body))
        body = b""
    return Response(
        content=body,
        status_code=result.status_code,
        headers=headers,
        media_type=result.media_type,
    )
