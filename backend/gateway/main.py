"""Trip Gateway FastAPI Application.

Main entry point for the gateway server:

    uvicorn gateway.main:app
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from gateway.api import router, set_gateway
from gateway.config import GatewaySettings
from gateway.models import ConfigurationError, GatewayError
from gateway.services.pipeline import CORS_HEADERS, create_gateway

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = GatewaySettings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    try:
        settings.validate_backend()
    except ConfigurationError:
        logger.critical("[GATEWAY] SERVICE_HOST is not set, refusing to start")
        raise
    gateway = create_gateway(settings)
    set_gateway(gateway)
    logger.info(f"[GATEWAY] Proxying allowlisted endpoints to {settings.service_host}")
    yield
    # Shutdown
    await gateway.close()
    set_gateway(None)


app = FastAPI(
    title="Trip Gateway",
    description="Allowlisting, privacy-redacting cache in front of the trip tracker",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def _plain_text(request: Request, status_code: int, message: str) -> PlainTextResponse:
    content = "" if request.method == "HEAD" else message
    return PlainTextResponse(content, status_code=status_code, headers=CORS_HEADERS)


# Global exception handlers
@app.exception_handler(GatewayError)
async def gateway_exception_handler(request: Request, exc: GatewayError):
    """Render gateway errors as plain text."""
    logger.info(
        f"[GATEWAY] {request.method} {request.url.path} -> "
        f"{exc.status_code} {exc.code.value}"
    )
    return _plain_text(request, exc.status_code, exc.message)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"[GATEWAY] Unhandled error for {request.url.path}")
    return _plain_text(request, 500, "Internal gateway error")


# Include API routes
app.include_router(router)
