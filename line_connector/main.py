"""
FastAPI application hosting the LINE social connector.

This module wires dependencies and configures the application.
Connector logic is in line_connector/integrations/line.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime

# Configure logging FIRST, before other local imports
from line_connector.logging_config import setup_global_logging

setup_global_logging()

# Now import other modules (they will use the configured logging)
import httpx  # noqa: E402
from fastapi import FastAPI, Request, status  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from line_connector.core.exceptions import ConnectorError, ConnectorErrorCode  # noqa: E402
from line_connector.oauth import router as connector_router  # noqa: E402

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    The connector is stateless, so there is nothing to open or close.
    """
    logger.info("Application starting up...")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="LINE Connector",
    description="Hosts the LINE social login connector",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Centralized Exception Handlers
# ============================================================================

CONNECTOR_ERROR_STATUS = {
    ConnectorErrorCode.AUTHORIZATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ConnectorErrorCode.SOCIAL_ACCESS_TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ConnectorErrorCode.SOCIAL_ID_TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ConnectorErrorCode.INVALID_CONFIG: status.HTTP_503_SERVICE_UNAVAILABLE,
    ConnectorErrorCode.INVALID_RESPONSE: status.HTTP_502_BAD_GATEWAY,
    ConnectorErrorCode.GENERAL: status.HTTP_400_BAD_REQUEST,
}


@app.exception_handler(ConnectorError)
async def connector_error_handler(request: Request, exc: ConnectorError):
    """
    Handle connector errors.

    Maps each error code to an HTTP status. Validator detail is included for
    debugging; it never contains credentials or tokens.
    """
    status_code = CONNECTOR_ERROR_STATUS.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning(
        f"Connector error: {exc.code.value}",
        extra={"extra_fields": {"path": request.url.path}},
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "code": exc.code.value,
            "details": exc.data,
        },
    )


@app.exception_handler(httpx.HTTPError)
async def upstream_error_handler(request: Request, exc: httpx.HTTPError):
    """
    Handle transport errors the connector does not classify.

    Returns 502 Bad Gateway; the request cannot complete.
    """
    logger.error(f"Upstream error: {exc!r}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "status": "error",
            "message": "LINE request failed",
        },
    )


@app.exception_handler(TimeoutError)
async def upstream_timeout_handler(request: Request, exc: TimeoutError):
    """
    Handle a LINE call that exceeded the connector timeout.

    Returns 504 Gateway Timeout.
    """
    logger.error(f"Upstream timeout on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={
            "status": "error",
            "message": "LINE request timed out",
        },
    )


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "line-connector",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(connector_router.router)


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
