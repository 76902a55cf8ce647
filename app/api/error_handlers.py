"""Error Handlers — global exception handlers for the latency probe API.

Invariants:
    - LatencyProbeError → {success: false, error, <partial progress>, timestamp}
    - Exception (catch-all) → same envelope, never leaks internal details
    - Nothing here terminates the process

Design Decisions:
    - Two-layer handler: domain (LatencyProbeError) and catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.clock import utc_timestamp
from app.core.errors import LatencyProbeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_probe_error_handler(app)
    _register_generic_error_handler(app)


def _register_probe_error_handler(app: FastAPI) -> None:
    """Register probe/infrastructure error handler."""

    @app.exception_handler(LatencyProbeError)
    async def probe_error_handler(request: Request, exc: LatencyProbeError):
        """Handle all probe errors raised by services."""
        logger.error(
            f"LatencyProbeError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "probe": getattr(exc, "probe", None),
                "completed": getattr(exc, "completed", None),
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "An unexpected error occurred",
                "timestamp": utc_timestamp(),
            },
        )
