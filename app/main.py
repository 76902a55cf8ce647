"""Latency Probe API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LatencyProbeError → structured JSON responses
    - Supabase client built once on startup via lifespan, shared by every request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - run() wraps uvicorn so Railway can start the service with PORT from settings
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import info, latency_tests
from app.config import get_settings
from app.infrastructure.observability import setup_logging
from app.infrastructure.supabase_client import init_probe_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_probe_database(settings)
    logger.info(f"Latency test server running on port {settings.port}")
    logger.info(
        f"Railway Region: {settings.railway_region}",
        extra={"region": settings.railway_region},
    )
    logger.info(f"Supabase URL: {settings.supabase_url or 'not set'}")
    yield
    logger.info("Latency test server shutting down")


app = FastAPI(
    title="Railway-Supabase Latency Test Server", version="1.0.0",
    lifespan=lifespan,
)

# Routes: explicit registration
app.include_router(info.router)
app.include_router(latency_tests.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on HOST:PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
