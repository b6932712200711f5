"""Application entry point.

This module initializes the FastAPI application and configures its middleware,
exception handlers and routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from app.api.v1.routes import api_router
from app.core.config.config import get_settings
from app.core.logging import get_logger
from app.db.session import engine
from app.exceptions.custom_exceptions import DatabaseUnavailableError
from app.exceptions.handlers import (
    database_unavailable_exception_handler,
    unhandled_exception_handler,
)
from app.middleware.request_id_middleware import RequestIDMiddleware

_log = get_logger(__name__)
settings = get_settings()

SERVICE_NAME = "Recipe Revision Service"
SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan management.

    Args:
        _app: FastAPI application instance

    Yields:
        None during application lifecycle
    """
    _log.info("Starting {} {}", SERVICE_NAME, SERVICE_VERSION)
    yield
    _log.info("Shutting down {}", SERVICE_NAME)
    engine.dispose()


app = FastAPI(
    title=SERVICE_NAME,
    version=SERVICE_VERSION,
    description=(
        "Records a typed, field-level history of changes to recipe ingredients and "
        "steps and serves it back newest first."
    ),
    openapi_version="3.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Prometheus instrumentation (must be done before middleware setup)
instrumentator = Instrumentator()
instrumentator.instrument(app).expose(app)

# Exception handlers
app.add_exception_handler(
    DatabaseUnavailableError,
    database_unavailable_exception_handler,
)
app.add_exception_handler(Exception, unhandled_exception_handler)

# Middleware stack (order matters!)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "PUT", "OPTIONS"],
    allow_headers=["*"],
)
app.add_middleware(RequestIDMiddleware)

# Routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/", tags=["Root"], summary="Root endpoint")
async def root() -> JSONResponse:
    """Root endpoint providing basic service information.

    Returns:
        JSONResponse with service information
    """
    return JSONResponse(
        content={
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "status": "operational",
            "docs": "/docs",
            "health": "/api/v1/liveness",
        },
    )
