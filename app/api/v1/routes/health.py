"""Health check route handlers.

Liveness and readiness endpoints for container orchestration, with Prometheus counters
per probe.
"""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from prometheus_client import Counter, Histogram

from app.core.logging import get_logger
from app.db.session import check_database_health

router = APIRouter()
_log = get_logger(__name__)

health_check_counter = Counter(
    "recipe_revisions_health_checks_total",
    "Total number of health checks",
    ["endpoint", "status"],
)

health_check_duration = Histogram(
    "recipe_revisions_health_check_duration_seconds",
    "Time spent on health checks",
    ["endpoint"],
)


@router.get(
    "/liveness",
    tags=["health"],
    summary="Liveness probe",
    description="Basic liveness check for Kubernetes/container orchestration.",
    status_code=status.HTTP_200_OK,
)
def liveness_probe() -> JSONResponse:
    """Liveness probe endpoint.

    Returns:
        JSONResponse with basic status
    """
    health_check_counter.labels(endpoint="liveness", status="success").inc()
    return JSONResponse(
        content={
            "status": "alive",
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "service": "recipe-revision-service",
        },
    )


@router.get(
    "/readiness",
    tags=["health"],
    summary="Readiness probe",
    description="Readiness check including database connectivity.",
    status_code=status.HTTP_200_OK,
)
def readiness_probe() -> JSONResponse:
    """Readiness probe endpoint.

    Returns 503 when the database cannot be reached, since no revision can be read or
    recorded without it.

    Returns:
        JSONResponse with readiness status and the database check
    """
    with health_check_duration.labels(endpoint="readiness").time():
        start_time = time.time()
        is_healthy = check_database_health()
        duration_ms = round((time.time() - start_time) * 1000, 2)

    if is_healthy:
        health_check_counter.labels(endpoint="readiness", status="success").inc()
        return JSONResponse(
            content={
                "status": "ready",
                "timestamp": datetime.now(tz=UTC).isoformat(),
                "checks": {
                    "database": {"status": "healthy", "response_time_ms": duration_ms},
                },
            },
        )

    _log.warning("Readiness check failed: database unreachable")
    health_check_counter.labels(endpoint="readiness", status="failed").inc()
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "not_ready",
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "checks": {
                "database": {"status": "unhealthy", "response_time_ms": duration_ms},
            },
        },
    )
