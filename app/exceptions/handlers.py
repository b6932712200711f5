"""Exception handlers.

Contains the application-wide FastAPI exception handlers. Domain errors of the revision
history are translated by the routes that raise them; only infrastructure failures and
unexpected errors reach these handlers.
"""

from fastapi import Request
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse, Response

from app.core.logging import get_logger
from app.exceptions.custom_exceptions import DatabaseUnavailableError

_log = get_logger(__name__)


async def database_unavailable_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse | Response:
    """Handle database unavailable exceptions.

    Args:
        request: The incoming request that caused the exception.
        exc: The database unavailable exception.

    Returns:
        JSONResponse with 503 status and error details.
    """
    db_error = exc if isinstance(exc, DatabaseUnavailableError) else None

    _log.opt(exception=db_error.get_original_error() if db_error else None).warning(
        "Database unavailable for request to {}: {}",
        request.url.path,
        str(exc),
    )

    return JSONResponse(
        status_code=503,
        content={
            "detail": (
                "Service temporarily unavailable due to database connectivity issues"
            ),
            "type": "database_unavailable",
            "retry_after": 60,
        },
        headers={"Retry-After": "60"},
    )


async def unhandled_exception_handler(_request: Request, exc: Exception) -> Response:
    """Handle unhandled exceptions in the FastAPI application.

    HTTPExceptions are re-raised so FastAPI renders them as usual.

    Args:
        _request (Request): The incoming request that caused the exception.
        exc (Exception): The exception that was raised.

    Returns:
        Response: A 500 response with a generic error message.
    """
    if isinstance(exc, HTTPException):
        raise exc
    _log.opt(exception=exc).error("Unhandled exception occurred")
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected error occurred."},
    )
