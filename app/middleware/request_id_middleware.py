"""Request ID middleware.

Assigns every HTTP request an ID that is echoed in the response and bound into the
Loguru context, so all log lines of a request, including those written while
recording or reading revisions, can be correlated.
"""

import uuid
from collections.abc import Awaitable, Callable

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
REQUEST_ID_CONTEXT_KEY = "request_id"
MAX_REQUEST_ID_LENGTH = 128


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to assign a unique request ID to each HTTP request.

    An incoming ``X-Request-ID`` header is reused when present and reasonably short;
    otherwise a new UUID is generated. The ID is stored on ``request.state`` and
    returned in the response headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Assign or propagate a request ID for the incoming HTTP request.

        Args:
            request (Request): The incoming HTTP request.
            call_next (Callable): The next middleware or route handler.

        Returns:
            Response: The HTTP response with the request ID header included.
        """
        request_id = request.headers.get(REQUEST_ID_HEADER, "").strip()
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        with logger.contextualize(**{REQUEST_ID_CONTEXT_KEY: request_id}):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
