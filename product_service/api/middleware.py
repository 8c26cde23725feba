"""API middleware for the product service.

Provides:
- Request ID correlation and access logging
- Error handling
"""

import re
import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from product_service.api.errors import error_response

logger = structlog.get_logger()


# ============================================================================
# Request ID Middleware
# ============================================================================


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Correlate every request with an ID and log its outcome.

    A client-supplied ``X-Request-ID`` is reused when it looks like an
    opaque token; anything else is replaced with a fresh UUID. The ID is
    stored on ``request.state`` for error bodies, bound into the structlog
    context for the duration of the request and echoed in the response.
    """

    HEADER_NAME = "X-Request-ID"
    _VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

    @classmethod
    def resolve_request_id(cls, supplied: str | None) -> str:
        """Reuse a well-formed client ID, otherwise generate one."""
        if supplied and cls._VALID_ID.match(supplied):
            return supplied
        return str(uuid4())

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self.resolve_request_id(request.headers.get(self.HEADER_NAME))
        request.state.request_id = request_id

        start_time = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            log = logger.info
            if response.status_code >= 500:
                log = logger.error
            elif response.status_code >= 400:
                log = logger.warning
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

        response.headers[self.HEADER_NAME] = request_id
        return response


# ============================================================================
# Error Handling Middleware
# ============================================================================


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence for unexpected exceptions.

    Domain and validation errors are mapped by the exception handlers in
    ``product_service.main``; anything that escapes them is logged with
    its traceback and reported as a 500 ``INTERNAL_ERROR`` without
    leaking details to the client.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception("Unhandled exception", error_type=type(e).__name__)
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


# ============================================================================
# Middleware Setup
# ============================================================================


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Middleware is added in reverse order (last added = first executed).

    Args:
        app: FastAPI application instance.
    """
    # Error handling (inside request ID, so 500s still carry the header)
    app.add_middleware(ErrorHandlerMiddleware)

    # Request ID correlation (outermost)
    app.add_middleware(RequestIdMiddleware)
