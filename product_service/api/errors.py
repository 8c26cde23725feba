"""Error body shared by every failing endpoint."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build ``{error, error_code, details, request_id}``.

    ``request_id`` comes from the request ID middleware and is None when
    the request never passed through it.
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "error_code": error_code,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )
