"""JSON envelope helpers for the public read endpoints.

Public endpoints answer ``{"success": ..., "message": ..., "data": ...}``
rather than raising ``HTTPException``, so the website frontend can rely on
one shape for success and failure alike.
"""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse

from showcase_api.core.config import Settings


def success_response(data: Any, **fields: Any) -> JSONResponse:
    """Build a 200 envelope carrying ``data`` plus any extra top-level fields."""
    return JSONResponse(status_code=status.HTTP_200_OK, content={"success": True, **fields, "data": data})


def not_found_response(message: str, error: str | None = None) -> JSONResponse:
    content: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=content)


def failure_response(message: str, exc: Exception, settings: Settings) -> JSONResponse:
    """Build a 500 envelope; the exception text is only exposed in debug mode."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": message,
            "error": str(exc) if settings.debug else "Internal server error",
        },
    )


def value_error_status(message: str) -> int:
    """Map a service-layer ValueError message onto an admin HTTP status."""
    if "not found" in message:
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_409_CONFLICT
