"""Exception handlers for the application."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hr_portal.exceptions import PortalException
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)


async def portal_exception_handler(request: Request, exc: PortalException) -> JSONResponse:
    """Handle portal exceptions with their HTTP status codes.

    Returns a structured JSON error body instead of a page, so a failed
    render never reaches the browser as partial HTML.
    """
    log_with_context(
        logger,
        "error" if exc.status_code >= 500 else "warning",
        "Portal error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="portal_error",
    )

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(PortalException, portal_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
