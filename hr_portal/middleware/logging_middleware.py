"""Request logging middleware with sensitive data redaction."""

import re
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from hr_portal.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "token",
    "password",
    "secret",
    "access_token",
    "auth_token",
    "authorization",
    "session",
]


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"{param}=([^&\s\"]+)"
        redacted = re.sub(pattern, f"{param}=***REDACTED***", redacted)
    return redacted


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, redacted URL, status and duration of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        log_with_context(
            logger,
            "info",
            "Request handled",
            method=request.method,
            url=redact_sensitive_data(str(request.url)),
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
            event_type="http_request",
        )
        return response
