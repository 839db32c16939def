"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from hr_portal.config import Settings
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.middleware.logging_middleware import RequestLoggingMiddleware

logger = get_logger(__name__)


def get_trusted_hosts(settings: Settings) -> list[str]:
    """Split the comma separated trusted host setting into patterns."""
    return [host.strip() for host in settings.trusted_hosts.split(",") if host.strip()]


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application."""
    trusted_hosts = get_trusted_hosts(settings)
    log_with_context(
        logger,
        "info",
        "Configuring TrustedHost middleware",
        event_type="security_config",
        hosts=trusted_hosts,
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=trusted_hosts,
    )

    app.add_middleware(RequestLoggingMiddleware)
