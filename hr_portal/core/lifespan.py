"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from hr_portal import __version__
from hr_portal.config import Settings
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.services.identity_service import HeaderIdentityProvider
from hr_portal.services.properties_service import SettingsPropertiesProvider
from hr_portal.services.template_service import JinjaTemplateRenderer

logger = get_logger(__name__)


def register_collaborators(app: FastAPI, settings: Settings) -> None:
    """Create the host collaborators and store them on app state."""
    app.state.template_renderer = JinjaTemplateRenderer()
    app.state.properties_provider = SettingsPropertiesProvider(settings)
    app.state.identity_provider = HeaderIdentityProvider.from_settings(settings)
    log_with_context(
        logger,
        "info",
        "Collaborators registered",
        base_url=settings.base_url,
        identity_header=settings.identity_display_name_header,
        event_type="collaborators_ready",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so the server reports them.
    """
    log_with_context(
        logger,
        "info",
        "Starting HR portal application",
        version=__version__,
        event_type="app_startup",
    )

    register_collaborators(app, app.state.settings)

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        for name in ("template_renderer", "properties_provider", "identity_provider"):
            if hasattr(app.state, name):
                delattr(app.state, name)
        log_with_context(
            logger,
            "info",
            "Shutting down HR portal application",
            event_type="app_shutdown",
        )
