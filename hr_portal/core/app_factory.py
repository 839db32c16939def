"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from hr_portal import __version__
from hr_portal.config import Settings, get_settings
from hr_portal.core.lifespan import lifespan
from hr_portal.core.middleware import setup_middleware
from hr_portal.exceptions import ConfigurationException
from hr_portal.middleware.error_handlers import register_error_handlers
from hr_portal.routers import health_router, portal_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def load_settings() -> Settings:
    """Load settings, reporting validation problems as a configuration error."""
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationException(
            "Invalid HR portal configuration",
            details={"errors": [".".join(str(part) for part in err["loc"]) for err in e.errors()]},
        ) from e


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment (tests)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title="HR Portal",
        description="Server-rendered mount and settings pages for the embedded HR portal.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    setup_middleware(app, settings)

    register_error_handlers(app)

    # Client bundle (hr-portal.js / hr-portal.css) built by the frontend project
    if STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(portal_router.router, tags=["portal"])
    app.include_router(health_router.router, tags=["health"])

    return app
