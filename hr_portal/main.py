"""Main FastAPI application entry point."""

from pathlib import Path

from dotenv import load_dotenv

from hr_portal.core.app_factory import create_app, load_settings
from hr_portal.logging_config import setup_logging

load_dotenv(Path(__file__).parent.parent / ".env")

settings = load_settings()
setup_logging(settings.log_level)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hr_portal.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
