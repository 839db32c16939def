"""Health endpoint."""

from fastapi import APIRouter

from hr_portal import __version__
from hr_portal.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint for container and host probes."""
    return HealthResponse(status="ok", version=__version__)
