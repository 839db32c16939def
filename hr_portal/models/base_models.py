"""Pydantic models for callers and health checks."""

from pydantic import BaseModel, Field


class CallerIdentity(BaseModel):
    """The already resolved caller of a request."""

    display_name: str = Field(..., description="Human-readable name shown on pages")
    username: str | None = Field(default=None, description="Login name, when the host provides one")


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
