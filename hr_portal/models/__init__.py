"""Pydantic models for render contexts, callers and health responses."""

from hr_portal.models.base_models import CallerIdentity, HealthResponse
from hr_portal.models.render_context import RootPageContext, SettingsPageContext

__all__ = [
    "CallerIdentity",
    "HealthResponse",
    "RootPageContext",
    "SettingsPageContext",
]
