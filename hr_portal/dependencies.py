"""FastAPI dependencies for dependency injection.

Collaborators live on app.state and are looked up on every request. A missing
collaborator resolves to None; the page handlers decide whether that is fatal.
"""

from fastapi import Depends, Request

from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.models import CallerIdentity
from hr_portal.protocols import IdentityProviderProtocol, PropertiesProviderProtocol, TemplateRendererProtocol

logger = get_logger(__name__)


async def get_template_renderer(request: Request) -> TemplateRendererProtocol | None:
    """Get the template renderer from app state, or None if not registered."""
    return getattr(request.app.state, "template_renderer", None)


async def get_properties_provider(request: Request) -> PropertiesProviderProtocol | None:
    """Get the application properties provider from app state, or None if not registered."""
    return getattr(request.app.state, "properties_provider", None)


async def get_identity_provider(request: Request) -> IdentityProviderProtocol | None:
    """Get the identity provider from app state, or None if not registered."""
    return getattr(request.app.state, "identity_provider", None)


async def get_caller(
    request: Request,
    identity_provider: IdentityProviderProtocol | None = Depends(get_identity_provider),
) -> CallerIdentity | None:
    """
    Resolve the caller of the current request.

    Args:
        request: The FastAPI request object.
        identity_provider: Provider used to resolve the caller.

    Returns:
        The caller, or None when no provider is registered or nobody is logged in.
    """
    if identity_provider is None:
        log_with_context(
            logger,
            "warning",
            "Identity provider not available, treating caller as anonymous",
            path=request.url.path,
            event_type="identity_unavailable",
        )
        return None

    return identity_provider.get_current_user(request)
