"""Page routes for the portal root and settings pages."""

import io

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from hr_portal.dependencies import get_caller, get_properties_provider, get_template_renderer
from hr_portal.models import CallerIdentity
from hr_portal.protocols import PropertiesProviderProtocol, TemplateRendererProtocol
from hr_portal.views.portal_handlers import PortalRootHandler, PortalSettingsHandler

router = APIRouter()

HTML_MEDIA_TYPE = "text/html; charset=utf-8"


@router.get("/", response_class=HTMLResponse)
async def portal_root(
    template_renderer: TemplateRendererProtocol | None = Depends(get_template_renderer),
    properties: PropertiesProviderProtocol | None = Depends(get_properties_provider),
):
    """Render the page the portal client app mounts into."""
    # Render into a buffer so a failure never leaves a partial page
    buffer = io.StringIO()
    PortalRootHandler(template_renderer, properties).handle(buffer)
    return HTMLResponse(content=buffer.getvalue(), media_type=HTML_MEDIA_TYPE)


@router.get("/settings", response_class=HTMLResponse)
async def portal_settings(
    request: Request,
    template_renderer: TemplateRendererProtocol | None = Depends(get_template_renderer),
    properties: PropertiesProviderProtocol | None = Depends(get_properties_provider),
    caller: CallerIdentity | None = Depends(get_caller),
):
    """Render the settings page for the space/project in spaceKey or projectKey."""
    buffer = io.StringIO()
    PortalSettingsHandler(template_renderer, properties, caller).handle(request.query_params, buffer)
    return HTMLResponse(content=buffer.getvalue(), media_type=HTML_MEDIA_TYPE)
