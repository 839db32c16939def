"""Request handlers for the portal root and settings pages."""

from collections.abc import Mapping

from hr_portal.exceptions import CollaboratorUnavailableException
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.models import CallerIdentity, RootPageContext, SettingsPageContext
from hr_portal.protocols import OutputSink, PropertiesProviderProtocol, TemplateRendererProtocol
from hr_portal.views.context_keys import resolve_context_key

logger = get_logger(__name__)

ROOT_TEMPLATE = "hr-portal.html"
SETTINGS_TEMPLATE = "portal-settings.html"

RESOURCE_KEY = "com.switchhr.jsm.hrportal:hr-portal-resources"
MOUNT_NODE_ID = "hr-portal-root"
ANONYMOUS_USER = "Anonymous"


def require_collaborators(
    template_renderer: TemplateRendererProtocol | None,
    properties: PropertiesProviderProtocol | None,
) -> tuple[TemplateRendererProtocol, PropertiesProviderProtocol]:
    """Return both collaborators, failing the request if either is missing.

    Raises:
        CollaboratorUnavailableException: If a collaborator was not provided
    """
    if template_renderer is None:
        raise CollaboratorUnavailableException("TemplateRenderer")
    if properties is None:
        raise CollaboratorUnavailableException("ApplicationProperties")
    return template_renderer, properties


class PortalRootHandler:
    """Renders the page the client-side portal app mounts into.

    The context never depends on the request, only on host configuration.
    """

    def __init__(
        self,
        template_renderer: TemplateRendererProtocol | None,
        properties: PropertiesProviderProtocol | None,
    ):
        self.template_renderer = template_renderer
        self.properties = properties

    def build_context(self) -> RootPageContext:
        _, properties = require_collaborators(self.template_renderer, self.properties)
        return RootPageContext(
            base_url=properties.get_base_url(),
            resource_key=RESOURCE_KEY,
            mount_node_id=MOUNT_NODE_ID,
        )

    def handle(self, sink: OutputSink) -> RootPageContext:
        """Render the root page into sink.

        Returns:
            The context the page was rendered with

        Raises:
            CollaboratorUnavailableException: Before anything is written
        """
        template_renderer, _ = require_collaborators(self.template_renderer, self.properties)
        context = self.build_context()
        template_renderer.render(ROOT_TEMPLATE, context.as_render_context(), sink)
        return context


class PortalSettingsHandler:
    """Renders the settings page for a space or project."""

    def __init__(
        self,
        template_renderer: TemplateRendererProtocol | None,
        properties: PropertiesProviderProtocol | None,
        caller: CallerIdentity | None,
    ):
        self.template_renderer = template_renderer
        self.properties = properties
        self.caller = caller

    def current_user(self) -> str:
        """Return the caller's display name, or "Anonymous"."""
        if self.caller is None or not self.caller.display_name.strip():
            return ANONYMOUS_USER
        return self.caller.display_name

    def build_context(self, params: Mapping[str, str]) -> SettingsPageContext:
        _, properties = require_collaborators(self.template_renderer, self.properties)
        return SettingsPageContext(
            base_url=properties.get_base_url(),
            current_user=self.current_user(),
            space_key=resolve_context_key(params),
        )

    def handle(self, params: Mapping[str, str], sink: OutputSink) -> SettingsPageContext:
        """Render the settings page for the space/project named in params.

        Args:
            params: Request query parameters (spaceKey, projectKey)
            sink: Writable text sink

        Returns:
            The context the page was rendered with

        Raises:
            CollaboratorUnavailableException: Before anything is written
        """
        template_renderer, _ = require_collaborators(self.template_renderer, self.properties)
        context = self.build_context(params)
        log_with_context(
            logger,
            "debug",
            "Rendering portal settings",
            space_key=context.space_key,
            anonymous=self.caller is None,
            event_type="settings_render",
        )
        template_renderer.render(SETTINGS_TEMPLATE, context.as_render_context(), sink)
        return context
