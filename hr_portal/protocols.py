"""Protocol definitions for the host collaborators.

Handlers only depend on these interfaces, so tests can pass plain fakes.
"""

from collections.abc import Mapping
from typing import Protocol

from fastapi import Request

from hr_portal.models import CallerIdentity


class OutputSink(Protocol):
    """Anything rendered markup can be written to (e.g. io.StringIO)."""

    def write(self, text: str, /) -> int: ...


class TemplateRendererProtocol(Protocol):
    """Renders a template identifier with a context into an output sink."""

    def render(self, template_id: str, context: Mapping[str, str], sink: OutputSink) -> None:
        """Render template_id with context, writing markup to sink.

        Raises:
            TemplateRenderException: If the template cannot be rendered
        """
        ...


class PropertiesProviderProtocol(Protocol):
    """Supplies host application properties."""

    def get_base_url(self) -> str:
        """Return the absolute base URL of the host application."""
        ...


class IdentityProviderProtocol(Protocol):
    """Resolves the caller of a request."""

    def get_current_user(self, request: Request) -> CallerIdentity | None:
        """Return the authenticated caller, or None for anonymous requests."""
        ...
