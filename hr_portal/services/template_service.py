"""Jinja2 template renderer."""

from collections.abc import Mapping
from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError, TemplateNotFound

from hr_portal.exceptions import TemplateRenderException
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.protocols import OutputSink

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class JinjaTemplateRenderer:
    """Renders templates from a directory, streaming chunks into the sink."""

    def __init__(self, directory: Path = TEMPLATES_DIR):
        self.directory = directory
        self.templates = Jinja2Templates(directory=directory)

    def render(self, template_id: str, context: Mapping[str, str], sink: OutputSink) -> None:
        """Render template_id with context into sink.

        Args:
            template_id: Template file name relative to the templates directory
            context: Variables exposed to the template
            sink: Writable text sink

        Raises:
            TemplateRenderException: If the template is missing or fails to render
        """
        try:
            template = self.templates.get_template(template_id)
        except TemplateNotFound as e:
            log_with_context(
                logger,
                "error",
                "Template not found",
                template_id=template_id,
                directory=str(self.directory),
                event_type="template_not_found",
            )
            raise TemplateRenderException(f"Template not found: {template_id}", template_id) from e

        try:
            for chunk in template.generate(dict(context)):
                sink.write(chunk)
        except TemplateError as e:
            log_with_context(
                logger,
                "error",
                "Template rendering failed",
                template_id=template_id,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_render_error",
            )
            raise TemplateRenderException(f"Failed to render {template_id}: {e}", template_id) from e
