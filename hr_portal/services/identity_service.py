"""Caller identity resolution from headers set by the host's auth proxy."""

from fastapi import Request

from hr_portal.config import Settings
from hr_portal.logging_config import get_logger, log_with_context
from hr_portal.models import CallerIdentity

logger = get_logger(__name__)


class HeaderIdentityProvider:
    """Resolves the caller from trusted identity headers.

    The host authenticates the user and forwards the display name (and
    optionally the username). A missing or blank display name header means
    the request is anonymous.
    """

    def __init__(self, display_name_header: str, username_header: str):
        self.display_name_header = display_name_header
        self.username_header = username_header

    @classmethod
    def from_settings(cls, settings: Settings) -> "HeaderIdentityProvider":
        return cls(settings.identity_display_name_header, settings.identity_username_header)

    def get_current_user(self, request: Request) -> CallerIdentity | None:
        """Return the caller named by the identity headers, or None."""
        display_name = (request.headers.get(self.display_name_header) or "").strip()
        if not display_name:
            return None

        username = (request.headers.get(self.username_header) or "").strip() or None
        log_with_context(
            logger,
            "debug",
            "Caller resolved from identity headers",
            username=username,
            event_type="identity_resolved",
        )
        return CallerIdentity(display_name=display_name, username=username)
