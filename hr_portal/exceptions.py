"""Custom exceptions for the HR portal with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    PORTAL_ERROR = "PORTAL_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Collaborator errors
    COLLABORATOR_UNAVAILABLE = "COLLABORATOR_UNAVAILABLE"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class PortalException(Exception):
    """Base exception for portal errors with HTTP status code support.

    All custom exceptions inherit from this class so the registered
    exception handler can turn them into structured error responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.PORTAL_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize portal exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class CollaboratorUnavailableException(PortalException):
    """A required host collaborator (template renderer, properties) is missing.

    Absence means the host is misconfigured, so the request fails outright.
    """

    def __init__(self, collaborator: str, details: dict[str, Any] | None = None):
        self.collaborator = collaborator
        super().__init__(
            f"{collaborator} service is not available",
            code=ErrorCode.COLLABORATOR_UNAVAILABLE,
            status_code=500,
            details={"collaborator": collaborator, **(details or {})},
        )


class TemplateRenderException(PortalException):
    """The template engine failed to produce markup."""

    def __init__(self, message: str, template_id: str, details: dict[str, Any] | None = None):
        self.template_id = template_id
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            status_code=500,
            details={"template_id": template_id, **(details or {})},
        )


class ConfigurationException(PortalException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
