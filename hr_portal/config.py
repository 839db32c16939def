from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # hr-portal/


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from environment variables or the .env file in the project root.
    Only ``base_url`` is required; everything else has a working default.
    """

    # Host application
    base_url: str = Field(pattern=r"^https?://", description="Absolute base URL of the host application")

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Comma separated host patterns accepted by TrustedHostMiddleware
    trusted_hosts: str = Field(default="localhost,127.0.0.1,testserver", description="Trusted Host header values")

    # Identity headers forwarded by the host's authenticating proxy
    identity_display_name_header: str = Field(
        default="X-Remote-User-Display-Name", min_length=1, description="Header carrying the caller's display name"
    )
    identity_username_header: str = Field(
        default="X-Remote-User", min_length=1, description="Header carrying the caller's username"
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("base_url", mode="after")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip whitespace and any trailing slash from the base URL."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be a valid http:// or https:// URL")
        return v

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a stdlib logging level."""
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    The .env file is read once, on first call.

    Example:
        @router.get("/")
        async def route(settings: Settings = Depends(get_settings)):
            return {"base_url": settings.base_url}
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
