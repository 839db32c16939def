"""Application properties backed by Settings."""

from hr_portal.config import Settings


class SettingsPropertiesProvider:
    """Exposes host application properties read from Settings."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def get_base_url(self) -> str:
        """Return the host base URL without a trailing slash."""
        return self._settings.base_url.rstrip("/")
