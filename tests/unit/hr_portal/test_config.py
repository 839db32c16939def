"""Unit tests for configuration."""

import pytest
from pydantic import ValidationError

from hr_portal.config import Settings
from hr_portal.core.middleware import get_trusted_hosts


def test_settings_defaults(monkeypatch):
    """Test Settings model has correct defaults."""
    for name in ("API_HOST", "API_PORT", "LOG_LEVEL", "TRUSTED_HOSTS", "IDENTITY_DISPLAY_NAME_HEADER"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None, base_url="https://jira.example.com")

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.identity_display_name_header == "X-Remote-User-Display-Name"


def test_base_url_required(monkeypatch):
    """Test base_url must be provided."""
    monkeypatch.delenv("BASE_URL", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_base_url_trailing_slash_stripped():
    settings = Settings(_env_file=None, base_url="https://jira.example.com/ ")

    assert settings.base_url == "https://jira.example.com"


def test_base_url_must_be_http():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, base_url="ftp://jira.example.com")


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("BASE_URL", "http://localhost:2990/jira")

    settings = Settings(_env_file=None)

    assert settings.base_url == "http://localhost:2990/jira"


def test_log_level_normalized():
    settings = Settings(_env_file=None, base_url="https://jira.example.com", log_level="debug")

    assert settings.log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, base_url="https://jira.example.com", log_level="LOUD")


def test_invalid_port():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, base_url="https://jira.example.com", api_port=70000)


def test_trusted_hosts_split(test_settings):
    settings = test_settings.model_copy(update={"trusted_hosts": " portal.example.com , localhost,, "})

    assert get_trusted_hosts(settings) == ["portal.example.com", "localhost"]


def test_load_settings_reports_configuration_error(monkeypatch):
    """Test invalid configuration surfaces as ConfigurationException."""
    from hr_portal.core import app_factory
    from hr_portal.exceptions import ConfigurationException, ErrorCode

    monkeypatch.delenv("BASE_URL", raising=False)
    monkeypatch.setattr(app_factory, "get_settings", lambda: Settings(_env_file=None))

    with pytest.raises(ConfigurationException) as exc_info:
        app_factory.load_settings()

    assert exc_info.value.code == ErrorCode.CONFIG_ERROR
    assert exc_info.value.details["errors"] == ["base_url"]
