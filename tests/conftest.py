"""Pytest configuration and shared fixtures."""

from collections.abc import Mapping

import pytest
from fastapi.testclient import TestClient

from hr_portal.config import Settings
from hr_portal.core.app_factory import create_app
from hr_portal.models import CallerIdentity

BASE_URL = "https://jira.example.com"


class FakeTemplateRenderer:
    """Records render calls and writes a marker line per call."""

    def __init__(self):
        self.calls: list[tuple[str, dict[str, str]]] = []

    def render(self, template_id: str, context: Mapping[str, str], sink) -> None:
        self.calls.append((template_id, dict(context)))
        sink.write(f"<rendered {template_id}>")

    @property
    def last_context(self) -> dict[str, str]:
        return self.calls[-1][1]


class FakePropertiesProvider:
    def __init__(self, base_url: str = BASE_URL):
        self.base_url = base_url

    def get_base_url(self) -> str:
        return self.base_url


@pytest.fixture
def test_settings():
    """Settings with test values, independent of the environment and .env."""
    return Settings(
        _env_file=None,
        base_url=BASE_URL,
        api_host="127.0.0.1",
        api_port=8000,
        trusted_hosts="testserver,localhost",
    )


@pytest.fixture
def fake_renderer():
    return FakeTemplateRenderer()


@pytest.fixture
def fake_properties():
    return FakePropertiesProvider()


@pytest.fixture
def jane_doe():
    return CallerIdentity(display_name="Jane Doe", username="jdoe")


@pytest.fixture
def app(test_settings):
    """FastAPI app built from test settings."""
    application = create_app(test_settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app) as client:
        yield client
