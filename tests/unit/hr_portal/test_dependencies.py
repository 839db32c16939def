"""Tests for dependency injection functions."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from hr_portal.dependencies import (
    get_caller,
    get_identity_provider,
    get_properties_provider,
    get_template_renderer,
)
from hr_portal.models import CallerIdentity


def make_request(**state):
    """Create a mock request whose app state holds only the given attributes."""
    mock_request = MagicMock()
    mock_request.app.state = SimpleNamespace(**state)
    mock_request.url.path = "/settings"
    return mock_request


class TestDependencies:
    """Tests for collaborator lookups."""

    @pytest.mark.asyncio
    async def test_get_template_renderer(self, fake_renderer):
        renderer = await get_template_renderer(make_request(template_renderer=fake_renderer))

        assert renderer is fake_renderer

    @pytest.mark.asyncio
    async def test_get_properties_provider(self, fake_properties):
        provider = await get_properties_provider(make_request(properties_provider=fake_properties))

        assert provider is fake_properties

    @pytest.mark.asyncio
    async def test_missing_collaborators_are_none(self):
        request = make_request()

        assert await get_template_renderer(request) is None
        assert await get_properties_provider(request) is None
        assert await get_identity_provider(request) is None


class TestGetCaller:
    """Tests for caller resolution."""

    @pytest.mark.asyncio
    async def test_caller_from_provider(self, jane_doe):
        provider = MagicMock()
        provider.get_current_user.return_value = jane_doe
        request = make_request()

        caller = await get_caller(request, provider)

        assert caller == CallerIdentity(display_name="Jane Doe", username="jdoe")
        provider.get_current_user.assert_called_once_with(request)

    @pytest.mark.asyncio
    async def test_no_provider_is_anonymous(self):
        assert await get_caller(make_request(), None) is None
