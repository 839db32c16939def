"""Tests for render context models."""

import pytest
from pydantic import ValidationError

from hr_portal.models import RootPageContext, SettingsPageContext


def test_root_context_uses_template_names():
    context = RootPageContext(base_url="https://x", resource_key="key", mount_node_id="node")

    assert context.as_render_context() == {"baseUrl": "https://x", "resourceKey": "key", "mountNodeId": "node"}


def test_settings_context_accepts_aliases():
    context = SettingsPageContext(baseUrl="https://x", currentUser="Jane Doe", spaceKey="HR")

    assert context.current_user == "Jane Doe"
    assert set(context.as_render_context()) == {"baseUrl", "currentUser", "spaceKey"}


def test_partial_context_rejected():
    with pytest.raises(ValidationError):
        SettingsPageContext(base_url="https://x", current_user="Jane Doe")
