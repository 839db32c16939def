"""Render contexts handed to the template renderer.

Every field is required, so a context is either complete or not built at all.
Field aliases are the exact variable names the templates use.
"""

from pydantic import BaseModel, ConfigDict, Field


class _RenderContext(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def as_render_context(self) -> dict[str, str]:
        """Return the mapping passed verbatim to the template renderer."""
        return self.model_dump(by_alias=True)


class RootPageContext(_RenderContext):
    """Context for the portal root mount page."""

    base_url: str = Field(..., alias="baseUrl")
    resource_key: str = Field(..., alias="resourceKey")
    mount_node_id: str = Field(..., alias="mountNodeId")


class SettingsPageContext(_RenderContext):
    """Context for the space/project scoped settings page."""

    base_url: str = Field(..., alias="baseUrl")
    current_user: str = Field(..., alias="currentUser")
    space_key: str = Field(..., alias="spaceKey")
