from typing import Any

from pydantic import BaseModel, Field

from core.config import DEFAULT_SERVER_PATH


class ProjectChannel(BaseModel):
    """A named association between a launcher entry and a Unity project/scene."""

    id: str
    name: str
    unity_project_path: str
    scene_path: str | None = None
    enabled: bool


class LauncherConfig(BaseModel):
    """The launcher's own settings document.

    ``active_channel_id`` should reference one of ``channels`` but this is not
    enforced on load or save.
    """

    channels: list[ProjectChannel]
    active_channel_id: str | None = None
    mcp_server_path: str
    auto_start: bool

    @classmethod
    def default(cls, mcp_server_path: str = DEFAULT_SERVER_PATH) -> "LauncherConfig":
        return cls(
            channels=[],
            active_channel_id=None,
            mcp_server_path=mcp_server_path,
            auto_start=False,
        )

    def find_channel(self, channel_id: str) -> ProjectChannel | None:
        for channel in self.channels:
            if channel.id == channel_id:
                return channel
        return None

    @property
    def active_channel(self) -> ProjectChannel | None:
        if self.active_channel_id is None:
            return None
        return self.find_channel(self.active_channel_id)


class McpServerEntry(BaseModel):
    """Launch descriptor written under ``mcpServers`` in the assistant registry."""
    command: str = "node"
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)


class CommandResponse(BaseModel):
    """Envelope returned across the host UI boundary."""
    success: bool
    message: str | None = None
    error: str | None = None
    data: Any | None = None
