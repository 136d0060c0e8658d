"""High-level launcher actions built on the store, builder, and editors.

Each action loads the whole config, changes it, and saves it back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.config import LauncherSettings, get_settings
from core.errors import ChannelValidationError
from models.models import LauncherConfig, ProjectChannel
from services import channel_builder, extension_installer
from services.config_store import LocalConfigStore
from services.registry_editor import ClaudeRegistryEditor

logger = logging.getLogger("banter-mcp-launcher")


@dataclass
class LauncherStatus:
    """Summary shown in the launcher header."""
    state: str  # "active" | "warning" | "unconfigured"
    text: str
    channel: ProjectChannel | None = None


class LauncherService:

    def __init__(
        self,
        settings: LauncherSettings | None = None,
        store: LocalConfigStore | None = None,
        registry: ClaudeRegistryEditor | None = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or LocalConfigStore(self.settings)
        self.registry = registry or ClaudeRegistryEditor(self.settings)

    def load(self) -> LauncherConfig:
        return self.store.load()

    def _require_channel(self, config: LauncherConfig, channel_id: str) -> ProjectChannel:
        channel = config.find_channel(channel_id)
        if channel is None:
            raise ChannelValidationError(f"Unknown channel: {channel_id}")
        return channel

    def _require_active(self, config: LauncherConfig) -> ProjectChannel:
        channel = config.active_channel
        if channel is None:
            raise ChannelValidationError("No channel selected")
        return channel

    def register_channel(self, name: str, scene_path: str) -> ProjectChannel:
        """Create a channel from a scene and persist it.

        The first channel added becomes the active one.
        """
        channel = channel_builder.add_channel(name, scene_path)
        config = self.store.load()
        config.channels.append(channel)
        if len(config.channels) == 1:
            config.active_channel_id = channel.id
        self.store.save(config)
        return channel

    def select_channel(self, channel_id: str) -> ProjectChannel:
        """Make a channel active; with auto_start, also register it with Claude."""
        config = self.store.load()
        channel = self._require_channel(config, channel_id)
        config.active_channel_id = channel.id
        self.store.save(config)

        if config.auto_start:
            self.registry.upsert(channel, config.mcp_server_path)
        logger.info(f"Selected channel '{channel.name}'")
        return channel

    def remove_channel(self, channel_id: str) -> LauncherConfig:
        """Delete a channel. If it was active, the first remaining one takes over."""
        config = self.store.load()
        channel = self._require_channel(config, channel_id)
        config.channels = [c for c in config.channels if c.id != channel.id]

        if config.active_channel_id == channel.id:
            config.active_channel_id = config.channels[0].id if config.channels else None

        self.store.save(config)
        logger.info(f"Removed channel '{channel.name}'")
        return config

    def apply_active_channel(self) -> ProjectChannel:
        """Point Claude's ``banter`` MCP server at the active channel."""
        config = self.store.load()
        channel = self._require_active(config)
        self.registry.upsert(channel, config.mcp_server_path)
        return channel

    def disconnect(self) -> None:
        self.registry.remove()

    def install_extension_for_active(self, mcp_root: str | None = None) -> ProjectChannel:
        config = self.store.load()
        channel = self._require_active(config)
        extension_installer.install(
            channel.unity_project_path, mcp_root or self.settings.mcp_root)
        return channel

    def set_server_path(self, mcp_server_path: str) -> LauncherConfig:
        config = self.store.load()
        config.mcp_server_path = mcp_server_path
        self.store.save(config)
        return config

    def set_auto_start(self, auto_start: bool) -> LauncherConfig:
        config = self.store.load()
        config.auto_start = auto_start
        self.store.save(config)
        return config

    def status(self) -> LauncherStatus:
        config = self.store.load()
        channel = config.active_channel
        if channel is not None:
            return LauncherStatus(state="active", text=channel.name, channel=channel)
        if config.channels:
            return LauncherStatus(state="warning", text="No channel selected")
        return LauncherStatus(state="unconfigured", text="Not Configured")
