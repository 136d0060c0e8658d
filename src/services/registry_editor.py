"""Edit the assistant's MCP server registry (``~/.claude.json``).

This document belongs to another tool. Only ``mcpServers.banter`` is ever
written; every other key is carried through untouched.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from core.config import LauncherSettings, get_settings
from core.errors import ConfigParseError, FileAccessError
from models.models import McpServerEntry, ProjectChannel

logger = logging.getLogger("banter-mcp-launcher")

SERVERS_KEY = "mcpServers"
SERVER_NAME = "banter"


def build_server_entry(channel: ProjectChannel, mcp_server_path: str) -> McpServerEntry:
    """Build the ``banter`` launch descriptor for a channel."""
    env = {"UNITY_PROJECT_PATH": channel.unity_project_path}
    if channel.scene_path is not None:
        env["UNITY_SCENE_PATH"] = channel.scene_path
    return McpServerEntry(command="node", args=[mcp_server_path], env=env)


class ClaudeRegistryEditor:
    """Reads and rewrites the external registry file as a whole."""

    def __init__(self, settings: LauncherSettings | None = None):
        self._settings = settings or get_settings()

    @property
    def path(self) -> Path:
        return self._settings.registry_path

    def _read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Failed to read Claude config: {e}") from e

    @staticmethod
    def _parse(content: str) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Failed to parse Claude config: {e}") from e

    def _write(self, document: Any) -> None:
        try:
            content = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise ConfigParseError(f"Failed to serialize Claude config: {e}") from e
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileAccessError(f"Failed to write Claude config: {e}") from e

    def read(self) -> Any:
        """Return the registry document, or ``{}`` if the file does not exist."""
        if not self.path.exists():
            return {}
        return self._parse(self._read_text())

    def upsert(self, channel: ProjectChannel, mcp_server_path: str) -> None:
        """Register (or replace) the ``banter`` server entry for ``channel``.

        Unparseable registry content is replaced with an empty object instead
        of raising. ``read`` and ``remove`` are strict.
        """
        document: Any = {}
        if self.path.exists():
            content = self._read_text()
            try:
                document = json.loads(content)
            except json.JSONDecodeError as e:
                logger.warning(f"Claude config at {self.path} is not valid JSON; starting fresh: {e}")
                document = {}
        if not isinstance(document, dict):
            document = {}

        servers = document.get(SERVERS_KEY)
        if not isinstance(servers, dict):
            servers = {}
            document[SERVERS_KEY] = servers

        servers[SERVER_NAME] = build_server_entry(channel, mcp_server_path).model_dump()
        self._write(document)
        logger.info(f"Registered '{SERVER_NAME}' MCP server for channel '{channel.name}' in {self.path}")

    def remove(self) -> None:
        """Drop the ``banter`` server entry. A missing file is left missing."""
        if not self.path.exists():
            logger.debug(f"No Claude config at {self.path}; nothing to remove")
            return

        document = self._parse(self._read_text())

        servers = document.get(SERVERS_KEY) if isinstance(document, dict) else None
        if isinstance(servers, dict) and servers.pop(SERVER_NAME, None) is not None:
            logger.info(f"Removed '{SERVER_NAME}' MCP server from {self.path}")

        self._write(document)
