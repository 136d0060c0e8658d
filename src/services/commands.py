"""Commands callable by a launcher frontend.

Every command takes JSON-serializable keyword arguments and is dispatched
through :func:`dispatch_command`, which always answers with a
``CommandResponse`` whose ``error`` is a plain string.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from core.config import get_settings
from core.errors import LauncherError
from models.models import CommandResponse, LauncherConfig, ProjectChannel
from services import channel_builder, extension_installer
from services.command_registry import get_command, get_registered_commands, launcher_command
from services.config_store import LocalConfigStore
from services.registry_editor import ClaudeRegistryEditor
from utils.suggestions import did_you_mean

logger = logging.getLogger("banter-mcp-launcher")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_param_name(name: str) -> str:
    """``scenePath`` -> ``scene_path``; snake_case names pass through."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@launcher_command()
def load_config() -> dict[str, Any]:
    """Load the launcher configuration (defaults if none saved)."""
    return LocalConfigStore(get_settings()).load().model_dump()


@launcher_command()
def save_config(config: LauncherConfig) -> None:
    """Save the whole launcher configuration."""
    LocalConfigStore(get_settings()).save(config)


@launcher_command()
def add_channel(name: str, scene_path: str) -> dict[str, Any]:
    """Build a channel from a Unity scene path (not persisted)."""
    return channel_builder.add_channel(name, scene_path).model_dump()


@launcher_command()
def validate_unity_scene(path: str) -> bool:
    """Check whether a path looks like a scene inside a Unity project."""
    return channel_builder.validate_unity_scene(path)


@launcher_command()
def get_claude_mcp_config() -> Any:
    """Read the Claude Code MCP registry."""
    return ClaudeRegistryEditor(get_settings()).read()


@launcher_command()
def update_claude_mcp_config(channel: ProjectChannel, mcp_server_path: str) -> None:
    """Register the channel as the banter MCP server in the Claude Code registry."""
    ClaudeRegistryEditor(get_settings()).upsert(channel, mcp_server_path)


@launcher_command()
def remove_claude_mcp_config() -> None:
    """Remove the banter MCP server from the Claude Code registry."""
    ClaudeRegistryEditor(get_settings()).remove()


@launcher_command()
def check_unity_extension(unity_project_path: str) -> bool:
    """Check whether the Unity bridge extension is installed."""
    return extension_installer.check(unity_project_path)


@launcher_command()
def install_unity_extension(unity_project_path: str, mcp_root: str) -> None:
    """Copy the Unity bridge extension into a project."""
    extension_installer.install(unity_project_path, mcp_root)


@launcher_command()
def get_mcp_root() -> str:
    """Return the Banter MCP install root."""
    return extension_installer.get_mcp_root(get_settings())


def list_command_names() -> list[str]:
    return [command['name'] for command in get_registered_commands()]


def dispatch_command(name: str, params: dict[str, Any] | None = None) -> CommandResponse:
    """Run a named command and wrap its outcome in a ``CommandResponse``."""
    command = get_command(name)
    if command is None:
        error = f"Unknown command: {name}"
        hint = did_you_mean(name, list_command_names())
        if hint:
            error = f"{error}. {hint}"
        return CommandResponse(success=False, error=error)

    kwargs = {normalize_param_name(k): v for k, v in (params or {}).items()}
    logger.debug(f"Dispatching command '{name}' with params {sorted(kwargs)}")

    try:
        result = command['func'](**kwargs)
    except ValidationError as e:
        return CommandResponse(success=False, error=f"Invalid arguments for {name}: {e}")
    except LauncherError as e:
        logger.error(f"Command '{name}' failed: {e}")
        return CommandResponse(success=False, error=str(e))

    return CommandResponse(success=True, message=f"{name} completed", data=result)
