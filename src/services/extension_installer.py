"""Install the BanterMCPBridge editor extension into Unity projects."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from core.config import LauncherSettings, get_settings
from core.errors import FileAccessError

logger = logging.getLogger("banter-mcp-launcher")

EXTENSION_FILE_NAME = "BanterMCPBridge.cs"


def extension_destination(unity_project_path: str | Path) -> Path:
    return Path(unity_project_path) / "Assets" / "Editor" / EXTENSION_FILE_NAME


def extension_source(mcp_root: str | Path) -> Path:
    return Path(mcp_root) / "unity-extension" / "Editor" / EXTENSION_FILE_NAME


def check(unity_project_path: str) -> bool:
    """Return True if the bridge script is present in the project's Editor folder."""
    return extension_destination(unity_project_path).exists()


def install(unity_project_path: str, mcp_root: str) -> None:
    """Copy the bridge script into ``<project>/Assets/Editor``.

    Any existing copy is overwritten.

    Raises:
        FileAccessError: The Editor folder cannot be created, or the source is
            missing or cannot be copied.
    """
    source = extension_source(mcp_root)
    dest = extension_destination(unity_project_path)

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError(f"Failed to create Editor directory: {e}") from e

    try:
        shutil.copyfile(source, dest)
    except OSError as e:
        raise FileAccessError(f"Failed to copy extension: {e}") from e

    logger.info(f"Installed {EXTENSION_FILE_NAME} into {dest.parent}")


def get_mcp_root(settings: LauncherSettings | None = None) -> str:
    """Return the configured Banter MCP install root."""
    return (settings or get_settings()).mcp_root
