"""Derive channel records from Unity scene file paths."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from core.errors import ChannelValidationError, SceneNotFoundError
from models.models import ProjectChannel

logger = logging.getLogger("banter-mcp-launcher")

SCENE_SUFFIX = ".unity"
ASSETS_DIR_NAME = "Assets"


def _has_scene_suffix(path: Path) -> bool:
    # Case-sensitive: "Main.UNITY" is not a scene file.
    return path.suffix == SCENE_SUFFIX


def find_project_root(scene_path: str | Path) -> Path | None:
    """Walk upward from the scene's folder to the nearest ``Assets`` directory.

    Returns that directory's parent, or None if the filesystem root is reached
    first.
    """
    current = Path(scene_path).parent
    while True:
        if current.name == ASSETS_DIR_NAME:
            return current.parent
        if current.parent == current:
            return None
        current = current.parent


def add_channel(name: str, scene_path: str) -> ProjectChannel:
    """Build a new enabled channel for ``scene_path``.

    The channel is not persisted; append it to a ``LauncherConfig`` and save.

    Raises:
        SceneNotFoundError: The scene file does not exist.
        ChannelValidationError: Not a ``.unity`` file, or no enclosing
            ``Assets`` folder.
    """
    scene_file = Path(scene_path)

    if not scene_file.exists():
        raise SceneNotFoundError(f"Scene file does not exist: {scene_path}")

    if not _has_scene_suffix(scene_file):
        raise ChannelValidationError("Not a valid Unity scene file (must be .unity)")

    project_root = find_project_root(scene_file)
    if project_root is None:
        raise ChannelValidationError(
            "Could not find Unity project root (no Assets folder in path)")

    # A relative "Assets/..." scene has an empty project root, not ".".
    root_text = "" if project_root == Path(".") else str(project_root)

    channel = ProjectChannel(
        id=str(uuid.uuid4()),
        name=name,
        unity_project_path=root_text,
        scene_path=scene_path,
        enabled=True,
    )
    logger.info(f"Created channel '{name}' for project {channel.unity_project_path}")
    return channel


def validate_unity_scene(path: str) -> bool:
    """Heuristic check that ``path`` is a scene inside a Unity project.

    Only the literal substring ``/Assets/`` (after normalizing backslashes)
    is checked, not individual path segments.
    """
    scene_path = Path(path)

    if not scene_path.exists():
        return False

    if not _has_scene_suffix(scene_path):
        return False

    return "/Assets/" in path.replace("\\", "/")
