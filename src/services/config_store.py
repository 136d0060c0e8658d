"""Persistence for the launcher's own settings document."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from core.config import LauncherSettings, get_settings
from core.errors import ConfigParseError, FileAccessError
from models.models import LauncherConfig

logger = logging.getLogger("banter-mcp-launcher")


class LocalConfigStore:
    """Reads and writes ``launcher-config.json`` as a whole document.

    There is no partial update API: callers load, mutate, and save.
    """

    def __init__(self, settings: LauncherSettings | None = None):
        self._settings = settings or get_settings()

    @property
    def path(self) -> Path:
        return self._settings.config_path

    def load(self) -> LauncherConfig:
        """Load the config, or return defaults when no file exists.

        A missing file is not created here.
        """
        path = self.path
        if not path.exists():
            logger.debug(f"No launcher config at {path}; using defaults")
            return LauncherConfig.default(self._settings.default_server_path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(f"Failed to read config: {e}") from e

        try:
            config = LauncherConfig.model_validate_json(content)
        except ValidationError as e:
            raise ConfigParseError(f"Failed to parse config: {e}") from e

        logger.debug(f"Loaded {len(config.channels)} channel(s) from {path}")
        return config

    def save(self, config: LauncherConfig) -> None:
        """Overwrite the config file with ``config`` as pretty-printed JSON."""
        path = self.path
        try:
            content = config.model_dump_json(indent=2)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"Failed to serialize config: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileAccessError(f"Failed to write config: {e}") from e

        logger.info(f"Saved launcher config ({len(config.channels)} channel(s)) to {path}")
