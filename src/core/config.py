"""
Configuration settings for the Banter MCP launcher.
This file contains all configurable parameters for the launcher backend.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path


APP_DIR_NAME = "banter-mcp"
CONFIG_FILE_NAME = "launcher-config.json"
REGISTRY_FILE_NAME = ".claude.json"

DEFAULT_MCP_ROOT = "C:/tools/banter-mcp"
DEFAULT_SERVER_PATH = "C:/tools/banter-mcp/dist/index.js"


def default_config_dir() -> Path:
    """Return the host OS's per-user configuration directory.

    Falls back to the current directory when no home directory can be
    determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return Path(".")

    if os.name == "nt":  # Windows
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else home / "AppData" / "Roaming"
    if sys.platform == "darwin":  # macOS
        return home / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else home / ".config"


def default_home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return Path(".")


@dataclass
class LauncherSettings:
    """Main configuration class for the launcher."""

    # Filesystem locations (injected so tests never touch the real profile)
    config_dir: Path = field(default_factory=default_config_dir)
    home_dir: Path = field(default_factory=default_home_dir)

    # Banter MCP install
    mcp_root: str = DEFAULT_MCP_ROOT
    default_server_path: str = DEFAULT_SERVER_PATH

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_to_file: bool = True

    @property
    def app_dir(self) -> Path:
        return Path(self.config_dir) / APP_DIR_NAME

    @property
    def config_path(self) -> Path:
        """Location of the launcher's own settings file."""
        return self.app_dir / CONFIG_FILE_NAME

    @property
    def registry_path(self) -> Path:
        """Location of the assistant's MCP server registry."""
        return Path(self.home_dir) / REGISTRY_FILE_NAME

    @property
    def log_dir(self) -> Path:
        return self.app_dir / "Logs"

    @classmethod
    def from_env(cls) -> "LauncherSettings":
        """Create settings from defaults, then apply environment overrides."""
        settings = cls()

        config_dir = os.environ.get("BANTER_MCP_CONFIG_DIR")
        if config_dir:
            settings.config_dir = Path(config_dir)

        home_dir = os.environ.get("BANTER_MCP_HOME")
        if home_dir:
            settings.home_dir = Path(home_dir)

        settings.mcp_root = os.environ.get("BANTER_MCP_ROOT", settings.mcp_root)
        settings.default_server_path = os.environ.get(
            "BANTER_MCP_SERVER_PATH", settings.default_server_path)

        log_level = os.environ.get("BANTER_MCP_LOG_LEVEL")
        if log_level:
            settings.log_level = log_level.upper()

        return settings


# Create a global settings instance
settings = LauncherSettings.from_env()


def get_settings() -> LauncherSettings:
    """Get the current global settings."""
    return settings


def set_settings(new_settings: LauncherSettings) -> None:
    """Replace the global settings (used by the CLI and tests)."""
    global settings
    settings = new_settings
