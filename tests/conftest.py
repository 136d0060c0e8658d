"""Pytest configuration for banter-mcp-launcher tests."""
import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path so tests can import cli, core, services, etc.
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from core.config import LauncherSettings, get_settings, set_settings  # noqa: E402

EXTENSION_SOURCE = "// BanterMCPBridge test fixture\npublic class BanterMCPBridge {}\n"


@pytest.fixture
def settings(tmp_path) -> LauncherSettings:
    """Settings rooted in a temp dir so no test touches the real profile."""
    return LauncherSettings(
        config_dir=tmp_path / "config",
        home_dir=tmp_path / "home",
        mcp_root=str(tmp_path / "banter-mcp"),
        default_server_path="/opt/banter-mcp/dist/index.js",
        log_to_file=False,
    )


@pytest.fixture(autouse=True)
def use_test_settings(settings):
    """Install the temp settings globally and restore the prior ones afterwards."""
    prior = get_settings()
    set_settings(settings)
    yield
    set_settings(prior)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """CLI invocations reconfigure logging; undo that between tests."""
    root = logging.getLogger()
    launcher_logger = logging.getLogger("banter-mcp-launcher")
    prior_handlers = list(root.handlers)
    prior_level = root.level
    yield
    root.handlers[:] = prior_handlers
    root.setLevel(prior_level)
    for handler in list(launcher_logger.handlers):
        launcher_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def home_dir(settings) -> Path:
    settings.home_dir.mkdir(parents=True, exist_ok=True)
    return settings.home_dir


@pytest.fixture
def unity_project(tmp_path) -> Path:
    """A minimal Unity project with one scene at Assets/Scenes/Main.unity."""
    project = tmp_path / "proj"
    scenes = project / "Assets" / "Scenes"
    scenes.mkdir(parents=True)
    (scenes / "Main.unity").write_text("%YAML 1.1\n", encoding="utf-8")
    return project


@pytest.fixture
def scene_path(unity_project) -> str:
    return str(unity_project / "Assets" / "Scenes" / "Main.unity")


@pytest.fixture
def mcp_root(settings) -> Path:
    """A Banter MCP install root containing the bridge extension source."""
    root = Path(settings.mcp_root)
    editor = root / "unity-extension" / "Editor"
    editor.mkdir(parents=True)
    (editor / "BanterMCPBridge.cs").write_text(EXTENSION_SOURCE, encoding="utf-8")
    return root
