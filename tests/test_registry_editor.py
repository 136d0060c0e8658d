"""Tests for editing the Claude Code MCP registry."""

import json

import pytest

from core.errors import ConfigParseError, FileAccessError
from models.models import ProjectChannel
from services.registry_editor import ClaudeRegistryEditor, build_server_entry

SERVER_PATH = "C:/tools/banter-mcp/dist/index.js"


@pytest.fixture
def editor(settings, home_dir):
    return ClaudeRegistryEditor(settings)


@pytest.fixture
def channel():
    return ProjectChannel(
        id="chan-1",
        name="Lobby",
        unity_project_path="/proj",
        scene_path="/proj/Assets/Scenes/Lobby.unity",
        enabled=True,
    )


def _write(editor, document):
    editor.path.write_text(json.dumps(document, indent=2), encoding="utf-8")


def _read(editor):
    return json.loads(editor.path.read_text(encoding="utf-8"))


class TestRead:
    """Reading the registry."""

    def test_path_is_claude_json_in_home(self, editor, settings):
        assert editor.path == settings.home_dir / ".claude.json"

    def test_missing_file_is_empty_object(self, editor):
        """Test a missing registry reads as {} without creating it."""
        assert editor.read() == {}
        assert not editor.path.exists()

    def test_reads_existing_document(self, editor):
        document = {"numStartups": 3, "mcpServers": {"other": {"command": "uvx"}}}
        _write(editor, document)

        assert editor.read() == document

    def test_invalid_json_raises(self, editor):
        """Test read is strict about malformed JSON."""
        editor.path.write_text("{oops", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Failed to parse Claude config"):
            editor.read()

    def test_non_utf8_file_raises_io_error(self, editor):
        """Test undecodable bytes are a read failure on every operation."""
        editor.path.write_bytes(b"\xff\xfe")

        with pytest.raises(FileAccessError, match="Failed to read Claude config"):
            editor.read()
        with pytest.raises(FileAccessError):
            editor.remove()

    def test_upsert_does_not_tolerate_non_utf8(self, editor):
        """Test upsert only forgives bad JSON, not unreadable bytes."""
        editor.path.write_bytes(b"\xff\xfe")
        channel = ProjectChannel(id="c", name="C", unity_project_path="/p", enabled=True)

        with pytest.raises(FileAccessError):
            editor.upsert(channel, SERVER_PATH)

        assert editor.path.read_bytes() == b"\xff\xfe"


class TestUpsert:
    """Adding or replacing the banter entry."""

    def test_creates_file_with_entry(self, editor, channel):
        """Test upsert writes a fresh registry when none exists."""
        editor.upsert(channel, SERVER_PATH)

        assert _read(editor) == {
            "mcpServers": {
                "banter": {
                    "command": "node",
                    "args": [SERVER_PATH],
                    "env": {
                        "UNITY_PROJECT_PATH": "/proj",
                        "UNITY_SCENE_PATH": "/proj/Assets/Scenes/Lobby.unity",
                    },
                }
            }
        }

    def test_preserves_unrelated_keys(self, editor, channel):
        """Test sibling settings and other servers are untouched."""
        other_tool = {"command": "npx", "args": ["-y", "other-tool"], "env": {"TOKEN": "t"}}
        _write(editor, {"otherSetting": True, "mcpServers": {"other-tool": other_tool}})

        editor.upsert(channel, SERVER_PATH)
        document = _read(editor)

        assert document["otherSetting"] is True
        assert document["mcpServers"]["other-tool"] == other_tool
        assert document["mcpServers"]["banter"]["args"] == [SERVER_PATH]

    def test_replaces_existing_entry(self, editor, channel):
        """Test a previous banter entry is overwritten."""
        _write(editor, {"mcpServers": {"banter": {"command": "old", "args": [], "env": {"X": "1"}}}})

        editor.upsert(channel, SERVER_PATH)

        assert _read(editor)["mcpServers"]["banter"]["command"] == "node"
        assert "X" not in _read(editor)["mcpServers"]["banter"]["env"]

    def test_omits_scene_path_when_absent(self, editor, channel):
        """Test UNITY_SCENE_PATH is only written for channels with a scene."""
        channel.scene_path = None

        editor.upsert(channel, SERVER_PATH)

        assert _read(editor)["mcpServers"]["banter"]["env"] == {"UNITY_PROJECT_PATH": "/proj"}

    def test_adds_mcp_servers_object(self, editor, channel):
        """Test mcpServers is created next to existing keys."""
        _write(editor, {"theme": "dark"})

        editor.upsert(channel, SERVER_PATH)
        document = _read(editor)

        assert document["theme"] == "dark"
        assert list(document["mcpServers"]) == ["banter"]

    def test_invalid_json_is_replaced(self, editor, channel):
        """Test upsert tolerates a corrupt registry by starting from {}."""
        editor.path.write_text("{oops", encoding="utf-8")

        editor.upsert(channel, SERVER_PATH)

        assert list(_read(editor)) == ["mcpServers"]

    def test_output_is_pretty_printed(self, editor, channel):
        editor.upsert(channel, SERVER_PATH)

        assert editor.path.read_text(encoding="utf-8").startswith("{\n  \"mcpServers\"")


class TestRemove:
    """Removing the banter entry."""

    def test_missing_file_is_noop(self, editor):
        """Test remove succeeds without creating a registry."""
        editor.remove()

        assert not editor.path.exists()

    def test_removes_only_banter(self, editor, channel):
        """Test other servers survive removal."""
        _write(editor, {"otherSetting": 1, "mcpServers": {"other-tool": {"command": "x"}}})
        editor.upsert(channel, SERVER_PATH)

        editor.remove()

        assert _read(editor) == {"otherSetting": 1, "mcpServers": {"other-tool": {"command": "x"}}}

    def test_absent_entry_keeps_document(self, editor):
        """Test removing when no banter entry exists leaves the content equal."""
        document = {"otherSetting": True, "mcpServers": {"other-tool": {"command": "x", "args": []}}}
        _write(editor, document)

        editor.remove()

        assert _read(editor) == document

    def test_no_mcp_servers_key(self, editor):
        _write(editor, {"otherSetting": True})

        editor.remove()

        assert _read(editor) == {"otherSetting": True}

    def test_invalid_json_raises(self, editor):
        """Test remove is strict about malformed JSON and leaves the file alone."""
        editor.path.write_text("{oops", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            editor.remove()

        assert editor.path.read_text(encoding="utf-8") == "{oops"


class TestBuildServerEntry:

    def test_entry_shape(self, channel):
        entry = build_server_entry(channel, "/srv/index.js")

        assert entry.model_dump() == {
            "command": "node",
            "args": ["/srv/index.js"],
            "env": {
                "UNITY_PROJECT_PATH": "/proj",
                "UNITY_SCENE_PATH": "/proj/Assets/Scenes/Lobby.unity",
            },
        }
