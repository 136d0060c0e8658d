"""Tests for the high-level launcher actions."""

import json

import pytest

from core.errors import ChannelValidationError, SceneNotFoundError
from services.launcher_service import LauncherService


@pytest.fixture
def service(settings, home_dir):
    return LauncherService(settings)


@pytest.fixture
def second_scene(unity_project):
    scene = unity_project / "Assets" / "Scenes" / "Arena.unity"
    scene.write_text("", encoding="utf-8")
    return str(scene)


def _registry(service):
    return json.loads(service.registry.path.read_text(encoding="utf-8"))


class TestRegisterChannel:

    def test_first_channel_becomes_active(self, service, scene_path):
        """Test the first registered channel is selected automatically."""
        channel = service.register_channel("Lobby", scene_path)

        config = service.load()
        assert config.channels == [channel]
        assert config.active_channel_id == channel.id

    def test_later_channels_do_not_change_active(self, service, scene_path, second_scene):
        first = service.register_channel("Lobby", scene_path)
        second = service.register_channel("Arena", second_scene)

        config = service.load()
        assert [c.id for c in config.channels] == [first.id, second.id]
        assert config.active_channel_id == first.id

    def test_invalid_scene_is_not_persisted(self, service, tmp_path):
        with pytest.raises(SceneNotFoundError):
            service.register_channel("Ghost", str(tmp_path / "ghost.unity"))

        assert not service.store.path.exists()


class TestSelectChannel:

    def test_sets_active(self, service, scene_path, second_scene):
        service.register_channel("Lobby", scene_path)
        arena = service.register_channel("Arena", second_scene)

        service.select_channel(arena.id)

        assert service.load().active_channel_id == arena.id

    def test_without_auto_start_registry_untouched(self, service, scene_path):
        channel = service.register_channel("Lobby", scene_path)

        service.select_channel(channel.id)

        assert not service.registry.path.exists()

    def test_with_auto_start_applies_to_claude(self, service, scene_path):
        """Test auto-start registers the selected channel with Claude Code."""
        channel = service.register_channel("Lobby", scene_path)
        service.set_auto_start(True)

        service.select_channel(channel.id)

        banter = _registry(service)["mcpServers"]["banter"]
        assert banter["env"]["UNITY_PROJECT_PATH"] == channel.unity_project_path
        assert banter["args"] == [service.load().mcp_server_path]

    def test_unknown_channel(self, service):
        with pytest.raises(ChannelValidationError, match="Unknown channel"):
            service.select_channel("nope")


class TestRemoveChannel:

    def test_removing_active_selects_first_remaining(self, service, scene_path, second_scene):
        lobby = service.register_channel("Lobby", scene_path)
        arena = service.register_channel("Arena", second_scene)

        config = service.remove_channel(lobby.id)

        assert [c.id for c in config.channels] == [arena.id]
        assert config.active_channel_id == arena.id
        assert service.load() == config

    def test_removing_last_clears_active(self, service, scene_path):
        lobby = service.register_channel("Lobby", scene_path)

        config = service.remove_channel(lobby.id)

        assert config.channels == []
        assert config.active_channel_id is None

    def test_removing_inactive_keeps_active(self, service, scene_path, second_scene):
        lobby = service.register_channel("Lobby", scene_path)
        arena = service.register_channel("Arena", second_scene)

        config = service.remove_channel(arena.id)

        assert config.active_channel_id == lobby.id

    def test_unknown_channel(self, service):
        with pytest.raises(ChannelValidationError):
            service.remove_channel("nope")


class TestClaudeActions:

    def test_apply_requires_active_channel(self, service):
        with pytest.raises(ChannelValidationError, match="No channel selected"):
            service.apply_active_channel()

    def test_apply_uses_configured_server_path(self, service, scene_path):
        service.register_channel("Lobby", scene_path)
        service.set_server_path("/custom/index.js")

        channel = service.apply_active_channel()

        banter = _registry(service)["mcpServers"]["banter"]
        assert banter["args"] == ["/custom/index.js"]
        assert banter["env"]["UNITY_SCENE_PATH"] == channel.scene_path

    def test_disconnect_removes_entry(self, service, scene_path):
        service.register_channel("Lobby", scene_path)
        service.apply_active_channel()

        service.disconnect()

        assert "banter" not in _registry(service)["mcpServers"]


class TestInstallExtension:

    def test_installs_into_active_project(self, service, scene_path, unity_project, mcp_root):
        service.register_channel("Lobby", scene_path)

        service.install_extension_for_active()

        assert (unity_project / "Assets" / "Editor" / "BanterMCPBridge.cs").exists()

    def test_requires_active_channel(self, service, mcp_root):
        with pytest.raises(ChannelValidationError):
            service.install_extension_for_active()


class TestSettingsAndStatus:

    def test_set_auto_start_persists(self, service):
        service.set_auto_start(True)

        assert service.load().auto_start is True

    def test_status_unconfigured(self, service):
        status = service.status()

        assert status.state == "unconfigured"
        assert status.text == "Not Configured"

    def test_status_active(self, service, scene_path):
        channel = service.register_channel("Lobby", scene_path)

        status = service.status()

        assert status.state == "active"
        assert status.text == "Lobby"
        assert status.channel == channel

    def test_status_warning_when_active_id_dangles(self, service, scene_path):
        """Test a stale active_channel_id reports no channel selected."""
        service.register_channel("Lobby", scene_path)
        config = service.load()
        config.active_channel_id = "gone"
        service.store.save(config)

        status = service.status()

        assert status.state == "warning"
        assert status.text == "No channel selected"
