"""Tests for platform command builder selection."""

import pytest

from sound_launcher.core import LauncherConfig
from sound_launcher.platform import (
    AFPlayCommandBuilder,
    PowerShellCommandBuilder,
    current_platform,
    get_command_builder,
)


class TestGetCommandBuilder:
    """Tests for get_command_builder()."""

    @pytest.mark.parametrize("platform_name", ["macosx", "macos", "darwin", "MacOSX"])
    def test_macos(self, platform_name):
        """Test macOS platforms use afplay."""
        assert isinstance(get_command_builder(platform_name), AFPlayCommandBuilder)

    @pytest.mark.parametrize("platform_name", ["win", "windows", "linux", "android"])
    def test_other_platforms(self, platform_name):
        """Test every other platform uses PowerShell."""
        assert isinstance(get_command_builder(platform_name), PowerShellCommandBuilder)

    def test_executables_from_config(self):
        """Test executable names come from the config."""
        config = LauncherConfig(mac_executable="my-afplay", windows_executable="pwsh")
        assert get_command_builder("macosx", config).executable == "my-afplay"
        assert get_command_builder("windows", config).executable == "pwsh"

    def test_host_platform(self, monkeypatch):
        """Test the host platform is used when none is given."""
        monkeypatch.setattr("sound_launcher.platform.platform", "macosx")
        monkeypatch.delenv("SOUND_LAUNCHER_PLATFORM", raising=False)
        assert isinstance(get_command_builder(), AFPlayCommandBuilder)


class TestCurrentPlatform:
    """Tests for current_platform()."""

    def test_detected(self, monkeypatch):
        monkeypatch.setattr("sound_launcher.platform.platform", "linux")
        monkeypatch.delenv("SOUND_LAUNCHER_PLATFORM", raising=False)
        assert current_platform() == "linux"

    def test_environment_override(self, monkeypatch):
        """Test SOUND_LAUNCHER_PLATFORM overrides detection."""
        monkeypatch.setattr("sound_launcher.platform.platform", "linux")
        monkeypatch.setenv("SOUND_LAUNCHER_PLATFORM", "MacOSX")
        assert current_platform() == "macosx"
