"""Launcher configuration for the sound-launcher library.

This module provides the LauncherConfig dataclass which holds the defaults
used by SoundLauncher when spawning player processes, and the global default
configuration used by launchers created without an explicit config.
"""

import logging
import os
from dataclasses import dataclass

from .constants import (
    AFPLAY_EXECUTABLE,
    DEFAULT_VOLUME,
    ENV_AFPLAY,
    ENV_HIDE_WINDOW,
    ENV_POWERSHELL,
    ENV_VOLUME,
    POWERSHELL_EXECUTABLE,
)

logger = logging.getLogger(__name__)

__all__ = [
    "LauncherConfig",
    "get_global_launcher_config",
    "set_global_launcher_config",
]

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class LauncherConfig:
    """Configuration for launching player processes.

    Attributes:
        volume: Default volume (0.0-1.0) used when play() gets none
        mac_executable: Command line player used on macOS
        windows_executable: Scripting host used on every other platform
        hide_window: Suppress the console window flash on Windows
    """

    volume: float = DEFAULT_VOLUME
    mac_executable: str = AFPLAY_EXECUTABLE
    windows_executable: str = POWERSHELL_EXECUTABLE
    hide_window: bool = True

    def __post_init__(self):
        """Validate configuration parameters."""
        if isinstance(self.volume, bool) or not isinstance(self.volume, (int, float)):
            raise TypeError(f"volume must be a number, got {type(self.volume).__name__}")

        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"volume must be between 0.0 and 1.0, got {self.volume}")

        if not self.mac_executable:
            raise ValueError("mac_executable must not be empty")

        if not self.windows_executable:
            raise ValueError("windows_executable must not be empty")

    @classmethod
    def from_env(cls, environ=None) -> "LauncherConfig":
        """Build a config from SOUND_LAUNCHER_* environment variables.

        Unset variables keep their default value.
        """
        if environ is None:
            environ = os.environ

        kwargs = {}
        if environ.get(ENV_VOLUME):
            try:
                kwargs["volume"] = float(environ[ENV_VOLUME])
            except ValueError as e:
                raise ValueError(f"{ENV_VOLUME} must be a number, got {environ[ENV_VOLUME]!r}") from e
        if environ.get(ENV_AFPLAY):
            kwargs["mac_executable"] = environ[ENV_AFPLAY]
        if environ.get(ENV_POWERSHELL):
            kwargs["windows_executable"] = environ[ENV_POWERSHELL]
        if environ.get(ENV_HIDE_WINDOW):
            value = environ[ENV_HIDE_WINDOW].strip().lower()
            if value in _TRUE_VALUES:
                kwargs["hide_window"] = True
            elif value in _FALSE_VALUES:
                kwargs["hide_window"] = False
            else:
                raise ValueError(f"{ENV_HIDE_WINDOW} must be a boolean, got {environ[ENV_HIDE_WINDOW]!r}")

        logger.debug("LauncherConfig.from_env() %s", kwargs)
        return cls(**kwargs)


_global_launcher_config: LauncherConfig = LauncherConfig()


def get_global_launcher_config() -> LauncherConfig:
    """Get the global default launcher configuration.

    Returns:
        The current global LauncherConfig instance.
    """
    return _global_launcher_config


def set_global_launcher_config(config: LauncherConfig) -> None:
    """Set the global default launcher configuration.

    Launchers created without an explicit config read this configuration
    each time they start a playback, so changes apply immediately.

    Args:
        config: The new global LauncherConfig instance.
    """
    global _global_launcher_config
    if not isinstance(config, LauncherConfig):
        raise TypeError(f"Expected LauncherConfig, got {type(config).__name__}")
    _global_launcher_config = config
