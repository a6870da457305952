"""Launcher-related constants for the sound-launcher library."""

# Native macOS command line player
AFPLAY_EXECUTABLE = "afplay"

# Scripting host used on every other platform
POWERSHELL_EXECUTABLE = "powershell"

# afplay accepts volumes up to 2.0, inputs in 0.0-1.0 are doubled
AFPLAY_MAX_VOLUME = 2.0
AFPLAY_VOLUME_SCALE = 2.0

DEFAULT_VOLUME = 0.5

# 4 random bytes -> 8 hex characters
PLAYBACK_ID_BYTES = 4

# subprocess.CREATE_NO_WINDOW, only defined by the stdlib on Windows
CREATE_NO_WINDOW = 0x08000000

# Environment variables read by LauncherConfig.from_env() and platform selection
ENV_PLATFORM = "SOUND_LAUNCHER_PLATFORM"
ENV_VOLUME = "SOUND_LAUNCHER_VOLUME"
ENV_AFPLAY = "SOUND_LAUNCHER_AFPLAY"
ENV_POWERSHELL = "SOUND_LAUNCHER_POWERSHELL"
ENV_HIDE_WINDOW = "SOUND_LAUNCHER_HIDE_WINDOW"

__all__ = [
    "AFPLAY_EXECUTABLE",
    "POWERSHELL_EXECUTABLE",
    "AFPLAY_MAX_VOLUME",
    "AFPLAY_VOLUME_SCALE",
    "DEFAULT_VOLUME",
    "PLAYBACK_ID_BYTES",
    "CREATE_NO_WINDOW",
    "ENV_PLATFORM",
    "ENV_VOLUME",
    "ENV_AFPLAY",
    "ENV_POWERSHELL",
    "ENV_HIDE_WINDOW",
]
