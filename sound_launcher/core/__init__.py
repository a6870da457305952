"""Core classes for the sound-launcher library.

This module contains the configuration, registry, outcome and command
builder base types used throughout the library.
"""

from .base_command import BaseCommandBuilder, PlayCommand
from .launcher_config import LauncherConfig, get_global_launcher_config, set_global_launcher_config
from .outcome import PlaybackOutcome, PlaybackResult
from .registry import PlaybackRegistry

__all__ = [
    "BaseCommandBuilder",
    "PlayCommand",
    "LauncherConfig",
    "get_global_launcher_config",
    "set_global_launcher_config",
    "PlaybackOutcome",
    "PlaybackResult",
    "PlaybackRegistry",
]
