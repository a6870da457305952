"""Platform-specific command builders for the sound-launcher library.

The builder is chosen from the host platform reported by currentplatform.
macOS uses afplay; every other platform goes through PowerShell.
"""

import logging
import os

from currentplatform import platform

from sound_launcher.core.constants import ENV_PLATFORM
from sound_launcher.core.launcher_config import get_global_launcher_config

from .macos import AFPlayCommandBuilder
from .windows import PowerShellCommandBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "AFPlayCommandBuilder",
    "PowerShellCommandBuilder",
    "MACOS_PLATFORMS",
    "current_platform",
    "get_command_builder",
]

MACOS_PLATFORMS = ("macosx", "macos", "darwin", "osx")


def current_platform() -> str:
    """Host platform name, SOUND_LAUNCHER_PLATFORM overrides detection."""
    override = os.environ.get(ENV_PLATFORM)
    if override:
        logger.debug("Platform overridden by %s: %s", ENV_PLATFORM, override)
        return override.lower()
    return str(platform).lower()


def get_command_builder(platform_name=None, config=None):
    """Select the command builder for a platform.

    Args:
        platform_name: Platform to build for, None for the host platform
        config: LauncherConfig providing executable names, None for the global one
    """
    if platform_name is None:
        platform_name = current_platform()
    if config is None:
        config = get_global_launcher_config()

    if platform_name.lower() in MACOS_PLATFORMS:
        builder = AFPlayCommandBuilder(config.mac_executable)
    else:
        if platform_name.lower() not in ("win", "windows", "win32"):
            logger.warning(f"Platform {platform_name} is not Windows, falling back to PowerShell")
        builder = PowerShellCommandBuilder(config.windows_executable)

    logger.debug("Using %s for platform %s", builder, platform_name)
    return builder
