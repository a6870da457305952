import logging

from .common import new_playback_id  # noqa: F401
from .core import (  # noqa: F401
    LauncherConfig,
    PlaybackOutcome,
    PlaybackResult,
    get_global_launcher_config,
    set_global_launcher_config,
)
from .launcher import SoundLauncher  # noqa: F401
from .platform import AFPlayCommandBuilder, PowerShellCommandBuilder, get_command_builder  # noqa: F401

__version__ = "1.0.0"

logger = logging.getLogger(__name__)
