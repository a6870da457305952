"""macOS command builder using afplay."""

import logging

from sound_launcher.core.base_command import BaseCommandBuilder, format_number
from sound_launcher.core.constants import AFPLAY_EXECUTABLE, AFPLAY_MAX_VOLUME, AFPLAY_VOLUME_SCALE

logger = logging.getLogger(__name__)

__all__ = [
    "AFPlayCommandBuilder",
]


class AFPlayCommandBuilder(BaseCommandBuilder):
    """Build ``afplay <file> -v <volume> [-r <rate>]`` commands.

    afplay volumes go up to 2.0, so 0.0-1.0 inputs are doubled and clamped.
    """

    name = "AFPlay"

    def __init__(self, executable: str = AFPLAY_EXECUTABLE):
        super().__init__(executable)

    def normalize_volume(self, volume: float) -> float:
        return min(AFPLAY_MAX_VOLUME, volume * AFPLAY_VOLUME_SCALE)

    def _build_args(self, file_path, volume, rate):
        args = [file_path, "-v", format_number(volume)]
        if rate is not None:
            args.extend(["-r", format_number(rate)])
        return args
