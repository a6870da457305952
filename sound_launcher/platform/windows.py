"""Windows command builder driving the WPF MediaPlayer through PowerShell."""

import logging

from sound_launcher.core.base_command import BaseCommandBuilder, format_number
from sound_launcher.core.constants import POWERSHELL_EXECUTABLE

logger = logging.getLogger(__name__)

__all__ = [
    "PowerShellCommandBuilder",
    "escape_single_quotes",
    "media_player_script",
]

_SCRIPT_TEMPLATE = """
Add-Type -AssemblyName presentationCore;
$player = New-Object system.windows.media.mediaplayer;
$player.open('{path}');
$player.Volume = {volume};
$player.Play();
# Keep the process alive until the media finishes
Start-Sleep -s $player.NaturalDuration.TimeSpan.TotalSeconds;
"""


def escape_single_quotes(value: str) -> str:
    """Double single quotes so ``value`` fits in a single-quoted PowerShell string.

    Only single quotes are escaped.
    """
    return value.replace("'", "''")


def media_player_script(file_path: str, volume: float) -> str:
    """Inline script that plays ``file_path`` and sleeps for its natural duration."""
    return _SCRIPT_TEMPLATE.format(path=escape_single_quotes(file_path), volume=format_number(volume))


class PowerShellCommandBuilder(BaseCommandBuilder):
    """Build ``powershell -NoProfile -Command <script>`` commands.

    The volume is passed through unchanged, MediaPlayer already uses 0.0-1.0.
    """

    name = "PowerShell"

    def __init__(self, executable: str = POWERSHELL_EXECUTABLE):
        super().__init__(executable)

    def normalize_volume(self, volume: float) -> float:
        return volume

    def _build_args(self, file_path, volume, rate):
        if rate is not None:
            logger.debug("PowerShellCommandBuilder ignores playback rate %s", rate)
        return ["-NoProfile", "-Command", media_player_script(file_path, volume)]
