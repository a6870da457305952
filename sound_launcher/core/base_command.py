"""BaseCommandBuilder class for platform-specific player commands.

This module provides the PlayCommand value type and the BaseCommandBuilder
abstract base class which platform implementations derive from to turn a
file path and a volume into the argument vector of an external player.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from shutil import which

logger = logging.getLogger(__name__)

__all__ = [
    "PlayCommand",
    "BaseCommandBuilder",
    "format_number",
]


def format_number(value: float) -> str:
    """Render a number for a command line, ``1.0`` becomes ``"1"``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class PlayCommand:
    """An executable and its ordered arguments, run without a shell."""

    executable: str
    args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]


class BaseCommandBuilder(ABC):
    """Base class for building the command that plays one file.

    Platform-specific implementations must implement:
    - normalize_volume(): map a 0.0-1.0 volume to the player's range
    - _build_args(): the arguments passed to the executable
    """

    name = "base"

    def __init__(self, executable: str):
        self.executable = executable

    def __repr__(self):
        return f"<{self.__class__.__name__} executable={self.executable}>"

    @abstractmethod
    def normalize_volume(self, volume: float) -> float:
        """Convert a 0.0-1.0 volume to the value handed to the player."""

    @abstractmethod
    def _build_args(self, file_path: str, volume: float, rate: float | None) -> list[str]:
        """Arguments for an absolute file path and an already normalized volume."""

    def build(self, file_path: str, volume: float, rate: float | None = None) -> PlayCommand:
        """Build the command playing ``file_path`` at ``volume`` (0.0-1.0).

        Args:
            file_path: Absolute path of the audio file
            volume: Volume before platform normalization
            rate: Optional playback rate, ignored where unsupported
        """
        logger.debug("%s.build(%s, %s, %s)", self.__class__.__name__, file_path, volume, rate)
        args = self._build_args(file_path, self.normalize_volume(volume), rate)
        return PlayCommand(self.executable, tuple(args))

    def available(self) -> bool:
        """Check if the executable can be found on PATH."""
        return which(self.executable) is not None
