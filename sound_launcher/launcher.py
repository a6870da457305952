"""SoundLauncher: play audio files through an external player process.

Each call to play() spawns the platform player, registers the process under
a fresh playback id and returns at once. A daemon thread per playback drains
the player's output, waits for it to exit and unregisters it.
"""

import logging
import os
import subprocess
import threading

from sound_launcher.common import new_playback_id
from sound_launcher.core.constants import CREATE_NO_WINDOW
from sound_launcher.core.launcher_config import LauncherConfig, get_global_launcher_config
from sound_launcher.core.outcome import PlaybackOutcome, PlaybackResult
from sound_launcher.core.registry import PlaybackRegistry
from sound_launcher.platform import get_command_builder

logger = logging.getLogger(__name__)

__all__ = [
    "SoundLauncher",
]


class _Playback:
    """A spawned (or failed) player process and its completion signal.

    The playback owns the daemon thread that waits for its process.
    """

    def __init__(self, result: PlaybackResult, command, popen=None, error=None):
        self.result = result
        self.command = command
        self.popen = popen
        self.error = error
        self.stopped = False
        self._thread = None

    @property
    def id(self):
        return self.result.id

    def start(self, registry: PlaybackRegistry) -> None:
        """Start watching the process, unregistering it from ``registry`` once it is done."""
        self._thread = threading.Thread(
            target=self._watch,
            args=(registry,),
            daemon=True,
            name=f"SoundLauncher-{self.id}",
        )
        self._thread.start()

    def terminate(self):
        self.stopped = True
        if self.popen is None:
            return
        try:
            self.popen.terminate()
        except OSError as e:
            # the process exited between lookup and signal
            logger.debug(f"Playback {self.id} could not be terminated: {e}")

    def _watch(self, registry: PlaybackRegistry) -> None:
        """Wait for the player to finish, then unregister it and resolve its signal."""
        outcome = PlaybackOutcome.SPAWN_ERROR if self.popen is None else PlaybackOutcome.EXITED
        try:
            if self.popen is not None:
                # communicate() drains both pipes so a chatty player never blocks.
                # Output is buffered in memory until exit, fine for short clips.
                _, stderr = self.popen.communicate()
                returncode = self.popen.returncode
                if self.stopped:
                    outcome = PlaybackOutcome.STOPPED
                elif returncode != 0:
                    message = stderr.decode(errors="replace").strip() if stderr else ""
                    logger.warning(f"Playback {self.id} exited with code {returncode}: {message}")
        finally:
            registry.discard(self.id, self)
            self.result.resolve(outcome)
            logger.debug("Playback %s finished: %s", self.id, outcome.name)


class SoundLauncher:
    """Start, track and stop external player processes.

    The launcher owns its registry: independent launchers never see each
    other's playbacks. close(), or leaving a ``with`` block, stops everything
    still running.
    """

    def __init__(self, config: LauncherConfig | None = None, builder=None, platform_name=None):
        """Initialize the SoundLauncher.

        Args:
            config: LauncherConfig, or None to use the global default
            builder: Command builder to use instead of platform detection
            platform_name: Platform to select the builder for, None for the host
        """
        self._config = config
        if builder is None:
            builder = get_command_builder(platform_name, self.config)
        self._builder = builder
        if not builder.available():
            logger.warning(f"{builder.name} player {builder.executable} not found on PATH")
        self._registry = PlaybackRegistry()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __len__(self):
        return len(self._registry)

    @property
    def config(self) -> LauncherConfig:
        """Instance config if one was given, otherwise the current global config."""
        if self._config is None:
            return get_global_launcher_config()
        return self._config

    @property
    def builder(self):
        return self._builder

    def active_ids(self) -> list[str]:
        """Ids of the playbacks currently registered."""
        return self._registry.ids()

    def play(self, file_path, volume: float | None = None, rate: float | None = None) -> PlaybackResult:
        """Start playing an audio file.

        Args:
            file_path: Absolute or relative path to the audio file
            volume: Volume (0.0-1.0), defaults to the configured volume
            rate: Playback rate multiplier, only honoured by afplay

        Returns:
            PlaybackResult holding the playback id and its completion signal.
            A player that cannot be started is reported through the
            completion signal, never raised from here.
        """
        logger.debug("SoundLauncher.play(%s, %s, %s)", file_path, volume, rate)
        config = self.config
        if volume is None:
            volume = config.volume

        # the player may run with another working directory
        absolute_path = os.path.abspath(os.fspath(file_path))
        command = self._builder.build(absolute_path, volume, rate)

        popen = None
        error = None
        try:
            popen = subprocess.Popen(
                command.argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                **self._popen_kwargs(config),
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS cannot take, e.g. an embedded null byte
            logger.error(f"Could not start {command.executable} for {absolute_path}: {e}")
            error = e

        result = PlaybackResult(new_playback_id())
        playback = _Playback(result, command, popen=popen, error=error)
        self._registry.add(result.id, playback)

        playback.start(self._registry)
        return result

    def stop(self, playback_id: str) -> bool:
        """Stop a playback started with play().

        The id is unregistered immediately, without waiting for the process
        to exit, so only the first call for a given id returns True.

        Returns:
            True if a registered playback was found and terminated
        """
        logger.debug("SoundLauncher.stop(%s)", playback_id)
        playback = self._registry.pop(playback_id)
        if playback is None:
            return False

        playback.terminate()
        return True

    def stop_all(self) -> None:
        """Stop every playback currently registered."""
        logger.debug("SoundLauncher.stop_all()")
        for playback_id in self._registry.ids():
            self.stop(playback_id)

    def close(self) -> None:
        logger.debug("SoundLauncher.close()")
        self.stop_all()
        # playbacks registered by a concurrent play() after the snapshot
        for playback in self._registry.clear():
            playback.terminate()

    def _popen_kwargs(self, config: LauncherConfig) -> dict:
        if os.name == "nt" and config.hide_window:
            return {"creationflags": CREATE_NO_WINDOW}
        return {}
