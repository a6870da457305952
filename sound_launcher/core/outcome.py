"""Playback outcome types returned by SoundLauncher.play()."""

import logging
from concurrent.futures import Future
from enum import Enum

logger = logging.getLogger(__name__)

__all__ = [
    "PlaybackOutcome",
    "PlaybackResult",
]


class PlaybackOutcome(Enum):
    """How a playback finished."""

    EXITED = 1
    STOPPED = 2
    SPAWN_ERROR = 3


class PlaybackResult:
    """Id of a playback paired with its completion signal.

    ``finished`` is a Future resolved exactly once with a PlaybackOutcome.
    It never carries an exception: a player that failed to start still
    counts as finished.
    """

    __slots__ = ("id", "finished")

    def __init__(self, playback_id: str):
        self.id = playback_id
        self.finished = Future()
        # a running future can no longer be cancelled by the caller
        self.finished.set_running_or_notify_cancel()

    def __iter__(self):
        # allows ``playback_id, finished = launcher.play(...)``
        return iter((self.id, self.finished))

    def __repr__(self):
        return f"<PlaybackResult id={self.id} outcome={self.outcome}>"

    def done(self) -> bool:
        return self.finished.done()

    @property
    def outcome(self) -> PlaybackOutcome | None:
        """Outcome of the playback, None while it is still running."""
        if not self.finished.done():
            return None
        return self.finished.result()

    def wait(self, timeout: float | None = None) -> PlaybackOutcome:
        """Block until the playback finished.

        Raises:
            concurrent.futures.TimeoutError: if timeout elapses first
        """
        logger.debug("PlaybackResult.wait(%s)", timeout)
        return self.finished.result(timeout=timeout)

    def resolve(self, outcome: PlaybackOutcome) -> bool:
        """Resolve the completion signal, only the first call has an effect."""
        if self.finished.done():
            return False
        self.finished.set_result(outcome)
        return True
