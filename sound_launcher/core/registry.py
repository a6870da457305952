"""Registry of the player processes currently running."""

import logging
import threading

logger = logging.getLogger(__name__)

__all__ = [
    "PlaybackRegistry",
]


class PlaybackRegistry:
    """Thread-safe mapping from playback id to player handle.

    Every id present corresponds to a process that was spawned and has not
    yet been observed to exit, fail or be stopped.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._handles = {}

    def __len__(self):
        with self._lock:
            return len(self._handles)

    def __contains__(self, playback_id):
        with self._lock:
            return playback_id in self._handles

    def add(self, playback_id: str, handle) -> None:
        logger.debug("PlaybackRegistry.add(%s)", playback_id)
        with self._lock:
            if playback_id in self._handles:
                logger.warning(f"Playback id {playback_id} already registered, replacing it")
            self._handles[playback_id] = handle

    def pop(self, playback_id: str):
        """Remove and return the handle for an id, None if absent."""
        logger.debug("PlaybackRegistry.pop(%s)", playback_id)
        with self._lock:
            return self._handles.pop(playback_id, None)

    def discard(self, playback_id: str, handle) -> bool:
        """Remove an id only while it still maps to ``handle``.

        Returns:
            True if the entry was removed
        """
        logger.debug("PlaybackRegistry.discard(%s)", playback_id)
        with self._lock:
            if self._handles.get(playback_id) is not handle:
                return False
            del self._handles[playback_id]
            return True

    def ids(self) -> list[str]:
        """Snapshot of the registered ids."""
        with self._lock:
            return list(self._handles)

    def clear(self) -> list:
        """Remove every entry, returning the removed handles."""
        logger.debug("PlaybackRegistry.clear()")
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
            return handles
