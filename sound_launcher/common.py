import logging
import secrets

from sound_launcher.core.constants import PLAYBACK_ID_BYTES

logger = logging.getLogger(__name__)

__all__ = [
    "new_playback_id",
]


def new_playback_id() -> str:
    """Return a short random id for one playback, e.g. "9b1c7a3f".

    Ids are not checked against the registry; a collision between two
    active playbacks is possible but astronomically unlikely.
    """
    return secrets.token_bytes(PLAYBACK_ID_BYTES).hex()
