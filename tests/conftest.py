"""Test configuration and fixtures for sound-launcher tests."""

import sys
import threading
import time
from unittest.mock import MagicMock

import pytest

from sound_launcher.core import LauncherConfig, get_global_launcher_config, set_global_launcher_config
from sound_launcher.core.base_command import BaseCommandBuilder


class PythonCommandBuilder(BaseCommandBuilder):
    """Runs the current interpreter instead of a real audio player.

    The file path is ignored; ``script`` decides how long the "playback" lasts.
    """

    name = "Python"

    def __init__(self, script="pass", executable=sys.executable):
        super().__init__(executable)
        self.script = script

    def normalize_volume(self, volume):
        return volume

    def _build_args(self, file_path, volume, rate):
        return ["-c", self.script, file_path, str(volume)]


class BlockingPopen:
    """Popen stand-in whose process runs until terminate() or finish() is called."""

    def __init__(self, returncode=0, stderr=b""):
        self._done = threading.Event()
        self._returncode = returncode
        self._stderr = stderr
        self.returncode = None
        self.terminate = MagicMock(side_effect=self._on_terminate)

    def _on_terminate(self):
        self._returncode = -15
        self._done.set()

    def finish(self):
        self._done.set()

    def communicate(self):
        self._done.wait(timeout=5)
        self.returncode = self._returncode
        return b"", self._stderr


@pytest.fixture(autouse=True)
def restore_global_config():
    """Restore the global launcher config after each test."""
    config = get_global_launcher_config()
    yield
    set_global_launcher_config(config)


@pytest.fixture
def python_builder():
    """Create a builder running a python script as the player."""

    def _create(script="pass"):
        return PythonCommandBuilder(script)

    return _create


@pytest.fixture
def blocking_popen():
    """Create BlockingPopen instances."""

    def _create(*args, **kwargs):
        return BlockingPopen(*args, **kwargs)

    return _create


@pytest.fixture
def default_config():
    return LauncherConfig()


@pytest.fixture
def wait_until():
    """Helper polling a predicate until it holds or the timeout elapses."""

    def _wait(predicate, timeout=5.0):
        start = time.time()
        while not predicate():
            if time.time() - start > timeout:
                return False
            time.sleep(0.01)
        return True

    return _wait
