"""Tests for playback id generation."""

import re

from sound_launcher.common import new_playback_id


class TestNewPlaybackId:
    """Tests for new_playback_id()."""

    def test_format(self):
        """Test ids are 8 lowercase hexadecimal characters."""
        playback_id = new_playback_id()
        assert re.fullmatch(r"[0-9a-f]{8}", playback_id)

    def test_ids_differ(self):
        """Test consecutive ids are distinct."""
        ids = {new_playback_id() for _ in range(100)}
        assert len(ids) == 100

    def test_uses_secrets(self, monkeypatch):
        """Test ids come from secrets.token_bytes."""
        calls = []

        def fake_token_bytes(n):
            calls.append(n)
            return b"\x9b\x1c\x7a\x3f"

        monkeypatch.setattr("sound_launcher.common.secrets.token_bytes", fake_token_bytes)
        assert new_playback_id() == "9b1c7a3f"
        assert calls == [4]
