import logging
import time

from sound_launcher import LauncherConfig, SoundLauncher


def test_play_and_stop():
    print("Test play and stop:")
    with SoundLauncher() as launcher:
        playback_id, finished = launcher.play("data/music.ogg")
        time.sleep(3)
        print("stopped:", launcher.stop(playback_id))
        print("outcome:", finished.result())


def test_play_until_end():
    print("Test play until end:")
    launcher = SoundLauncher(config=LauncherConfig.from_env())
    result = launcher.play("data/coin.wav", volume=0.8)
    print("outcome:", result.wait())


def test_stop_all():
    print("Test stop all")
    with SoundLauncher() as launcher:
        for _ in range(3):
            launcher.play("data/coin.wav")
            time.sleep(0.2)
        launcher.stop_all()
        print("active:", launcher.active_ids())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    test_play_and_stop()
    #test_play_until_end()
    #test_stop_all()
