"""
Tests for Morse audio rendering and playback.
"""

import sys
import threading
import types

import numpy as np
import pytest
import soundfile as sf

from morse import MorsePlayer, encode, SPACE, DURATION_SHORT, DURATION_LONG, DURATION_GAP, DURATION_SYMBOL_GAP
from morse import player as player_module


def samples_for(ms, sample_rate=44100):
    return int(sample_rate * ms / 1000)


class TestMorsePlayer:
    """Test tone rendering."""

    def test_player_init(self):
        player = MorsePlayer()
        assert player.sample_rate == 44100
        assert player.tone_freq == 800
        assert player.wpm == 10
        assert player.duration_short == DURATION_SHORT == 120
        assert player.duration_long == DURATION_LONG == 360
        assert player.duration_gap == DURATION_GAP == 240
        assert player.duration_symbol_gap == DURATION_SYMBOL_GAP == 120

    def test_invalid_params(self):
        with pytest.raises(ValueError):
            MorsePlayer(wpm=0)
        with pytest.raises(ValueError):
            MorsePlayer(amplitude=1.5)

    def test_render_single_dit(self):
        player = MorsePlayer()
        samples, sr = player.render(encode("e"))

        assert sr == 44100
        assert len(samples) == samples_for(120)

    def test_render_code_with_symbol_gaps(self):
        """Three dits with two gaps between them."""
        player = MorsePlayer()
        samples, _ = player.render(encode("s"))

        assert len(samples) == samples_for(5 * 120)
        gap = samples[samples_for(120):samples_for(240)]
        assert np.all(gap == 0)

    def test_render_code_gap(self):
        player = MorsePlayer()
        samples, _ = player.render(encode("et"))

        # dit + code gap + dah
        assert len(samples) == samples_for(120 + 240 + 360)

    def test_render_space_has_no_tone(self):
        player = MorsePlayer()
        samples, _ = player.render([SPACE])
        assert len(samples) == 0

        samples, _ = player.render(encode("e e"))
        # dit + gap + (space) + gap + dit
        assert len(samples) == samples_for(120 + 240 + 240 + 120)

    def test_render_empty(self):
        samples, sr = MorsePlayer().render([])
        assert len(samples) == 0
        assert sr == 44100

    def test_render_amplitude(self):
        samples_half, _ = MorsePlayer(amplitude=0.5).render(encode("t"))
        samples_full, _ = MorsePlayer(amplitude=1.0).render(encode("t"))

        assert np.all(np.abs(samples_full) <= 1.0)
        assert np.max(np.abs(samples_half)) <= 0.5 + 1e-6
        rms_half = np.sqrt(np.mean(samples_half ** 2))
        rms_full = np.sqrt(np.mean(samples_full ** 2))
        assert abs(rms_half * 2 - rms_full) < 0.01

    def test_render_frequency(self):
        """Dominant frequency of a dah is the tone frequency."""
        samples, sr = MorsePlayer().render(encode("t"))
        spectrum = np.abs(np.fft.rfft(samples))
        freqs = np.fft.rfftfreq(len(samples), 1 / sr)
        assert abs(freqs[np.argmax(spectrum)] - 800) < 5

    def test_write_wav(self, tmp_path):
        output = tmp_path / "sos.wav"
        MorsePlayer().write(encode("sos"), output)

        data, sr = sf.read(str(output))
        assert sr == 44100
        assert len(data) == samples_for(600 + 240 + 1320 + 240 + 600)


class FakeSoundDevice:
    """Records tones instead of playing them."""

    def __init__(self):
        self.played = []
        self.waits = 0

    def play(self, samples, sample_rate):
        self.played.append((len(samples), sample_rate))

    def wait(self):
        self.waits += 1


@pytest.fixture
def fake_sd(monkeypatch):
    fake = FakeSoundDevice()
    monkeypatch.setitem(sys.modules, "sounddevice", fake)
    monkeypatch.setattr(player_module.time, "sleep", lambda seconds: None)
    return fake


class TestPlayback:
    """Test blocking playback with a stubbed audio device."""

    def test_plays_each_unit(self, fake_sd):
        MorsePlayer().play(encode("sos"))

        assert len(fake_sd.played) == 9
        assert fake_sd.waits == 9
        assert fake_sd.played[0] == (samples_for(120), 44100)
        assert fake_sd.played[3] == (samples_for(360), 44100)

    def test_space_plays_nothing(self, fake_sd):
        MorsePlayer().play([SPACE])
        assert fake_sd.played == []

    def test_module_play(self, fake_sd):
        player_module.play(encode("e"))
        assert len(fake_sd.played) == 1

    def test_one_playback_at_a_time(self, monkeypatch):
        """A second play while the first is still sounding is refused."""
        started = threading.Event()
        release = threading.Event()
        active = []
        max_active = []

        def blocking_play(samples, sample_rate):
            active.append(1)
            max_active.append(len(active))
            started.set()

        def blocking_wait():
            release.wait(timeout=5)
            active.pop()

        fake = types.SimpleNamespace(play=blocking_play, wait=blocking_wait)
        monkeypatch.setitem(sys.modules, "sounddevice", fake)

        errors = []

        def run():
            try:
                player_module.play(encode("e"))
            except RuntimeError as e:
                errors.append(e)

        first = threading.Thread(target=run)
        first.start()
        assert started.wait(timeout=5)

        second = threading.Thread(target=run)
        second.start()
        second.join(timeout=5)

        release.set()
        first.join(timeout=5)

        assert max(max_active) == 1
        assert len(errors) == 1
        assert "already in progress" in str(errors[0])

    def test_separate_players_share_output(self, fake_sd):
        player_module._output_lock.acquire()
        try:
            with pytest.raises(RuntimeError):
                MorsePlayer().play(encode("e"))
        finally:
            player_module._output_lock.release()

    def test_device_error_propagates(self, monkeypatch):
        def fail(samples, sample_rate):
            raise OSError("no device")

        broken = types.SimpleNamespace(play=fail, wait=lambda: None)
        monkeypatch.setitem(sys.modules, "sounddevice", broken)

        player = MorsePlayer()
        with pytest.raises(OSError):
            player.play(encode("e"))

        # Lock is released after a failure
        assert player_module._output_lock.acquire(blocking=False)
        player_module._output_lock.release()
