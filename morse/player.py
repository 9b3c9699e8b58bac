"""
Morse Player - Renders Morse codes as audible tones.

Each unit is a sine tone (dit = 1 unit, dah = 3 units), units within a code
are separated by one unit of silence and codes by two. The word space has no
tone of its own.
"""

import logging
import threading
import time
from pathlib import Path
from typing import Iterable

import numpy as np
import soundfile as sf

from . import SAMPLE_RATE, TONE_FREQ, WPM
from .alphabet import Code, Duration

# Module-level logger
_logger = logging.getLogger(__name__)

# sounddevice plays through one shared default stream
_output_lock = threading.Lock()


class MorsePlayer:
    """
    Tone generator for Morse playback and WAV export.

    Playback is blocking and owns the audio output while it runs, so only
    one playback can run at a time across all players.
    """

    def __init__(
        self,
        sample_rate: int = SAMPLE_RATE,
        tone_freq: int = TONE_FREQ,
        wpm: int = WPM,
        amplitude: float = 0.7,
    ):
        """
        Initialize player.

        Args:
            sample_rate: Output audio sample rate (Hz)
            tone_freq: Tone frequency (Hz)
            wpm: Speed in words per minute
            amplitude: Output amplitude (0.0 to 1.0)
        """
        if wpm <= 0:
            raise ValueError("wpm must be positive")
        if not 0.0 <= amplitude <= 1.0:
            raise ValueError("amplitude must be between 0.0 and 1.0")

        self.sample_rate = sample_rate
        self.tone_freq = tone_freq
        self.wpm = wpm
        self.amplitude = amplitude

        # Timings in milliseconds
        self.duration_short = 1200 // wpm
        self.duration_long = self.duration_short * 3
        self.duration_gap = self.duration_short * 2
        self.duration_symbol_gap = self.duration_short

    def unit_duration(self, unit: Duration) -> int:
        """Tone length of a unit in milliseconds."""
        if unit is Duration.DAH:
            return self.duration_long
        return self.duration_short

    def _num_samples(self, duration_ms: int) -> int:
        return int(self.sample_rate * duration_ms / 1000)

    def _tone(self, duration_ms: int) -> np.ndarray:
        """
        Generate a sine tone.

        Args:
            duration_ms: Tone length in milliseconds

        Returns:
            Array of audio samples (-amplitude to amplitude)
        """
        t = np.arange(self._num_samples(duration_ms)) / self.sample_rate
        tone = np.sin(2 * np.pi * self.tone_freq * t) * self.amplitude
        return tone.astype(np.float32)

    def _silence(self, duration_ms: int) -> np.ndarray:
        return np.zeros(self._num_samples(duration_ms), dtype=np.float32)

    def render(self, codes: Iterable[Code]) -> tuple[np.ndarray, int]:
        """
        Render codes to a single audio buffer.

        Args:
            codes: Transcript or any iterable of Codes

        Returns:
            Tuple of (audio_samples, sample_rate)
        """
        segments = []

        for i, code in enumerate(codes):
            if i > 0:
                segments.append(self._silence(self.duration_gap))

            for j, unit in enumerate(code):
                if j > 0:
                    segments.append(self._silence(self.duration_symbol_gap))
                segments.append(self._tone(self.unit_duration(unit)))

        if not segments:
            return np.zeros(0, dtype=np.float32), self.sample_rate

        samples = np.concatenate(segments)
        _logger.debug(f"Rendered {len(samples)} samples at {self.sample_rate} Hz")
        return samples, self.sample_rate

    def write(self, codes: Iterable[Code], output_path: str | Path):
        """
        Render codes and save them to an audio file.

        Args:
            codes: Transcript or any iterable of Codes
            output_path: Output WAV file path
        """
        samples, sample_rate = self.render(codes)

        # Save using soundfile (supports various formats)
        sf.write(
            str(output_path),
            samples,
            sample_rate,
            subtype='PCM_16'
        )
        _logger.info(f"Wrote {len(samples) / sample_rate:.2f}s of audio to {output_path}")

    def play(self, codes: Iterable[Code]):
        """
        Play codes on the default output device, blocking until done.

        Each tone finishes before the next one starts.

        Raises:
            RuntimeError: If another playback is already running
            sounddevice.PortAudioError: If the audio device cannot be used
        """
        if not _output_lock.acquire(blocking=False):
            raise RuntimeError("playback already in progress")

        try:
            import sounddevice as sd

            for i, code in enumerate(codes):
                if i > 0:
                    time.sleep(self.duration_gap / 1000)

                for j, unit in enumerate(code):
                    if j > 0:
                        time.sleep(self.duration_symbol_gap / 1000)
                    sd.play(self._tone(self.unit_duration(unit)), self.sample_rate)
                    sd.wait()

                _logger.debug(f"Played code '{code}'")
        finally:
            _output_lock.release()


def play(codes: Iterable[Code]):
    """Play codes with the default tone and speed, blocking until done."""
    MorsePlayer().play(codes)
