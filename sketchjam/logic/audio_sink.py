"""
Audio Sink for SketchJam

Receives EQ gains from the settings model. The application root creates
one sink and hands it to whoever needs to push gains; there is no global
instance.

The gain pair is stored as a single immutable EQSettings value and
swapped in one assignment, so an audio thread reading `eq` always sees a
bass/treble pair that belongs together.

"""

import logging
import threading

import numpy as np

from sketchjam.logic.settings import EQSettings

logger = logging.getLogger(__name__)

CROSSOVER_TAPS = 32  # Moving-average length used to split low and high bands


class AudioSink:
    def __init__(self, sample_rate: int = 44100):
        self.sample_rate = sample_rate
        self._lock = threading.Lock()
        self._eq = EQSettings(bass_gain=1.0, treble_gain=1.0)

    @property
    def eq(self) -> EQSettings:
        return self._eq

    def set_eq(self, bass_gain: float, treble_gain: float):
        new_eq = EQSettings(bass_gain=float(bass_gain), treble_gain=float(treble_gain))
        with self._lock:
            self._eq = new_eq
        logger.debug("Audio EQ set: bass=%.3f treble=%.3f", new_eq.bass_gain, new_eq.treble_gain)

    def apply_eq(self, block):
        """
        Apply the current gains to a mono block of samples

        The block is split with a moving-average low-pass; the high band
        is whatever the low-pass removed, so unity gains return the input.

        Args:
            block: 1-D array-like of float samples

        Returns:
            np.ndarray: Equalized samples, same length as the input
        """
        eq = self._eq  # One read, one consistent pair
        samples = np.asarray(block, dtype=np.float64)
        if samples.size == 0:
            return samples.copy()

        kernel = np.ones(CROSSOVER_TAPS) / CROSSOVER_TAPS
        low = np.convolve(samples, kernel, mode="same")
        if low.size != samples.size:  # Kernel longer than the block
            low = low[(low.size - samples.size) // 2:][:samples.size]
        high = samples - low
        return eq.bass_gain * low + eq.treble_gain * high

    def response_at(self, frequency: float, duration: float = 0.25) -> float:
        """
        Measure the current EQ's gain at one frequency

        Runs a test sine through apply_eq and compares RMS levels, ignoring
        the filter's edge samples.

        Args:
            frequency: Test tone in Hz
            duration: Tone length in seconds

        Returns:
            float: Output RMS over input RMS (1.0 = unchanged)
        """
        t = np.arange(int(self.sample_rate * duration)) / self.sample_rate
        tone = np.sin(2 * np.pi * frequency * t)
        out = self.apply_eq(tone)

        edge = CROSSOVER_TAPS
        tone, out = tone[edge:-edge], out[edge:-edge]
        if tone.size == 0:
            return 1.0
        return float(np.sqrt(np.mean(out ** 2)) / np.sqrt(np.mean(tone ** 2)))
