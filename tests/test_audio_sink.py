import numpy as np
import pytest

from sketchjam.logic.audio_sink import AudioSink


def test_defaults_to_flat_eq():
    sink = AudioSink()
    assert sink.eq.bass_gain == 1.0
    assert sink.eq.treble_gain == 1.0


def test_set_eq_swaps_in_a_new_value():
    sink = AudioSink()
    old = sink.eq
    sink.set_eq(1.5, 0.5)
    assert sink.eq is not old
    assert (sink.eq.bass_gain, sink.eq.treble_gain) == (1.5, 0.5)
    assert (old.bass_gain, old.treble_gain) == (1.0, 1.0)


def test_flat_eq_returns_the_input():
    sink = AudioSink()
    block = np.sin(np.linspace(0, 40 * np.pi, 512))
    assert np.allclose(sink.apply_eq(block), block)


def test_bass_gain_scales_a_steady_signal():
    sink = AudioSink()
    sink.set_eq(1.5, 0.5)
    out = sink.apply_eq(np.ones(256))
    # Away from the edges a constant signal is all low band
    assert out[128] == pytest.approx(1.5)


def test_short_and_empty_blocks():
    sink = AudioSink()
    assert sink.apply_eq([]).size == 0
    assert sink.apply_eq(np.ones(10)).shape == (10,)


def test_response_follows_the_band_gains():
    sink = AudioSink()
    assert sink.response_at(100) == pytest.approx(1.0, abs=0.01)

    sink.set_eq(1.5, 0.5)
    assert sink.response_at(100) == pytest.approx(1.5, abs=0.05)
    assert sink.response_at(8000) == pytest.approx(0.5, abs=0.1)
