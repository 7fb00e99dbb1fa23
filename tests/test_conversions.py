"""
Tests for conversion utility functions.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

import pytest
import numpy as np
from pluckbank import (
    pitch_to_freq,
    freq_to_pitch,
    semitones_to_ratio,
    samples_to_seconds,
    seconds_to_samples,
)


class TestPitchFreqConversions:
    """Test pitch <-> frequency conversions."""

    def test_pitch_to_freq_a4(self):
        """A4 (MIDI 69) should be 440 Hz."""
        assert pitch_to_freq(69) == pytest.approx(440.0)

    def test_pitch_to_freq_middle_c(self):
        """Middle C (MIDI 60) should be ~261.63 Hz."""
        assert pitch_to_freq(60) == pytest.approx(261.6256, rel=1e-4)

    def test_pitch_to_freq_array(self):
        freqs = pitch_to_freq([45, 57, 81])
        np.testing.assert_array_almost_equal(freqs, [110.0, 220.0, 880.0])

    def test_pitch_to_freq_reference(self):
        assert pitch_to_freq(69, reference_freq=432.0) == pytest.approx(432.0)

    def test_freq_to_pitch_440(self):
        assert freq_to_pitch(440.0) == pytest.approx(69.0)

    def test_round_trip(self):
        assert freq_to_pitch(pitch_to_freq(52.5)) == pytest.approx(52.5)


class TestIntervalConversions:
    """Test semitone ratios."""

    def test_octave(self):
        assert semitones_to_ratio(12) == pytest.approx(2.0)
        assert semitones_to_ratio(-24) == pytest.approx(0.25)

    def test_unison(self):
        assert semitones_to_ratio(0) == pytest.approx(1.0)


class TestTimeConversions:
    """Test sample/second conversions."""

    def test_samples_to_seconds(self):
        assert samples_to_seconds(44100, 44100) == pytest.approx(1.0)
        assert samples_to_seconds(22050, 44100) == pytest.approx(0.5)

    def test_seconds_to_samples(self):
        assert seconds_to_samples(0.5, 44100) == pytest.approx(22050.0)

    def test_array(self):
        np.testing.assert_array_almost_equal(
            seconds_to_samples([0.0, 1.0, 2.0], 100), [0.0, 100.0, 200.0]
        )
