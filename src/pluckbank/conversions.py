"""
Pitch and time conversion helpers.

All functions are vectorized and work with numpy arrays or scalars. Pitch
numbers follow the MIDI convention in 12-tone equal temperament:
A4 = 69 = 440 Hz, middle C = 60.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

import numpy as np
from numpy.typing import ArrayLike


def semitones_to_ratio(semitones: ArrayLike) -> np.ndarray:
    """
    Convert an interval in semitones to a frequency ratio.

    Example:
        >>> semitones_to_ratio(12)  # Octave
        2.0
        >>> semitones_to_ratio(-24)
        0.25
    """
    semitones = np.asarray(semitones, dtype=np.float64)
    return 2.0 ** (semitones / 12.0)


def pitch_to_freq(
    pitch: ArrayLike,
    reference_pitch: float = 69.0,
    reference_freq: float = 440.0,
) -> np.ndarray:
    """
    Convert pitch number to frequency in Hz.

    Args:
        pitch: Pitch number(s). Can be fractional.
        reference_pitch: Pitch number of the reference note (default A4 = 69)
        reference_freq: Frequency of the reference note in Hz (default 440)

    Example:
        >>> pitch_to_freq(69)
        440.0
        >>> pitch_to_freq([45, 81])
        array([110., 880.])
    """
    pitch = np.asarray(pitch, dtype=np.float64)
    return reference_freq * semitones_to_ratio(pitch - reference_pitch)


def freq_to_pitch(
    freq: ArrayLike,
    reference_pitch: float = 69.0,
    reference_freq: float = 440.0,
) -> np.ndarray:
    """
    Convert frequency in Hz to pitch number (fractional for microtones).

    Args:
        freq: Frequency in Hz. Must be positive.

    Example:
        >>> freq_to_pitch(440.0)
        69.0
    """
    freq = np.asarray(freq, dtype=np.float64)
    return reference_pitch + 12.0 * np.log2(freq / reference_freq)


def samples_to_seconds(samples: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert sample count to seconds.

    Example:
        >>> samples_to_seconds(22050, 44100)
        0.5
    """
    samples = np.asarray(samples, dtype=np.float64)
    return samples / sample_rate


def seconds_to_samples(seconds: ArrayLike, sample_rate: float) -> np.ndarray:
    """
    Convert seconds to sample count.

    Returns:
        Number of samples (float, caller may want to round)

    Example:
        >>> seconds_to_samples(0.5, 44100)
        22050.0
    """
    seconds = np.asarray(seconds, dtype=np.float64)
    return seconds * sample_rate
