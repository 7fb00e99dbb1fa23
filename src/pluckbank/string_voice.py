"""
StringVoice - one plucked string simulated with the Karplus-Strong algorithm.

Delay line of N = ceil(sample_rate / frequency) samples. Each tic() removes
the oldest sample, averages it with the sample behind it and feeds the
damped average back in at the tail:

    a = dequeue()
    b = peek()
    enqueue(((a + b) / 2) * DECAY_FACTOR)

The two-point average is a one-pole lowpass and DECAY_FACTOR is the loss per
pass; together they are the only source of decay and high-frequency damping.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from pluckbank.config import resolve_sample_rate
from pluckbank.errors import ConfigurationError
from pluckbank.noise import NoiseSource, UniformNoise
from pluckbank.ring_buffer import CircularSampleBuffer


DECAY_FACTOR = 0.996


def delay_length(frequency: float, sample_rate: float) -> int:
    """
    Delay-line length for a string tuned to `frequency`.

    The ceiling is kept as-is, so pitch is rounded down to
    sample_rate / ceil(sample_rate / frequency).

    Raises:
        ConfigurationError: If sample_rate is not positive, frequency is not
            a positive finite number, or frequency exceeds sample_rate.
    """
    if not (sample_rate > 0 and math.isfinite(sample_rate)):
        raise ConfigurationError(f"sample_rate must be positive, got {sample_rate}")
    if not (frequency > 0 and math.isfinite(frequency)):
        raise ConfigurationError(f"frequency must be positive, got {frequency}")
    if frequency > sample_rate:
        raise ConfigurationError(
            f"frequency {frequency} Hz is above sample_rate {sample_rate} Hz"
        )
    return int(np.ceil(sample_rate / frequency))


class StringVoice:
    """
    A single Karplus-Strong oscillator.

    The buffer is full after construction and after every pluck() or tic(),
    so sample() is always defined. A new voice holds N zeros (silence).

    Args:
        frequency: Fundamental frequency in Hz. Sets the delay length once;
            the voice is never retuned.
        sample_rate: Sample rate in Hz (default: process default, 44100).
        noise: Source of pluck excitation (default: UniformNoise()).

    Example:
        voice = StringVoice(440.0)
        voice.pluck()
        out = []
        for _ in range(44100):
            out.append(voice.sample())
            voice.tic()
    """

    def __init__(
        self,
        frequency: float,
        sample_rate: Optional[float] = None,
        noise: Optional[NoiseSource] = None,
    ):
        sample_rate = resolve_sample_rate(sample_rate)
        n = delay_length(frequency, sample_rate)
        self._init(float(frequency), sample_rate, noise, np.zeros(n))

    @classmethod
    def from_samples(
        cls,
        samples: Iterable[float],
        sample_rate: Optional[float] = None,
        noise: Optional[NoiseSource] = None,
    ) -> "StringVoice":
        """
        Build a voice whose delay line holds exactly `samples`, oldest first.

        The buffer length is len(samples) and the reported frequency is
        sample_rate / len(samples).

        Raises:
            ConfigurationError: If samples is empty or sample_rate is not positive
        """
        data = np.asarray(list(samples), dtype=np.float64)
        if data.size == 0:
            raise ConfigurationError("samples must not be empty")
        sample_rate = resolve_sample_rate(sample_rate)
        if not sample_rate > 0:
            raise ConfigurationError(f"sample_rate must be positive, got {sample_rate}")
        voice = cls.__new__(cls)
        voice._init(sample_rate / data.size, sample_rate, noise, data)
        return voice

    def _init(
        self,
        frequency: float,
        sample_rate: float,
        noise: Optional[NoiseSource],
        initial: np.ndarray,
    ) -> None:
        self._frequency = frequency
        self._sample_rate = sample_rate
        self._noise = noise if noise is not None else UniformNoise()
        self._length = int(initial.size)
        self._buffer = CircularSampleBuffer(self._length)
        for x in initial:
            self._buffer.enqueue(float(x))

    @property
    def frequency(self) -> float:
        """Nominal frequency in Hz."""
        return self._frequency

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    @property
    def buffer(self) -> CircularSampleBuffer:
        """The delay line (read-only use: diagnostics and tests)."""
        return self._buffer

    def length(self) -> int:
        """Delay-line length N."""
        return self._length

    def pluck(self) -> None:
        """
        Replace every slot with fresh noise.

        Each slot is dequeued before its replacement is enqueued, so the
        buffer holds exactly N samples throughout. Legal at any time,
        including mid-decay.
        """
        buf = self._buffer
        noise = self._noise
        for _ in range(self._length):
            buf.dequeue()
            buf.enqueue(noise.next_uniform())

    def tic(self) -> None:
        """Advance the simulation by one sample period."""
        buf = self._buffer
        a = buf.dequeue()
        # A one-slot line wraps onto itself
        b = buf.peek() if self._length > 1 else a
        buf.enqueue(((a + b) / 2) * DECAY_FACTOR)

    def sample(self) -> float:
        """Current output sample (head of the delay line). Does not advance."""
        return self._buffer.peek()

    def __repr__(self) -> str:
        return (
            f"StringVoice(frequency={self._frequency}, "
            f"sample_rate={self._sample_rate}, length={self._length})"
        )
