"""
Noise sources used to excite a string when it is plucked.

A NoiseSource yields one uniform value in [-0.5, 0.5) per call. Voices take
the source as a constructor argument so tests can substitute a fixed
sequence for the random generator.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

import numpy as np


class NoiseSource(ABC):
    """Supplies excitation samples for StringVoice.pluck()."""

    @abstractmethod
    def next_uniform(self) -> float:
        """Return the next value in [-0.5, 0.5)."""
        ...


class UniformNoise(NoiseSource):
    """
    White noise drawn uniformly from [-0.5, 0.5).

    Args:
        seed: Random seed for reproducibility. If None, uses system entropy.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def next_uniform(self) -> float:
        return float(self._rng.uniform(-0.5, 0.5))

    def __repr__(self) -> str:
        return f"UniformNoise(seed={self._seed})"


class SequenceNoise(NoiseSource):
    """
    Deterministic source that cycles through a fixed list of values.

    Args:
        values: Non-empty sequence of values, each in [-0.5, 0.5).

    Example:
        # Every pluck seeds an impulse followed by silence
        noise = SequenceNoise([0.4, 0.0, 0.0, 0.0, 0.0])
    """

    def __init__(self, values: Iterable[float]):
        values = [float(v) for v in values]
        if not values:
            raise ValueError("values must not be empty")
        for v in values:
            if not (-0.5 <= v < 0.5):
                raise ValueError(f"noise values must be in [-0.5, 0.5), got {v}")
        self._values = values
        self._index = 0

    def next_uniform(self) -> float:
        value = self._values[self._index]
        self._index = (self._index + 1) % len(self._values)
        return value

    def __repr__(self) -> str:
        return f"SequenceNoise(len={len(self._values)})"
