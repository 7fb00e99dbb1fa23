"""
VoiceBank - a fixed set of string voices mixed onto one output.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Optional

import numpy as np

from pluckbank.config import handle_error, resolve_sample_rate
from pluckbank.errors import ConfigurationError
from pluckbank.logger import get_logger
from pluckbank.noise import NoiseSource, UniformNoise
from pluckbank.string_voice import StringVoice

logger = get_logger(__name__)


class VoiceBank:
    """
    Owns one StringVoice per symbol and drives the shared simulation clock.

    The bank is built once from an ordered table of (symbol, frequency)
    pairs and never changes afterwards. Voices are iterated in table order,
    so output is reproducible for a given noise source.

    tick() reads every voice's sample() first and only then advances every
    voice with tic(); advancing one voice before another is read would mix
    samples from different steps.

    Args:
        table: Ordered (symbol, frequency_hz) pairs. Symbols may be any
            hashable value (key characters, MIDI note numbers, ...).
        sample_rate: Sample rate in Hz (default: process default, 44100).
        noise: Noise source shared by all voices (default: UniformNoise()).

    Raises:
        ConfigurationError: If the table is empty, a frequency is invalid,
            or (in STRICT mode) a symbol appears twice.

    Example:
        bank = VoiceBank([("a", 220.0), ("b", 440.0)])
        bank.trigger("a")
        block = bank.render(44100)
    """

    def __init__(
        self,
        table: Iterable[tuple[Hashable, float]],
        sample_rate: Optional[float] = None,
        noise: Optional[NoiseSource] = None,
    ):
        self._sample_rate = resolve_sample_rate(sample_rate)
        self._noise = noise if noise is not None else UniformNoise()
        self._voices: dict[Hashable, StringVoice] = {}

        for symbol, frequency in table:
            if symbol in self._voices:
                if handle_error(
                    f"Duplicate symbol {symbol!r} in voice table; keeping first binding.",
                    exception_class=ConfigurationError,
                ):
                    continue
            self._voices[symbol] = StringVoice(
                frequency, sample_rate=self._sample_rate, noise=self._noise
            )

        if not self._voices:
            raise ConfigurationError("voice table must not be empty")

        # Fixed iteration order for tick()
        self._order: tuple[StringVoice, ...] = tuple(self._voices.values())
        logger.info(
            f"VoiceBank ready: {len(self._order)} voices, "
            f"sample_rate={self._sample_rate}"
        )

    @property
    def sample_rate(self) -> float:
        return self._sample_rate

    def symbols(self) -> list[Hashable]:
        """Configured symbols in table order."""
        return list(self._voices)

    def voice(self, symbol: Hashable) -> StringVoice:
        """
        The voice bound to symbol.

        Raises:
            KeyError: If symbol is not configured
        """
        return self._voices[symbol]

    def trigger(self, symbol: Hashable) -> bool:
        """
        Pluck the voice bound to symbol.

        Unknown symbols are ignored.

        Returns:
            True if a voice was plucked
        """
        voice = self._voices.get(symbol)
        if voice is None:
            logger.debug(f"No voice bound to {symbol!r}; ignoring trigger")
            return False
        voice.pluck()
        return True

    def tick(self) -> float:
        """
        Produce one output sample and advance every voice by one step.

        Returns:
            Sum of every voice's current sample, taken before any voice advances
        """
        total = 0.0
        for voice in self._order:
            total += voice.sample()
        for voice in self._order:
            voice.tic()
        return total

    def render(self, n: int) -> np.ndarray:
        """
        Run n ticks and return their outputs as a float64 array of shape (n,).

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        out = np.zeros(n, dtype=np.float64)
        for i in range(n):
            out[i] = self.tick()
        return out

    def __contains__(self, symbol: Hashable) -> bool:
        return symbol in self._voices

    def __len__(self) -> int:
        return len(self._voices)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._voices)

    def __repr__(self) -> str:
        return f"VoiceBank(voices={len(self._voices)}, sample_rate={self._sample_rate})"
