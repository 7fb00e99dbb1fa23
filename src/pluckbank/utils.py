"""
Utility helpers for offline rendering.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

from typing import Hashable, Optional, Sequence

from pluckbank.config import resolve_sample_rate
from pluckbank.conversions import seconds_to_samples
from pluckbank.keyboard import keyboard_table
from pluckbank.noise import UniformNoise
from pluckbank.player import Player
from pluckbank.sinks import WavSink
from pluckbank.voice_bank import VoiceBank


def key_events(
    keys: str,
    spacing: float,
    sample_rate: float,
) -> list[tuple[int, str]]:
    """
    Timed trigger events for a typed key sequence.

    Character i is plucked at sample round(i * spacing * sample_rate).
    Characters without a voice are kept; the bank ignores them, so they
    act as rests.
    """
    if spacing < 0:
        raise ValueError(f"spacing must be >= 0, got {spacing}")
    return [
        (int(round(float(seconds_to_samples(i * spacing, sample_rate)))), key)
        for i, key in enumerate(keys)
    ]


def render_keys(
    keys: str,
    out_path: str,
    *,
    seconds: float = 2.0,
    spacing: float = 0.25,
    sample_rate: Optional[float] = None,
    seed: Optional[int] = None,
    table: Optional[Sequence[tuple[Hashable, float]]] = None,
    subtype: str = "PCM_16",
) -> int:
    """
    Render a typed key sequence to a WAV file as fast as possible.

    Args:
        keys: Characters to pluck, one every `spacing` seconds.
        out_path: Path to write WAV file.
        seconds: Total length of the rendering.
        spacing: Seconds between consecutive characters.
        sample_rate: Optional sample rate override (uses global if None).
        seed: Random seed for the pluck noise.
        table: (symbol, frequency) table (default: keyboard_table()).
        subtype: soundfile subtype for the output file.

    Returns:
        Number of frames written
    """
    sr = resolve_sample_rate(sample_rate)
    if seconds < 0:
        raise ValueError(f"seconds must be >= 0, got {seconds}")
    n_samples = int(round(float(seconds_to_samples(seconds, sr))))

    bank = VoiceBank(
        table if table is not None else keyboard_table(),
        sample_rate=sr,
        noise=UniformNoise(seed),
    )
    sink = WavSink(out_path, subtype=subtype)
    with Player(bank, sink) as player:
        player.start()
        player.run(n_samples, events=key_events(keys, spacing, sr))
    return sink.frames_written
