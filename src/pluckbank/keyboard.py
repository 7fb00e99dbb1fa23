"""
Computer-keyboard layout mapped onto a chromatic scale.

The default layout covers 37 keys, two rows of a QWERTY keyboard, from
110 Hz (key 'q') to 880 Hz (key ' '). Key i sounds
reference_freq * 2 ** ((i - reference_index) / 12), so with the defaults
the key at index 24 ('v') is concert A.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

from pluckbank.conversions import semitones_to_ratio
from pluckbank.errors import ConfigurationError


KEYBOARD = "q2we4r5ty7u8i9op-[=zxdcfvgbnjmk,.;/' "


def keyboard_table(
    keys: str = KEYBOARD,
    reference_freq: float = 440.0,
    reference_index: int = 24,
) -> list[tuple[str, float]]:
    """
    Build an ordered (key, frequency) table for VoiceBank.

    Args:
        keys: One character per semitone, lowest pitch first.
        reference_freq: Frequency in Hz of the key at reference_index.
        reference_index: Position in `keys` that sounds reference_freq.

    Raises:
        ConfigurationError: If a key appears more than once
    """
    seen: set[str] = set()
    table = []
    for i, key in enumerate(keys):
        if key in seen:
            raise ConfigurationError(f"key {key!r} appears more than once in layout")
        seen.add(key)
        table.append((key, float(reference_freq * semitones_to_ratio(i - reference_index))))
    return table
