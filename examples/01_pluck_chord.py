#!/usr/bin/env python3
"""
Example 01: Pluck a chord and write it to a WAV file

Builds a three-voice bank for a C major triad, plucks the strings one
after another and renders two seconds of audio offline.

Copyright (c) 2026 pluckbank contributors
MIT License
"""

from pathlib import Path

from pluckbank import (
    Player,
    UniformNoise,
    VoiceBank,
    WavSink,
    pitch_to_freq,
    set_global_logging,
)

SAMPLE_RATE = 44100
OUTPUT_DIR = Path(__file__).parent / "audio"
OUTPUT_FILE = OUTPUT_DIR / "pluck_chord.wav"


def s2s(seconds):
    return int(round(seconds * SAMPLE_RATE))


def main():
    set_global_logging(level="INFO")
    OUTPUT_DIR.mkdir(exist_ok=True)

    # Symbols can be anything hashable; here they are MIDI pitch numbers
    C4, E4, G4 = 60, 64, 67
    table = [(p, float(pitch_to_freq(p))) for p in (C4, E4, G4)]
    bank = VoiceBank(table, sample_rate=SAMPLE_RATE, noise=UniformNoise(seed=1))

    strum = [(s2s(0.0), C4), (s2s(0.04), E4), (s2s(0.08), G4)]
    with Player(bank, WavSink(str(OUTPUT_FILE))) as player:
        player.start()
        player.run(s2s(2.0), events=strum)

    print(f"Wrote {OUTPUT_FILE}")


if __name__ == "__main__":
    main()
