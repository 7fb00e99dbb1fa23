#!/usr/bin/env python3
"""
Example 02: Type a riff on the computer-keyboard layout

Each character of RIFF is plucked every SPACING seconds; characters with
no string (here '#') are rests. Same as:

    python -m pluckbank "zxcv#vcxz" -o examples/audio/riff.wav --spacing 0.15

Copyright (c) 2026 pluckbank contributors
MIT License
"""

from pathlib import Path

from pluckbank import KEYBOARD, keyboard_table, render_keys

RIFF = "zxcv#vcxz"
SPACING = 0.15
OUTPUT_DIR = Path(__file__).parent / "audio"
OUTPUT_FILE = OUTPUT_DIR / "riff.wav"


def main():
    OUTPUT_DIR.mkdir(exist_ok=True)
    freqs = dict(keyboard_table())
    print(f"Layout (lowest first): {KEYBOARD!r}")
    for key in RIFF:
        if key in freqs:
            print(f"  {key!r}: {freqs[key]:.1f} Hz")
        else:
            print(f"  {key!r}: rest")

    frames = render_keys(RIFF, str(OUTPUT_FILE), seconds=3.0, spacing=SPACING, seed=7)
    print(f"Wrote {frames} frames to {OUTPUT_FILE}")


if __name__ == "__main__":
    main()
