"""
Entry point for running pluckbank as a module

    python -m pluckbank "q w e r" -o riff.wav --seconds 3 --spacing 0.2

Copyright (c) 2026 pluckbank contributors

MIT License
"""

import argparse
import sys

from pluckbank import __version__
from pluckbank.config import DEFAULT_SAMPLE_RATE
from pluckbank.errors import PluckbankError
from pluckbank.keyboard import KEYBOARD
from pluckbank.logger import set_global_logging
from pluckbank.utils import render_keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pluckbank",
        description=(
            "Render a sequence of plucked keys to a WAV file. "
            f"Playable keys, lowest first: {KEYBOARD!r}"
        ),
    )
    parser.add_argument("keys", help="Characters to pluck, in order")
    parser.add_argument(
        "-o", "--output",
        default="pluck.wav",
        help="Output WAV path (default: pluck.wav)",
    )
    parser.add_argument(
        "--seconds", type=float, default=2.0,
        help="Length of the rendering in seconds (default: 2.0)",
    )
    parser.add_argument(
        "--spacing", type=float, default=0.25,
        help="Seconds between consecutive keys (default: 0.25)",
    )
    parser.add_argument(
        "--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE,
        help=f"Sample rate in Hz (default: {DEFAULT_SAMPLE_RATE})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--log-level", default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    logger = set_global_logging(level=args.log_level)
    logger.info(f"pluckbank v{__version__} starting...")

    try:
        frames = render_keys(
            args.keys,
            args.output,
            seconds=args.seconds,
            spacing=args.spacing,
            sample_rate=args.sample_rate,
            seed=args.seed,
        )
    except (PluckbankError, ValueError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Wrote {frames} frames to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
