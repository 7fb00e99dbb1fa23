"""
pluckbank - A polyphonic Karplus-Strong plucked-string synthesizer.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from pluckbank.config import (
    ErrorMode,
    set_error_mode,
    get_error_mode,
    handle_error,
    set_sample_rate,
    get_sample_rate,
)
from pluckbank.errors import (
    PluckbankError,
    ConfigurationError,
    BufferInvariantError,
    BufferFullError,
    BufferEmptyError,
)
from pluckbank.ring_buffer import CircularSampleBuffer
from pluckbank.noise import NoiseSource, UniformNoise, SequenceNoise
from pluckbank.string_voice import StringVoice, DECAY_FACTOR, delay_length
from pluckbank.voice_bank import VoiceBank
from pluckbank.keyboard import KEYBOARD, keyboard_table
from pluckbank.sinks import Sink, NullSink, ArraySink, WavSink
from pluckbank.player import Player
from pluckbank.utils import key_events, render_keys
from pluckbank.conversions import (
    pitch_to_freq,
    freq_to_pitch,
    semitones_to_ratio,
    samples_to_seconds,
    seconds_to_samples,
)
from pluckbank.logger import set_global_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ErrorMode",
    "set_error_mode",
    "get_error_mode",
    "handle_error",
    "set_sample_rate",
    "get_sample_rate",
    # Errors
    "PluckbankError",
    "ConfigurationError",
    "BufferInvariantError",
    "BufferFullError",
    "BufferEmptyError",
    # Synthesis core
    "CircularSampleBuffer",
    "NoiseSource",
    "UniformNoise",
    "SequenceNoise",
    "StringVoice",
    "DECAY_FACTOR",
    "delay_length",
    "VoiceBank",
    # Keyboard layout
    "KEYBOARD",
    "keyboard_table",
    # Playback
    "Sink",
    "NullSink",
    "ArraySink",
    "WavSink",
    "Player",
    "key_events",
    "render_keys",
    # Conversion functions
    "pitch_to_freq",
    "freq_to_pitch",
    "semitones_to_ratio",
    "samples_to_seconds",
    "seconds_to_samples",
    # Logging utilities
    "set_global_logging",
    "get_logger",
    # Version
    "__version__",
]
