"""
Exception types raised by pluckbank.

Copyright (c) 2026 pluckbank contributors

MIT License
"""


class PluckbankError(Exception):
    """Base class for all pluckbank errors."""

    pass


class ConfigurationError(PluckbankError, ValueError):
    """
    Raised when a voice, buffer or voice bank is set up with values it
    cannot run with: a non-positive sample rate, a frequency that yields a
    delay line shorter than one sample, an empty or duplicated table.
    """

    pass


class BufferInvariantError(PluckbankError, RuntimeError):
    """A circular buffer was used outside its occupancy bounds."""

    pass


class BufferFullError(BufferInvariantError):
    """enqueue() on a buffer that already holds `capacity` items."""

    pass


class BufferEmptyError(BufferInvariantError):
    """dequeue() or peek() on a buffer that holds no items."""

    pass
