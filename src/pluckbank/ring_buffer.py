"""
CircularSampleBuffer - fixed-capacity FIFO of float samples.

The storage primitive behind each string's delay line. Backed by a numpy
float64 array with head/tail cursors that wrap modulo capacity.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

import numpy as np

from pluckbank.errors import BufferEmptyError, BufferFullError, ConfigurationError


class CircularSampleBuffer:
    """
    Fixed-capacity first-in first-out queue of floating point samples.

    enqueue() appends at the tail, dequeue() removes from the head. Overflow
    and underflow are programmer errors and raise immediately; they are not
    affected by the lenient error mode.

    Not thread-safe.

    Args:
        capacity: Number of slots; fixed for the life of the buffer.

    Example:
        buf = CircularSampleBuffer(4)
        buf.enqueue(0.5)
        buf.enqueue(0.6)
        buf.dequeue()   # 0.5
        buf.peek()      # 0.6
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise ConfigurationError(f"capacity must be an int, got {capacity!r}")
        if capacity < 1:
            raise ConfigurationError(f"capacity must be positive, got {capacity}")
        self._capacity = int(capacity)
        self._data = np.zeros(self._capacity, dtype=np.float64)
        self._head = 0
        self._tail = 0
        self._size = 0

    def capacity(self) -> int:
        """Maximum number of items the buffer can hold."""
        return self._capacity

    def size(self) -> int:
        """Number of items currently held."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def enqueue(self, x: float) -> None:
        """
        Append x at the tail.

        Raises:
            BufferFullError: If the buffer already holds capacity items
        """
        if self._size == self._capacity:
            raise BufferFullError(
                f"enqueue on full buffer (capacity={self._capacity})"
            )
        self._data[self._tail] = x
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def dequeue(self) -> float:
        """
        Remove and return the oldest item.

        Raises:
            BufferEmptyError: If the buffer is empty
        """
        if self._size == 0:
            raise BufferEmptyError("dequeue on empty buffer")
        value = float(self._data[self._head])
        self._data[self._head] = 0.0
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value

    def peek(self) -> float:
        """
        Return the oldest item without removing it.

        Raises:
            BufferEmptyError: If the buffer is empty
        """
        if self._size == 0:
            raise BufferEmptyError("peek on empty buffer")
        return float(self._data[self._head])

    def to_array(self) -> np.ndarray:
        """Copy of the held items, oldest first."""
        idx = (self._head + np.arange(self._size)) % self._capacity
        return self._data[idx].copy()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularSampleBuffer(capacity={self._capacity}, size={self._size})"
