"""
Tests for CircularSampleBuffer.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

import pytest
import numpy as np
from pluckbank import (
    CircularSampleBuffer,
    BufferEmptyError,
    BufferFullError,
    BufferInvariantError,
    ConfigurationError,
    ErrorMode,
    set_error_mode,
)


class TestCircularSampleBufferBasics:
    """Test creation and occupancy queries."""

    def test_create_empty(self):
        buf = CircularSampleBuffer(4)
        assert buf.capacity() == 4
        assert buf.size() == 0
        assert len(buf) == 0
        assert buf.is_empty() is True
        assert buf.is_full() is False

    def test_capacity_one(self):
        buf = CircularSampleBuffer(1)
        buf.enqueue(0.25)
        assert buf.is_full() is True
        assert buf.dequeue() == 0.25
        assert buf.is_empty() is True

    def test_invalid_capacity(self):
        with pytest.raises(ConfigurationError, match="capacity must be positive"):
            CircularSampleBuffer(0)
        with pytest.raises(ConfigurationError, match="capacity must be positive"):
            CircularSampleBuffer(-3)

    def test_non_integer_capacity(self):
        with pytest.raises(ConfigurationError, match="capacity must be an int"):
            CircularSampleBuffer(2.5)
        with pytest.raises(ConfigurationError, match="capacity must be an int"):
            CircularSampleBuffer(True)

    def test_numpy_integer_capacity(self):
        buf = CircularSampleBuffer(np.int64(3))
        assert buf.capacity() == 3
        assert isinstance(buf.capacity(), int)

    def test_repr(self):
        buf = CircularSampleBuffer(5)
        buf.enqueue(1.0)
        r = repr(buf)
        assert "CircularSampleBuffer" in r
        assert "capacity=5" in r
        assert "size=1" in r


class TestCircularSampleBufferFifo:
    """Test FIFO ordering and wraparound."""

    def test_enqueue_dequeue_order(self):
        buf = CircularSampleBuffer(4)
        buf.enqueue(0.5)
        buf.enqueue(0.6)
        assert buf.dequeue() == 0.5
        assert buf.peek() == 0.6
        assert buf.size() == 1

    def test_peek_does_not_remove(self):
        buf = CircularSampleBuffer(2)
        buf.enqueue(0.1)
        assert buf.peek() == 0.1
        assert buf.peek() == 0.1
        assert buf.size() == 1

    def test_fill_to_capacity(self):
        buf = CircularSampleBuffer(3)
        for x in (1.0, 2.0, 3.0):
            buf.enqueue(x)
        assert buf.is_full() is True
        assert buf.size() == 3

    def test_wraparound_keeps_order(self):
        buf = CircularSampleBuffer(3)
        for x in (1.0, 2.0, 3.0):
            buf.enqueue(x)
        out = []
        # Rotate many times past the end of the backing store
        for i in range(10):
            out.append(buf.dequeue())
            buf.enqueue(4.0 + i)
        assert out == [1.0, 2.0, 3.0] + [4.0 + i for i in range(7)]
        np.testing.assert_array_equal(buf.to_array(), [11.0, 12.0, 13.0])

    def test_to_array_oldest_first(self):
        buf = CircularSampleBuffer(4)
        for x in (0.1, 0.2, 0.3):
            buf.enqueue(x)
        buf.dequeue()
        buf.enqueue(0.4)
        np.testing.assert_array_almost_equal(buf.to_array(), [0.2, 0.3, 0.4])

    def test_to_array_is_copy(self):
        buf = CircularSampleBuffer(2)
        buf.enqueue(0.1)
        arr = buf.to_array()
        arr[0] = 9.0
        assert buf.peek() == 0.1

    def test_returns_python_floats(self):
        buf = CircularSampleBuffer(2)
        buf.enqueue(0.5)
        assert type(buf.peek()) is float
        assert type(buf.dequeue()) is float


class TestCircularSampleBufferErrors:
    """Overflow and underflow always raise."""

    def test_dequeue_empty(self):
        buf = CircularSampleBuffer(2)
        with pytest.raises(BufferEmptyError, match="dequeue on empty buffer"):
            buf.dequeue()

    def test_peek_empty(self):
        buf = CircularSampleBuffer(2)
        with pytest.raises(BufferEmptyError, match="peek on empty buffer"):
            buf.peek()

    def test_enqueue_full(self):
        buf = CircularSampleBuffer(2)
        buf.enqueue(0.0)
        buf.enqueue(0.0)
        with pytest.raises(BufferFullError, match="enqueue on full buffer"):
            buf.enqueue(0.0)

    def test_failed_enqueue_leaves_state_unchanged(self):
        buf = CircularSampleBuffer(2)
        buf.enqueue(0.1)
        buf.enqueue(0.2)
        with pytest.raises(BufferFullError):
            buf.enqueue(0.3)
        np.testing.assert_array_almost_equal(buf.to_array(), [0.1, 0.2])

    def test_errors_are_runtime_errors(self):
        assert issubclass(BufferEmptyError, BufferInvariantError)
        assert issubclass(BufferFullError, RuntimeError)

    def test_lenient_mode_still_raises(self):
        set_error_mode(ErrorMode.LENIENT)
        buf = CircularSampleBuffer(1)
        with pytest.raises(BufferEmptyError):
            buf.dequeue()
