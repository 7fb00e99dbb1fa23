"""
Audio sinks - consumers of the one-sample-per-tick output stream.

A Sink is opened with the stream's sample rate, receives every sample the
Player produces, and is closed when playback stops. Pacing (blocking until
the next sample period) is the sink's concern; the sinks here run as fast
as they are fed.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np
import soundfile as sf

from pluckbank.config import handle_error
from pluckbank.logger import get_logger

logger = get_logger(__name__)


class Sink(ABC):
    """Destination for rendered samples."""

    def open(self, sample_rate: float) -> None:
        """Prepare to receive samples at sample_rate. Default: nothing."""
        pass

    @abstractmethod
    def write(self, sample: float) -> None:
        """Consume one sample."""
        pass

    def close(self) -> None:
        """Release resources. Safe to call more than once."""
        pass


class NullSink(Sink):
    """
    A sink that discards its input.

    Use cases:
    - Benchmarking
    - Driving a Player for its side effects in tests
    """

    def __init__(self):
        self._frames = 0

    @property
    def frames(self) -> int:
        """Number of samples received."""
        return self._frames

    def write(self, sample: float) -> None:
        self._frames += 1


class ArraySink(Sink):
    """Collects every sample in memory."""

    def __init__(self):
        self._samples: list[float] = []

    @property
    def data(self) -> np.ndarray:
        """Samples received so far as a float64 array."""
        return np.asarray(self._samples, dtype=np.float64)

    def write(self, sample: float) -> None:
        self._samples.append(sample)

    def __len__(self) -> int:
        return len(self._samples)


class WavSink(Sink):
    """
    Writes samples to a mono WAV file.

    Samples are buffered and written in blocks of `blocksize`. The file is
    opened by open() and flushed and closed by close(). Integer subtypes
    are clipped to [-1, 1] on write, since a sum of several plucked voices
    can exceed full scale.

    Args:
        path: Output file path
        subtype: soundfile subtype (default: 'PCM_16'). 'FLOAT' and
            'DOUBLE' are written unclipped.
        blocksize: Samples buffered between file writes (default: 4096)

    Example:
        sink = WavSink("pluck.wav")
        with Player(bank, sink) as player:
            player.start()
            player.run(44100)
    """

    # Common subtypes:
    # 'PCM_16' - 16-bit signed integer (CD quality)
    # 'PCM_24' - 24-bit signed integer (professional)
    # 'FLOAT'  - 32-bit float
    # 'DOUBLE' - 64-bit float

    def __init__(self, path: str, subtype: str = "PCM_16", blocksize: int = 4096):
        if blocksize < 1:
            raise ValueError(f"blocksize must be positive, got {blocksize}")
        self._path = str(path)
        self._subtype = subtype
        self._blocksize = blocksize
        self._clip = subtype not in ("FLOAT", "DOUBLE")

        self._file: Optional[sf.SoundFile] = None
        self._block = np.zeros(blocksize, dtype=np.float64)
        self._fill = 0
        self._frames_written = 0

    @property
    def path(self) -> str:
        """Path to the output WAV file."""
        return self._path

    @property
    def frames_written(self) -> int:
        """Number of frames flushed to the file so far."""
        return self._frames_written

    def open(self, sample_rate: float) -> None:
        """Open the WAV file for writing."""
        if self._file is not None:
            if handle_error(f"{self._path} is already open."):
                return
        self._file = sf.SoundFile(
            self._path,
            mode="w",
            samplerate=int(sample_rate),
            channels=1,
            subtype=self._subtype,
        )
        self._fill = 0
        self._frames_written = 0
        logger.info(f"Opened {self._path} for writing: {int(sample_rate)} Hz, {self._subtype}")

    def write(self, sample: float) -> None:
        if self._file is None:
            handle_error(f"{self._path} is not open. Call open() first.", fatal=True)
            return
        self._block[self._fill] = sample
        self._fill += 1
        if self._fill == self._blocksize:
            self._flush()

    def close(self) -> None:
        """Flush buffered samples and close the WAV file."""
        if self._file is None:
            return
        self._flush()
        self._file.close()
        self._file = None
        logger.info(f"Closed {self._path}: {self._frames_written} frames written")

    def _flush(self) -> None:
        if self._fill == 0:
            return
        block = self._block[: self._fill]
        if self._clip:
            block = np.clip(block, -1.0, 1.0)
        self._file.write(block)
        self._frames_written += self._fill
        self._fill = 0

    def __repr__(self) -> str:
        return f"WavSink(path={self._path!r}, subtype={self._subtype!r})"
