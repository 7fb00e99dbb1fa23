"""
Player - the single-threaded simulation loop around a VoiceBank.

Copyright (c) 2026 pluckbank contributors

MIT License
"""

from __future__ import annotations

import queue
from typing import Hashable, Iterable, Optional

from pluckbank.config import handle_error
from pluckbank.logger import get_logger
from pluckbank.sinks import NullSink, Sink
from pluckbank.voice_bank import VoiceBank

logger = get_logger(__name__)


class Player:
    """
    Steps a VoiceBank one sample at a time and hands each sample to a Sink.

    Each step():
        1. drains pending trigger events into the bank
        2. calls bank.tick() once
        3. writes the result to the sink

    post() is the only method that may be called from another thread (for
    example a keyboard or MIDI callback). It puts the symbol on a
    queue.Queue that step() drains; everything else belongs to the thread
    that calls step().

    Lifecycle:
        1. start() - open the sink
        2. step() / run() - produce samples (can be called multiple times)
        3. stop() - close the sink

    Args:
        bank: The voices to play
        sink: Destination for samples (default: NullSink())

    Example:
        bank = VoiceBank(keyboard_table())
        with Player(bank, WavSink("out.wav")) as player:
            player.start()
            player.run(44100, events=[(0, "v"), (11025, "c")])
    """

    def __init__(self, bank: VoiceBank, sink: Optional[Sink] = None):
        self._bank = bank
        self._sink = sink if sink is not None else NullSink()
        self._events: queue.Queue = queue.Queue()
        self._started = False
        self._samples_played = 0

    @property
    def bank(self) -> VoiceBank:
        return self._bank

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def started(self) -> bool:
        """True if the player has been started."""
        return self._started

    @property
    def samples_played(self) -> int:
        """Number of samples produced since start()."""
        return self._samples_played

    def post(self, symbol: Hashable) -> None:
        """Queue a trigger; applied at the start of the next step()."""
        self._events.put_nowait(symbol)

    def start(self) -> None:
        """
        Open the sink and reset the sample counter.

        Raises:
            RuntimeError: If already started (in STRICT mode)
        """
        if self._started:
            if handle_error("Already started. Call stop() first."):
                return  # Lenient mode: warn and return
        self._sink.open(self._bank.sample_rate)
        self._samples_played = 0
        self._started = True
        logger.info(f"Player started: {len(self._bank)} voices -> {self._sink!r}")

    def stop(self) -> None:
        """
        Close the sink. Safe to call multiple times (idempotent).
        """
        if not self._started:
            return
        self._sink.close()
        self._started = False
        logger.info(f"Player stopped after {self._samples_played} samples")

    def step(self) -> float:
        """
        Apply pending triggers, produce one sample and write it to the sink.

        Raises:
            RuntimeError: If not started (always fatal)
        """
        if not self._started:
            handle_error("Not started. Call start() first.", fatal=True)
        self._drain()
        sample = self._bank.tick()
        self._sink.write(sample)
        self._samples_played += 1
        return sample

    def run(
        self,
        n_samples: int,
        events: Optional[Iterable[tuple[int, Hashable]]] = None,
    ) -> None:
        """
        Run n_samples steps, posting timed events along the way.

        Args:
            n_samples: Number of steps to run
            events: Optional (sample_index, symbol) pairs in ascending
                index order. Indices are relative to the start of this
                call; an event is applied at the step with that index.
                Events at or past n_samples are dropped.

        Raises:
            ValueError: If n_samples is negative or events are out of order
        """
        if n_samples < 0:
            raise ValueError(f"n_samples must be >= 0, got {n_samples}")
        pending = list(events) if events is not None else []
        for (a, _), (b, _) in zip(pending, pending[1:]):
            if b < a:
                raise ValueError("events must be sorted by sample index")

        next_event = 0
        for i in range(n_samples):
            while next_event < len(pending) and pending[next_event][0] <= i:
                self.post(pending[next_event][1])
                next_event += 1
            self.step()

        if next_event < len(pending):
            logger.debug(f"Dropped {len(pending) - next_event} events past sample {n_samples}")

    def _drain(self) -> None:
        try:
            while True:
                self._bank.trigger(self._events.get_nowait())
        except queue.Empty:
            pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensures stop() is called."""
        self.stop()
        return False

    def __repr__(self) -> str:
        return f"Player(bank={self._bank!r}, sink={self._sink!r})"
