"""Thread-safe ring buffer of human-readable engine log lines exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LogLine:
    """A single log line for the API feed."""

    sequence: int
    tick: int
    message: str


class EventLog:
    """Bounded log of engine lines. Writers append; readers snapshot a slice.

    Sequence numbers are monotonic for the lifetime of the buffer so a
    polling reader can ask for everything after the last line it saw, even
    once older lines have been evicted.
    """

    __slots__ = ("_buffer", "_lock", "_next_sequence")

    def __init__(self, maxlen: int = 2000) -> None:
        self._buffer: deque[LogLine] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._next_sequence = 1

    def append(self, message: str, tick: int = 0) -> LogLine:
        with self._lock:
            line = LogLine(sequence=self._next_sequence, tick=tick, message=message)
            self._next_sequence += 1
            self._buffer.append(line)
            return line

    def since(self, sequence: int) -> list[LogLine]:
        """Return all lines with a sequence number greater than *sequence*."""
        with self._lock:
            return [line for line in self._buffer if line.sequence > sequence]

    def latest(self, count: int = 50) -> list[LogLine]:
        """Return the *count* most recent lines."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
