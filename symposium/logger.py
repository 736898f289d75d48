"""Queued, thread-safe event logger with a dedicated printing loop."""

from __future__ import annotations

import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, TextIO, Tuple

from symposium.timing import now_ms

DIED = "died"
TEXT_CAPACITY = 64
_MAX_TEXT = TEXT_CAPACITY - 2
_IDLE_SECONDS = 0.001


def truncate_text(text: str) -> str:
    """Cut a message down to what a log record can hold."""
    return text[:_MAX_TEXT]


@dataclass(frozen=True)
class LogMessage:
    """One timestamped event of a philosopher."""

    rel_ms: int
    philo_id: int
    text: str

    def format(self) -> str:
        """Render as ``<ms> <id> <text>``."""
        return f"{self.rel_ms} {self.philo_id} {self.text}"


class Logger:
    """Collects events from many threads and prints them in order.

    Once a death is recorded every pending message is dropped, only the
    death is printed and further posts are ignored.
    """

    def __init__(
        self, start_ms: Optional[int] = None, out: Optional[TextIO] = None
    ) -> None:
        start = now_ms() if start_ms is None else start_ms
        self.start_ms = max(start, 0)
        self.out = out
        self.killed = False
        self.stopped = False
        self._lock = threading.Lock()
        self._queue: Deque[LogMessage] = deque()

    def post(self, philo_id: int, text: str) -> None:
        """Queue an event stamped relative to the start time."""
        with self._lock:
            if self.killed:
                return
            rel = now_ms() - self.start_ms
            self._queue.append(LogMessage(rel, philo_id, truncate_text(text)))

    def kill_with_death(self, victim_id: int, rel_ms: int) -> None:
        """Replace the queue with a single death record and request a stop."""
        with self._lock:
            if not self.killed:
                self.killed = True
                self._queue.clear()
                self._queue.append(LogMessage(rel_ms, victim_id, DIED))
            self.stopped = True

    def pop(self) -> Tuple[Optional[LogMessage], bool, bool]:
        """Take the oldest message; return it with the killed and stop flags."""
        with self._lock:
            message = self._queue.popleft() if self._queue else None
            return message, self.killed, self.stopped

    def request_stop(self) -> None:
        """Let the printing loop end once the queue is drained."""
        with self._lock:
            self.stopped = True

    def run(self) -> None:
        """Print queued messages until stopped and the queue is empty."""
        out = self.out if self.out is not None else sys.stdout
        while True:
            message, killed, stopped = self.pop()
            if message is None:
                if stopped:
                    break
                time.sleep(_IDLE_SECONDS)
                continue
            if killed and message.text != DIED:
                continue
            out.write(message.format() + "\n")
        out.flush()