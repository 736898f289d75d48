"""State shared by every thread of one simulation run."""

from __future__ import annotations

import threading
from typing import List

from symposium.logger import Logger
from symposium.parse import Rules
from symposium.timing import precise_sleep_ms


class SharedState:
    """Rules, forks, logger and the global stop flag.

    ``lock`` guards per-philosopher data such as the time of the last meal.
    """

    def __init__(self, rules: Rules, logger: Logger) -> None:
        self.rules = rules
        self.logger = logger
        self.lock = threading.Lock()
        self.forks: List[threading.Lock] = [
            threading.Lock() for _ in range(rules.n)
        ]
        self._stop = threading.Event()

    def is_stopped(self) -> bool:
        """Return whether the simulation has been told to stop."""
        return self._stop.is_set()

    def request_stop(self) -> None:
        """Tell every thread to stop."""
        self._stop.set()

    def wait_until_stopped(self) -> None:
        """Block until a stop has been requested."""
        self._stop.wait()

    def sleep_ms(self, ms: int) -> None:
        """Sleep ``ms`` milliseconds, waking early when a stop is requested."""
        precise_sleep_ms(ms, self.is_stopped)