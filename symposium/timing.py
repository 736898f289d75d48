"""Wall-clock helpers with millisecond resolution."""

from __future__ import annotations

import time
from typing import Callable, Optional

_TICK_SECONDS = 0.001


def now_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep_ms(
    ms: int, should_stop: Optional[Callable[[], bool]] = None
) -> None:
    """Sleep for ``ms`` milliseconds in 1 ms steps.

    If ``should_stop`` is given it is polled every step and the sleep ends
    early as soon as it returns true.
    """
    end = now_ms() + ms
    while now_ms() < end:
        if should_stop is not None and should_stop():
            break
        time.sleep(_TICK_SECONDS)