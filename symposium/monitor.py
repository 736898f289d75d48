"""Watcher that ends the simulation on a death or when everyone is full."""

from __future__ import annotations

import time
from typing import List, Optional, Sequence, Tuple

from symposium.philosopher import Philosopher
from symposium.state import SharedState
from symposium.timing import now_ms

_TICK_SECONDS = 0.001


class Monitor:
    """Polls the philosophers every millisecond."""

    def __init__(self, philosophers: Sequence[Philosopher], state: SharedState) -> None:
        self.philosophers = list(philosophers)
        self.state = state
        self._full: Optional[List[bool]] = (
            [False] * len(self.philosophers) if state.rules.t_meals > 0 else None
        )

    def all_full(self) -> bool:
        """Return whether every philosopher has eaten the required meals."""
        if self._full is None:
            return False
        goal = self.state.rules.t_meals
        for index, philo in enumerate(self.philosophers):
            if not self._full[index] and philo.meals >= goal:
                self._full[index] = True
        return all(self._full)

    def find_dead(self) -> Optional[Tuple[int, int]]:
        """Return ``(id, ms since start of death)`` of a starved philosopher."""
        rules = self.state.rules
        current = now_ms()
        for philo in self.philosophers:
            last = philo.last_meal_ms
            if current - last > rules.t_die:
                rel = last + rules.t_die - self.state.logger.start_ms
                return philo.id, rel
        return None

    def run(self) -> bool:
        """Watch until the simulation stops; return whether someone died."""
        died = False
        while not self.state.is_stopped():
            if self.all_full():
                self.state.request_stop()
                break
            dead = self.find_dead()
            if dead is not None:
                self.state.request_stop()
                self.state.logger.kill_with_death(*dead)
                died = True
                break
            time.sleep(_TICK_SECONDS)
        if not died:
            self.state.logger.request_stop()
        return died