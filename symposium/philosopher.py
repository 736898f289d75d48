"""Philosopher threads: thinking, taking forks, eating and sleeping."""

from __future__ import annotations

from typing import List

from symposium.state import SharedState
from symposium.timing import now_ms

THINKING = "is thinking"
TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"


class Philosopher:
    """One diner seated between fork ``left`` and fork ``right``."""

    def __init__(self, philo_id: int, state: SharedState) -> None:
        self.id = philo_id
        self.state = state
        self.left = philo_id - 1
        self.right = philo_id % state.rules.n
        self.meals = 0
        self._last_meal_ms = state.logger.start_ms

    @property
    def last_meal_ms(self) -> int:
        """Time of the start of the last meal, read under the state lock."""
        with self.state.lock:
            return self._last_meal_ms

    def log(self, text: str) -> None:
        """Post an event unless the simulation has stopped."""
        if self.state.is_stopped():
            return
        self.state.logger.post(self.id, text)

    def take_forks(self) -> None:
        """Block until both forks are held; even ids start with the right one."""
        first, second = self.left, self.right
        if self.id % 2 == 0:
            first, second = second, first
        self.state.forks[first].acquire()
        self.log(TAKEN_FORK)
        self.state.forks[second].acquire()
        self.log(TAKEN_FORK)

    def release_forks(self) -> None:
        """Put both forks back on the table."""
        self.state.forks[self.left].release()
        self.state.forks[self.right].release()

    def _remaining_ms(self) -> int:
        return self.state.rules.t_die - (now_ms() - self.last_meal_ms)

    def single_case(self) -> None:
        """Alone at the table: hold one fork and wait for the end."""
        fork = self.state.forks[self.left]
        self.log(THINKING)
        with fork:
            self.log(TAKEN_FORK)
            remaining = self._remaining_ms()
            delay = remaining - 2 if remaining > 2 else 0
            if delay > 0 and not self.state.is_stopped():
                self.state.sleep_ms(delay)
            self.state.wait_until_stopped()

    def desync(self) -> None:
        """Delay even-numbered philosophers so neighbours do not collide."""
        rules = self.state.rules
        delay = 0
        if self.id % 2 == 0:
            delay = 2 if rules.n % 2 == 0 else rules.t_eat // 2
        if delay > 0:
            self.state.sleep_ms(delay)

    def think_guard(self) -> None:
        """Think; with an odd table, wait a little without risking starvation."""
        rules = self.state.rules
        self.log(THINKING)
        if rules.n % 2 == 0:
            return
        remaining = self._remaining_ms()
        delay = rules.t_eat // 2
        if delay > remaining - 2:
            delay = remaining - 2 if remaining > 2 else 0
        if delay > 0:
            self.state.sleep_ms(delay)

    def eat(self) -> bool:
        """Eat with both forks held, then release them.

        Returns whether the required number of meals has been reached.
        """
        rules = self.state.rules
        self.log(EATING)
        with self.state.lock:
            self._last_meal_ms = now_ms()
        self.state.sleep_ms(rules.t_eat)
        self.release_forks()
        with self.state.lock:
            self.meals += 1
            meals = self.meals
        return rules.t_meals > 0 and meals >= rules.t_meals

    def run(self) -> None:
        """Live until the simulation stops or enough meals were eaten."""
        if self.state.rules.n == 1:
            self.single_case()
            return
        self.desync()
        while not self.state.is_stopped():
            self.think_guard()
            self.take_forks()
            if self.state.is_stopped():
                self.release_forks()
                break
            if self.eat():
                break
            self.log(SLEEPING)
            self.state.sleep_ms(self.state.rules.t_sleep)


def make_philosophers(state: SharedState) -> List[Philosopher]:
    """Seat ``n`` philosophers numbered from 1."""
    return [Philosopher(philo_id, state) for philo_id in range(1, state.rules.n + 1)]