import threading
import time

from symposium.logger import Logger
from symposium.parse import Rules
from symposium.state import SharedState


def _state(n=5):
    return SharedState(Rules(n=n, t_die=800, t_eat=200, t_sleep=200), Logger())


def test_one_fork_per_philosopher():
    state = _state(7)
    assert len(state.forks) == 7
    assert len({id(fork) for fork in state.forks}) == 7


def test_forks_start_free():
    state = _state(3)
    assert all(fork.acquire(blocking=False) for fork in state.forks)


def test_keeps_rules_and_logger():
    rules = Rules(n=2, t_die=410, t_eat=200, t_sleep=200, t_meals=3)
    logger = Logger()
    state = SharedState(rules, logger)
    assert state.rules is rules
    assert state.logger is logger


def test_stop_flag():
    state = _state()
    assert state.is_stopped() is False
    state.request_stop()
    assert state.is_stopped() is True


def test_wait_until_stopped_returns_after_stop():
    state = _state()
    waiter = threading.Thread(target=state.wait_until_stopped)
    waiter.start()
    time.sleep(0.02)
    assert waiter.is_alive()
    state.request_stop()
    waiter.join(timeout=5)
    assert not waiter.is_alive()


def test_sleep_ms_interrupted_by_stop():
    state = _state()
    timer = threading.Timer(0.02, state.request_stop)
    timer.start()
    start = time.monotonic()
    state.sleep_ms(5000)
    timer.join()
    assert time.monotonic() - start < 2.0
    assert state.is_stopped()


def test_sleep_ms_runs_full_time_without_stop():
    state = _state()
    start = time.monotonic()
    state.sleep_ms(30)
    assert time.monotonic() - start >= 0.025
    assert not state.is_stopped()