"""Running a whole simulation and the command-line entry point."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, Sequence, TextIO

from symposium.logger import Logger
from symposium.monitor import Monitor
from symposium.parse import ArgumentError, Rules, UsageError, parse_rules
from symposium.philosopher import make_philosophers
from symposium.state import SharedState


class Simulation:
    """One table of philosophers with its logger and monitor threads."""

    def __init__(self, rules: Rules, out: Optional[TextIO] = None) -> None:
        self.rules = rules
        self.logger = Logger(out=out)
        self.state = SharedState(rules, self.logger)
        self.philosophers = make_philosophers(self.state)
        self.monitor = Monitor(self.philosophers, self.state)

    def run(self) -> bool:
        """Run to completion; return whether a philosopher died."""
        outcome: List[bool] = []
        log_thread = threading.Thread(target=self.logger.run, name="logger")
        workers = [
            threading.Thread(target=philo.run, name=f"philosopher-{philo.id}")
            for philo in self.philosophers
        ]
        monitor_thread = threading.Thread(
            target=lambda: outcome.append(self.monitor.run()), name="monitor"
        )
        log_thread.start()
        for worker in workers:
            worker.start()
        monitor_thread.start()
        for worker in workers:
            worker.join()
        monitor_thread.join()
        self.logger.request_stop()
        log_thread.join()
        return bool(outcome and outcome[0])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse ``N t_die t_eat t_sleep [t_meals]`` and run the simulation."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = parse_rules(args)
    except UsageError as exc:
        print(exc)
        return 1
    except ArgumentError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    Simulation(rules).run()
    return 0