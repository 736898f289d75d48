# symposium

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread: thinks, takes the two forks next to them, eats, and sleeps. A
monitor thread checks that nobody goes hungry for too long, and a logger
thread prints every event in the order it was posted.

## Installing

```
pip install .
```

## Running

```
symposium N t_die t_eat t_sleep [t_meals]
```

- `N`: the number of philosophers and forks, at least 1.
- `t_die`: milliseconds a philosopher can go without starting a meal.
- `t_eat`: milliseconds a meal takes.
- `t_sleep`: milliseconds a philosopher sleeps after eating.
- `t_meals`: optional. The simulation ends once every philosopher has eaten
  this many times. It must be at least 1.

Every value must be a whole number between its minimum and 1000000000.
Leading whitespace and a single `+` or `-` sign are accepted; nothing may
follow the digits. An invalid value makes the command print `Invalid args` to
standard error and exit with status 1. If the number of arguments is wrong,
it prints `Usage: philo N t_die t_eat t_sleep [t_meals]` to standard output
and exits with status 1. Otherwise the simulation runs and the command exits
with status 0, whether or not a philosopher died.

Each event is printed as one line:

```
<milliseconds since start> <philosopher id> <event>
```

The event is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Philosopher ids start at 1. Once a philosopher dies,
messages not yet printed are dropped, `died` is the last line printed, and the
time it shows is the moment that philosopher ran out of time (last meal plus
`t_die`).

Five philosophers who each need to eat every 800 ms and who stop after seven
meals each:

```
symposium 5 800 200 200 7
```

A single philosopher only has one fork and always dies:

```
symposium 1 800 200 200
```

## Using it from Python

```python
import sys
from symposium.parse import parse_rules
from symposium.app import Simulation

rules = parse_rules(["5", "800", "200", "200", "7"])
died = Simulation(rules, sys.stdout).run()
```

- `symposium.parse.parse_rules(args, program="philo")` returns a frozen
  `Rules` dataclass (`n`, `t_die`, `t_eat`, `t_sleep`, `t_meals`, the last
  being `-1` when not given). It raises `ArgumentError` for an invalid value
  and `UsageError` for the wrong number of arguments; both are `ValueError`s.
- `symposium.parse.parse_int(text, minimum, maximum)` is the strict integer
  parser used for each argument.
- `symposium.app.Simulation(rules, out=None).run()` runs the whole table and
  returns `True` if a philosopher died. Output goes to `out`, or to standard
  output when it is `None`.
- `symposium.logger.Logger`, `symposium.state.SharedState`,
  `symposium.philosopher.Philosopher` and `symposium.monitor.Monitor` are the
  pieces `Simulation` is built from and can be used on their own.

## What it does not do

The exit status does not report a death; use the return value of
`Simulation.run()` for that. There is no variant that runs philosophers as
separate processes; everything runs as threads in one process.