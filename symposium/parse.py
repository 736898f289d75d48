"""Command-line argument parsing for the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_WHITESPACE = " \t\n\v\f\r"
_LIMIT = 1_000_000_000
_INVALID = "Invalid args"


class ArgumentError(ValueError):
    """An argument is not a valid integer in the allowed range."""

    def __init__(self, message: str = _INVALID) -> None:
        super().__init__(message)


class UsageError(ValueError):
    """The wrong number of arguments was given."""


@dataclass(frozen=True)
class Rules:
    """Parameters of one simulation run; times are in milliseconds."""

    n: int
    t_die: int
    t_eat: int
    t_sleep: int
    t_meals: int = -1


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_int(text: str, minimum: int, maximum: int) -> int:
    """Parse a decimal integer strictly and check it lies in [minimum, maximum].

    Leading whitespace and one sign are accepted; anything after the digits
    is rejected.
    """
    if not text:
        raise ArgumentError()
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    if pos >= len(text) or not _is_digit(text[pos]):
        raise ArgumentError()
    ceiling = maximum + (1 if negative else 0)
    value = 0
    while pos < len(text) and _is_digit(text[pos]):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        if value > ceiling:
            raise ArgumentError()
        pos += 1
    if pos != len(text):
        raise ArgumentError()
    if negative:
        value = -value
    if value < minimum or value > maximum:
        raise ArgumentError()
    return value


def parse_rules(args: Sequence[str], program: str = "philo") -> Rules:
    """Build :class:`Rules` from ``N t_die t_eat t_sleep [t_meals]``."""
    if len(args) not in (4, 5):
        raise UsageError(f"Usage: {program} N t_die t_eat t_sleep [t_meals]")
    n = parse_int(args[0], 1, _LIMIT)
    t_die = parse_int(args[1], 0, _LIMIT)
    t_eat = parse_int(args[2], 0, _LIMIT)
    t_sleep = parse_int(args[3], 0, _LIMIT)
    t_meals = parse_int(args[4], 1, _LIMIT) if len(args) == 5 else -1
    return Rules(n=n, t_die=t_die, t_eat=t_eat, t_sleep=t_sleep, t_meals=t_meals)