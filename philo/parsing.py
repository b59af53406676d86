"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INVALID_ARGUMENTS = "Invalid arguments"
INT_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""

    def __init__(self, message: str = INVALID_ARGUMENTS) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; all times are in milliseconds."""

    philos_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None

    @property
    def time_to_think(self) -> int:
        """Half of the slack left after eating and sleeping, truncated toward zero."""
        slack = self.time_to_die - self.time_to_eat - self.time_to_sleep
        half = abs(slack) // 2
        return half if slack >= 0 else -half


def parse_int(text: str) -> int:
    """Parse a strictly positive decimal integer no larger than INT_MAX.

    An optional leading '+' is accepted; a '-', any non-digit character,
    an empty value, zero, or overflow raise ArgumentError.
    """
    digits = text[1:] if text.startswith("+") else text
    if text.startswith("-"):
        raise ArgumentError()
    result = 0
    for char in digits:
        if not "0" <= char <= "9":
            raise ArgumentError()
        result = result * 10 + (ord(char) - ord("0"))
        if result > INT_MAX:
            raise ArgumentError()
    if result == 0:
        raise ArgumentError()
    return result


def parse_arguments(args: Sequence[str]) -> Settings:
    """Build Settings from the arguments that follow the program name.

    Expects four or five values: number of philosophers, time to die,
    time to eat, time to sleep and, optionally, the number of meals each
    philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ArgumentError()
    count, die, eat, sleep = (parse_int(value) for value in args[:4])
    must_eat = parse_int(args[4]) if len(args) == 5 else None
    return Settings(
        philos_count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        must_eat=must_eat,
    )