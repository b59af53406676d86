"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.parsing import ArgumentError, parse_arguments
from philo.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given arguments; return the exit status.

    Usage: number_of_philosophers time_to_die time_to_eat time_to_sleep
    [number_of_times_each_philosopher_must_eat]
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError as exc:
        print(exc)
        return 1
    simulation = Simulation(settings, sys.stdout)
    try:
        simulation.run()
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())