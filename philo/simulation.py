"""Dining philosophers simulation: philosopher threads, forks and an overseer."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philo.parsing import Settings
from philo.timing import elapsed_ms, interruptible_sleep, now_ms

MSG_FORK = "has taken a fork"
MSG_EAT = "is eating"
MSG_SLEEP = "is sleeping"
MSG_THINK = "is thinking"
MSG_DIED = "died"
MSG_ERR_CREATE = "Error creating threads"

OVERSEER_DELAY_S = 0.0001
DEATH_MESSAGE_DELAY_S = 0.0025


def assign_forks(count: int) -> list[tuple[int, int]]:
    """Return, for each seat, the indexes of the fork taken first and second.

    Even seats reach for their own fork first, odd seats for their
    neighbour's, so that adjacent philosophers never grab in a cycle.
    """
    pairs = []
    for seat in range(count):
        own, neighbour = seat, (seat + 1) % count
        pairs.append((own, neighbour) if seat % 2 == 0 else (neighbour, own))
    return pairs


@dataclass(eq=False)
class Philosopher:
    """One diner with its two forks and its meal record."""

    id: int
    first_fork: threading.Lock
    second_fork: threading.Lock
    simulation: Simulation
    last_meal: int = 0
    times_eaten: int = field(default=0)

    def run(self) -> None:
        """Wait for the start signal, then eat, sleep and think until stopped."""
        sim = self.simulation
        sim._go.wait()
        if sim._aborted.is_set():
            return
        if sim.settings.philos_count == 1:
            self._run_alone()
            return
        self._delay_start()
        stop = sim.stop_event
        while True:
            self._eat()
            if stop.is_set():
                break
            self._sleep_and_think()
            if stop.is_set():
                break

    def _run_alone(self) -> None:
        sim = self.simulation
        self.first_fork.acquire()
        sim.output(self.id, MSG_FORK)
        sim.stop_event.wait(sim.settings.time_to_die / 1000)

    def _delay_start(self) -> None:
        sim = self.simulation
        if self.id % 2 != 0:
            sim.output(self.id, MSG_THINK)
            sim.stop_event.wait(sim.settings.time_to_eat / 1000)

    def _eat(self) -> None:
        sim = self.simulation
        settings = sim.settings
        with self.first_fork:
            sim.output(self.id, MSG_FORK)
            with self.second_fork:
                sim.output(self.id, MSG_FORK)
                with sim._meal_lock:
                    self.last_meal = now_ms()
                if sim.stop_event.is_set():
                    return
                sim.output(self.id, MSG_EAT)
                interruptible_sleep(settings.time_to_eat, sim.stop_event)
                if settings.must_eat is not None:
                    self.times_eaten += 1
                    if self.times_eaten == settings.must_eat:
                        sim._mark_full()

    def _sleep_and_think(self) -> None:
        sim = self.simulation
        settings = sim.settings
        sim.output(self.id, MSG_SLEEP)
        interruptible_sleep(settings.time_to_sleep, sim.stop_event)
        if sim.stop_event.is_set():
            return
        sim.output(self.id, MSG_THINK)
        if settings.philos_count % 2 != 0:
            interruptible_sleep(settings.time_to_think, sim.stop_event)


class Simulation:
    """Shared table state: forks, philosophers, output and the stop signal."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.stop_event = threading.Event()
        self.start_time = now_ms()
        self.deceased: int | None = None
        self.philos_full = 0
        self._go = threading.Event()
        self._aborted = threading.Event()
        self._print_lock = threading.Lock()
        self._meal_lock = threading.Lock()
        self._full_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(settings.philos_count)]
        self.philosophers = [
            Philosopher(seat + 1, self.forks[first], self.forks[second], self)
            for seat, (first, second) in enumerate(assign_forks(settings.philos_count))
        ]

    def output(self, philosopher_id: int, message: str) -> None:
        """Print a status line unless the simulation has stopped."""
        with self._print_lock:
            if not self.stop_event.is_set():
                self._write(philosopher_id, message)

    def output_death(self, philosopher_id: int, message: str) -> None:
        """Print a status line even after the simulation has stopped."""
        with self._print_lock:
            self._write(philosopher_id, message)

    def _write(self, philosopher_id: int, message: str) -> None:
        print(
            f"{elapsed_ms(self.start_time)} {philosopher_id} {message}",
            file=self.out,
            flush=True,
        )

    def _mark_full(self) -> None:
        with self._full_lock:
            self.philos_full += 1
            if self.philos_full == self.settings.philos_count:
                self.stop_event.set()

    def oversee(self) -> None:
        """Watch for starvation until the simulation is stopped."""
        while True:
            self._check_death()
            if self.stop_event.is_set():
                break
            time.sleep(OVERSEER_DELAY_S)

    def _check_death(self) -> None:
        for philosopher in self.philosophers:
            with self._meal_lock:
                if elapsed_ms(philosopher.last_meal) >= self.settings.time_to_die:
                    self.stop_event.set()
                    time.sleep(DEATH_MESSAGE_DELAY_S)
                    self.output_death(philosopher.id, MSG_DIED)
                    self.deceased = philosopher.id
                    return

    def run(self) -> int | None:
        """Run the whole simulation; return the id of the philosopher who died, if any.

        Raises RuntimeError when the philosopher threads cannot all be started.
        """
        threads: list[threading.Thread] = []
        try:
            for philosopher in self.philosophers:
                thread = threading.Thread(
                    target=philosopher.run, name=f"philosopher-{philosopher.id}"
                )
                thread.start()
                threads.append(thread)
        except RuntimeError as exc:
            self._aborted.set()
            self._go.set()
            for thread in threads:
                thread.join()
            raise RuntimeError(MSG_ERR_CREATE) from exc

        for philosopher in self.philosophers:
            philosopher.last_meal = now_ms()
        self.start_time = now_ms()
        self._go.set()
        try:
            self.oversee()
        finally:
            self.stop_event.set()
            for thread in threads:
                thread.join()
        return self.deceased