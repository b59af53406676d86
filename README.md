# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and sits between two forks, which are locks. A philosopher
takes both forks, eats, puts them down, sleeps and thinks, over and over.
An overseer watches the table. It stops the simulation when a philosopher
has gone `time_to_die` milliseconds without starting a meal. It also stops
when every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat]
```

You can also run it as `python -m philo.cli` with the same arguments.

All times are in milliseconds. Give four or five arguments. Every argument
must be a positive integer no larger than 2147483647. A leading `+` is
accepted and a `-` is not. If any argument is wrong, the command prints
`Invalid arguments` and exits with status 1. If the philosopher threads
cannot all be started, it prints `Error creating threads` and exits with
status 1. Otherwise it exits with status 0, whether or not a philosopher
died.

Example:

```
philo 5 800 200 200 7
```

Each state change is printed on its own line in this form:

```
<milliseconds since start> <philosopher id> <message>
```

The message is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Philosophers are numbered from 1. Once the
simulation has stopped, no lines are printed except the `died` line.

Some details of the behaviour:

- **Alone at the table.** A lone philosopher takes one fork and waits
  until the overseer declares them dead.
- **Staggered start.** Odd-numbered philosophers first think for
  `time_to_eat` milliseconds before they reach for a fork.
- **Fork order.** Philosophers in even seats reach for their own fork
  first. Philosophers in odd seats reach for their neighbour's fork first.
- **Odd-sized table.** With an odd number of philosophers, each thinking
  phase lasts `(time_to_die - time_to_eat - time_to_sleep) / 2`
  milliseconds, truncated toward zero.

## Use as a library

```python
import sys
from philo.parsing import parse_arguments
from philo.simulation import Simulation

settings = parse_arguments(["4", "410", "200", "200", "3"])
died = Simulation(settings, sys.stdout).run()
```

The modules are:

- **`philo.parsing`**
  - `parse_arguments(args)` takes the arguments that follow the program
    name and returns a frozen `Settings`. Its fields are `philos_count`,
    `time_to_die`, `time_to_eat`, `time_to_sleep` and `must_eat`, where
    `must_eat` is `None` when it is not given. It also has a
    `time_to_think` property.
  - `parse_int(text)` parses a single value.
  - Both raise `ArgumentError`, a `ValueError`, on bad input.
- **`philo.simulation`**
  - `Simulation(settings, out)` builds the forks and the `Philosopher`
    objects. It writes to `out`, or to standard output when `out` is
    `None`.
  - `run()` starts the threads, watches for starvation and joins the
    threads. It returns the id of the philosopher who died, or `None` if
    every philosopher ate enough. It raises `RuntimeError` when the
    threads cannot be started.
  - `assign_forks(count)` gives each seat's first and second fork index.
- **`philo.timing`**
  - `now_ms()` and `elapsed_ms(since)` are millisecond clock helpers.
  - `interruptible_sleep(duration_ms, stop_event)` sleeps in small chunks
    and stops early once the event is set.
- **`philo.cli`**
  - `main(argv=None)` is the command's entry point. It returns the exit
    status.

## Tests

```
pip install ".[test]"
pytest
```