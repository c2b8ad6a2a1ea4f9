# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and keeps cycling through eating, sleeping and thinking.
A monitor thread watches all of them. The simulation stops when a
philosopher starves, or when every philosopher has eaten the required
number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat]
```

All times are in milliseconds. Every argument must be at least 1.
Arguments are read as leading decimal integers, so text after the digits
is ignored, and a value with no leading digits counts as 0, which makes
it invalid. If `must_eat` is given, the simulation ends once every
philosopher has eaten at least that many times.

Example:

```
philo 5 800 200 200 7
```

Each event is printed on its own line, in this form:

```
<ms since start> <philosopher number> <action>
```

The actions are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Philosophers are numbered from 1. No further
actions are printed after a death or after every philosopher has eaten
enough.

If the number of arguments is wrong or a value is below 1, the command
writes `Error: Invalid arguments` to standard error and exits with
status 1. Otherwise it exits with status 0, whether or not a philosopher
died.

## Library use

```python
from philo.config import parse_args
from philo.simulation import Simulation

config = parse_args(["4", "410", "200", "200", "3"])
died = Simulation(config).run()
```

`parse_args` takes the arguments that follow the program name and
returns a `SimulationConfig` (`nb_philo`, `time_die`, `time_eat`,
`time_sleep`, `must_eat`, where `must_eat` is `None` when not given). It
raises `philo.config.ConfigError` (a `ValueError`) when the arguments are
invalid.

`Simulation(config, output=None)` writes its log to `output`, or to
standard output by default. `run()` returns the number (from 1) of the
philosopher who died, or `None` when every philosopher ate the required
number of meals. `philo.simulation.timestamp()` gives the current time in
whole milliseconds.

The package also includes some helpers:

- `philo.textutils`: `atoi` (leading integer, skipping whitespace,
  wrapping like a 32-bit int), `itoa`, `split` (drops empty pieces),
  `strtrim`, `substr`, `strnstr` (returns the match index or `None`) and
  `strncmp`, plus `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`, which accept a single character or an integer
  code.
- `philo.printf`: `cformat(fmt, *args)` renders the `%c %s %p %d %i %u
  %x %X %%` conversions; `cprintf(fmt, *args, file=None)` writes the
  result and returns its length. Unknown conversions produce nothing.
  Also `format_hex`, `format_pointer`, `format_decimal`, `put_number`,
  `put_string` and `put_line`.
- `philo.linereader`: `LineReader(stream, buffer_size=42)` reads a text
  or binary stream line by line, keeping each newline; `read_line()`
  returns `None` at the end, and the reader is iterable.
  `LineReaderPool(buffer_size=42).next_line(stream)` keeps a separate
  reader for each stream.

## Running the tests

```
pip install .[test]
pytest
```