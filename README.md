# dinephilo

A simulation of the dining philosophers problem. Each philosopher runs in a
thread of its own. Each fork is a lock shared between two neighbours. A
monitor checks how long it has been since each philosopher last ate, and
stops the run when one has gone too long.

## Installing

```
pip install .
```

## Running

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_must_eat]
```

All times are in milliseconds. Each argument is read as a leading decimal
integer (leading whitespace and one sign allowed, anything after the digits
ignored). The first four values must be positive; the optional fifth must be
positive when given.

Example:

```
philo 5 800 200 200
```

Each event is printed on its own line to standard output: the milliseconds
elapsed since the simulation began, then the philosopher's number and what
happened.

```
0  philo 1 has started
0 philo 1 has taken a fork
0 philo 1 has taken a fork
0 philo 1 is eating ...
...
812 philo 3 died
```

Philosophers with an even number pick up their right fork first, those with
an odd number their left fork first. A philosopher loops taking forks and
eating for `time_to_eat` milliseconds until the run is over.

The run ends only when the monitor sees that a philosopher has gone longer
than `time_to_die` milliseconds without eating; it then prints the `died`
line and every thread stops.

If the number of arguments is wrong, the command prints
`Error: Wrong number of arguments` followed by the usage line and exits with
status 1. If a value is out of range it prints
`Error: Invalid arguments values` and exits with status 1.

### What the simulation does not do

- `time_to_sleep` is checked but not used: philosophers do not sleep or think
  between meals.
- `number_of_times_each_must_eat` is checked but does not end the run; only a
  death does.

## Using it from Python

```python
from dinephilo.config import parse_config
from dinephilo.simulation import Simulation

config = parse_config(["5", "800", "200", "200"])
Simulation(config).run()
```

`parse_config` takes the arguments that follow the program name. It raises
`ArgumentCountError` or `InvalidArgumentError`, both subclasses of
`ConfigError`. A `SimulationConfig` can also be built directly and checked
with `validate_config`.

`Simulation(config, output)` writes its lines to `output`, a text stream
(standard output when omitted). `Simulation.run()` returns once a
philosopher has died. The `philosophers` list holds a `Philosopher` record
for each seat, with its fork indices, time of last meal and meals eaten.

The package also includes small helpers used by the program:

- `dinephilo.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim`, `substr` and others.
- `dinephilo.chars`: ASCII classification (`is_alpha`, `is_digit`, ...) and
  `to_lower` / `to_upper`.
- `dinephilo.memory`: byte-buffer operations such as `memset`, `memcpy`,
  `memmove`, `memcmp`, `memchr` and `calloc`.
- `dinephilo.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `dinephilo.printf`: `format_message` and `print_formatted`, supporting
  `%c %s %p %d %i %u %x %X %%`.
- `dinephilo.linereader`: `LineReader`, which yields a stream's lines one at
  a time through a fixed-size read buffer.

## Tests

```
pip install ".[test]"
pytest
```