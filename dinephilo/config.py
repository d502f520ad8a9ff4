"""Command-line parameters of the dining-philosophers simulation."""

from dataclasses import dataclass
from typing import Sequence

from dinephilo.strings import atoi

USAGE = (
    "Usage: ./philo number_of_philosophers time_to_die "
    "time_to_eat time_to_sleep [number_of_times_each_must_eat]"
)
UNLIMITED_MEALS = -1


class ConfigError(Exception):
    """The simulation cannot be configured from the given arguments."""


class ArgumentCountError(ConfigError):
    """Too few or too many arguments were given."""

    def __init__(self, count: int) -> None:
        super().__init__("Wrong number of arguments")
        self.count = count


class InvalidArgumentError(ConfigError):
    """An argument has a value the simulation cannot use."""

    def __init__(self) -> None:
        super().__init__("Invalid arguments values")


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one run; times are in milliseconds."""

    num_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    num_must_eat: int = UNLIMITED_MEALS


def validate_argument_count(args: Sequence[str]) -> None:
    """Require four or five arguments, the program name not included."""
    if not 4 <= len(args) <= 5:
        raise ArgumentCountError(len(args))


def validate_config(config: SimulationConfig) -> SimulationConfig:
    """Return config if every value is positive (meal count may be unlimited)."""
    if (
        config.num_philos <= 0
        or config.time_to_die <= 0
        or config.time_to_eat <= 0
        or config.time_to_sleep <= 0
        or (config.num_must_eat <= 0 and config.num_must_eat != UNLIMITED_MEALS)
    ):
        raise InvalidArgumentError()
    return config


def parse_config(args: Sequence[str]) -> SimulationConfig:
    """Build and validate a configuration from the arguments after the program name."""
    validate_argument_count(args)
    numbers = [atoi(arg) for arg in args]
    num_must_eat = numbers[4] if len(numbers) == 5 else UNLIMITED_MEALS
    config = SimulationConfig(
        num_philos=numbers[0],
        time_to_die=numbers[1],
        time_to_eat=numbers[2],
        time_to_sleep=numbers[3],
        num_must_eat=num_must_eat,
    )
    return validate_config(config)