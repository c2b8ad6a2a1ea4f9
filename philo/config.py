"""Command-line parameters of the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from philo.textutils import atoi

INVALID_ARGUMENTS = "Invalid arguments"


class ConfigError(ValueError):
    """Raised when the simulation parameters are missing or out of range."""


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulation run; times are in milliseconds."""

    nb_philo: int
    time_die: int
    time_eat: int
    time_sleep: int
    must_eat: int | None = None


def parse_args(argv: Sequence[str]) -> SimulationConfig:
    """Build a configuration from the arguments that follow the program name.

    Expects ``number_of_philosophers time_to_die time_to_eat time_to_sleep``
    and optionally ``number_of_times_each_philosopher_must_eat``.  Every
    value must be at least 1.
    """
    if not 4 <= len(argv) <= 5:
        raise ConfigError(INVALID_ARGUMENTS)
    nb_philo, time_die, time_eat, time_sleep = (atoi(arg) for arg in argv[:4])
    must_eat = atoi(argv[4]) if len(argv) == 5 else None
    if min(nb_philo, time_die, time_eat, time_sleep) < 1:
        raise ConfigError(INVALID_ARGUMENTS)
    if must_eat is not None and must_eat < 1:
        raise ConfigError(INVALID_ARGUMENTS)
    return SimulationConfig(nb_philo, time_die, time_eat, time_sleep, must_eat)