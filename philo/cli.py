"""Command-line entry point of the philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philo.config import ConfigError, parse_args
from philo.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except ConfigError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    Simulation(config, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())