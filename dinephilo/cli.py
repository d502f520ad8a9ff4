"""Command-line entry point for the dining-philosophers simulation."""

import sys
from typing import Optional, Sequence

from dinephilo.config import USAGE, ArgumentCountError, ConfigError, parse_config
from dinephilo.printf import print_formatted
from dinephilo.simulation import Simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from the arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_config(args)
    except ConfigError as exc:
        print_formatted("Error: %s\n", str(exc))
        if isinstance(exc, ArgumentCountError):
            print_formatted("%s\n", USAGE)
        return 1
    Simulation(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())