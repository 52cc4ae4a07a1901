"""Command line argument parsing."""

import argparse
from collections.abc import Sequence

from throttlerate import __version__


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - events, period, burst: A single rate to inspect (optional)
        - config: YAML file whose rates to inspect (optional)
        - verbose: Whether to show debug logs
    """
    parser = argparse.ArgumentParser(
        prog="throttlerate",
        description="Inspect normalized throttle rates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("events", nargs="?", type=float, help="Events per period")
    parser.add_argument("period", nargs="?", type=float, help="Period length in milliseconds")
    parser.add_argument("burst", nargs="?", type=int, help="Maximum simultaneous events")
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Show every rate from a YAML config file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )

    args = parser.parse_args(argv)

    given = [v is not None for v in (args.events, args.period, args.burst)]
    if args.config is None and not all(given):
        parser.error("EVENTS PERIOD BURST are required unless --config is given")
    if args.config is not None and any(given):
        parser.error("EVENTS PERIOD BURST cannot be combined with --config")

    return args
