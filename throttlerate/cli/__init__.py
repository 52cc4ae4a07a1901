"""Command line interface."""

import logging
from collections.abc import Sequence

from throttlerate.composition import create_catalog
from throttlerate.domain import Rate
from throttlerate.logging_setup import setup_logging, setup_logging_from_env

from .args import parse_args
from .display import display_rates

logger = logging.getLogger(__name__)

EXIT_INVALID_CONFIG = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``throttlerate`` command."""
    args = parse_args(argv)

    if args.verbose:
        setup_logging("DEBUG")
    else:
        setup_logging_from_env()

    # InvalidRateConfiguration and pydantic's ValidationError are both ValueErrors
    try:
        if args.config is not None:
            catalog = create_catalog(args.config)
            rows = [("(default)", catalog.default), *catalog.items()]
        else:
            rows = [("rate", Rate(args.events, args.period, args.burst))]
    except ValueError as e:
        logger.error("Invalid rate configuration: %s", e)
        return EXIT_INVALID_CONFIG

    display_rates(rows)
    return 0


__all__ = ["main", "parse_args", "display_rates"]
