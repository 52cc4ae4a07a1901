"""Display utilities for rate tables."""

import math
from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from throttlerate.domain import Rate

console = Console()


def _format_per_second(rate: Rate) -> str:
    if math.isinf(rate.events_per_second):
        return "[yellow]unbounded[/yellow]"
    return f"{rate.events_per_second:,.3f}"


def build_rate_table(rows: Iterable[tuple[str, Rate]]) -> Table:
    """Build a table of rates.

    Args:
        rows: (name, rate) pairs in display order.

    Returns:
        Rich table with raw values, multiplier and integer counts.
    """
    table = Table(title="Throttle rates", header_style="bold cyan")
    table.add_column("Name", style="bold")
    table.add_column("Events (raw)", justify="right")
    table.add_column("Period ms (raw)", justify="right")
    table.add_column("Multiplier", justify="right", style="dim")
    table.add_column("Events", justify="right", style="green")
    table.add_column("Period ms", justify="right", style="green")
    table.add_column("Events/s", justify="right")

    for name, rate in rows:
        table.add_row(
            name,
            f"{rate.events_raw:g}",
            f"{rate.period_raw:g}",
            f"x{rate.precision_multiplier}",
            str(rate.events),
            str(rate.period),
            _format_per_second(rate),
        )
    return table


def display_rates(rows: Iterable[tuple[str, Rate]], output: Console | None = None) -> None:
    """Print a table of rates."""
    (output or console).print(build_rate_table(rows))
