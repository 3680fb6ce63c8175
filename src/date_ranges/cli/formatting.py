"""Rich tables and output formatting."""

from __future__ import annotations

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from date_ranges.core.date import Date

console = Console()

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def format_date(d: Date, date_format: str | None = None) -> str:
    """Format a date, ISO YYYY-MM-DD unless a strftime pattern is given."""
    if date_format is None:
        return str(d)
    return d.to_date().strftime(date_format)


def render_plain(dates: list[Date], date_format: str | None = None) -> str:
    """One date per line."""
    return "\n".join(format_date(d, date_format) for d in dates)


def render_json(dates: list[Date], date_format: str | None = None) -> str:
    return json.dumps(
        [format_date(d, date_format) for d in dates], indent=2
    )


def print_dates_table(
    dates: list[Date],
    date_format: str | None = None,
    show_weekday: bool = True,
) -> None:
    """Print a Rich table of dates."""
    if not dates:
        console.print("[yellow]No dates.[/yellow]")
        return

    table = Table(title="Dates", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Date")
    if show_weekday:
        table.add_column("Weekday")

    for i, d in enumerate(dates, start=1):
        # Cells are literal text; date_format may contain brackets
        row = [Text(str(i)), Text(format_date(d, date_format))]
        if show_weekday:
            row.append(Text(WEEKDAY_NAMES[d.weekday]))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[dim]{len(dates)} day(s)[/dim]")
