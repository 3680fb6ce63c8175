"""Helpers shared by CLI commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from date_ranges.config.settings import (
    ConfigError,
    Settings,
    load_settings,
)
from date_ranges.core import (
    Date,
    DateRange,
    InvalidDateError,
    InvalidRangeError,
)

console = Console()


def print_error(message: str) -> None:
    """Print a red Error: line; message is shown literally."""
    console.print(f"[red]Error:[/red] {escape(message)}")


def load_settings_or_exit(config: str | None) -> Settings:
    try:
        return load_settings(config)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1)


def parse_range_or_exit(start: str, end: str) -> DateRange:
    """Parse both endpoints into a DateRange.

    Prints the problem and exits with status 1 on failure.
    """
    try:
        return DateRange(Date.parse(start), Date.parse(end))
    except (InvalidDateError, InvalidRangeError) as e:
        print_error(str(e))
        raise typer.Exit(1)
