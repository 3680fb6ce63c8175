"""Count command: number of days in an inclusive range."""

from __future__ import annotations

from typing import Optional

import typer

from date_ranges.cli.app import app
from date_ranges.cli.common import (
    load_settings_or_exit,
    parse_range_or_exit,
)


@app.command()
def count(
    start: str = typer.Argument(
        ..., help="First day, YYYY-MM-DD (inclusive)"
    ),
    end: str = typer.Argument(
        ..., help="Last day, YYYY-MM-DD (inclusive)"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", help="Path to config YAML file"
    ),
) -> None:
    """Print how many calendar days START to END covers."""
    # ranges.max_days only limits materialized output
    load_settings_or_exit(config)
    rng = parse_range_or_exit(start, end)
    typer.echo(str(len(rng)))
