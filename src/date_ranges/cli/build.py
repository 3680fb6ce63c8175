"""Build command: list every day between two dates."""

from __future__ import annotations

from typing import Optional

import typer

from date_ranges.cli.app import app
from date_ranges.cli.common import (
    load_settings_or_exit,
    parse_range_or_exit,
    print_error,
)
from date_ranges.cli.formatting import (
    print_dates_table,
    render_json,
    render_plain,
)
from date_ranges.config.settings import OUTPUT_FORMATS


@app.command()
def build(
    start: str = typer.Argument(
        ..., help="First day, YYYY-MM-DD (inclusive)"
    ),
    end: str = typer.Argument(
        ..., help="Last day, YYYY-MM-DD (inclusive)"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", help="Path to config YAML file"
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Output format: table, plain, or json",
    ),
) -> None:
    """List every calendar day from START to END."""
    settings = load_settings_or_exit(config)

    if output_format is None:
        output_format = settings.output.format
    fmt = output_format.strip().lower()
    if fmt not in OUTPUT_FORMATS:
        choices = ", ".join(OUTPUT_FORMATS)
        print_error(f"--format must be one of: {choices}")
        raise typer.Exit(1)

    rng = parse_range_or_exit(start, end)

    max_days = settings.ranges.max_days
    if len(rng) > max_days:
        print_error(
            f"Range spans {len(rng)} days, limit is {max_days}"
        )
        raise typer.Exit(1)

    dates = rng.build()
    date_format = settings.output.date_format

    if fmt == "plain":
        typer.echo(render_plain(dates, date_format))
    elif fmt == "json":
        typer.echo(render_json(dates, date_format))
    else:
        print_dates_table(
            dates,
            date_format,
            show_weekday=settings.output.show_weekday,
        )
