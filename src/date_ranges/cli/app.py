"""Typer app root: registers all CLI subcommands."""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="date-ranges",
    help="List every calendar day between two dates, inclusive.",
    no_args_is_help=True,
)


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s: %(message)s"
        )


def main() -> None:
    # Import commands to register them
    from date_ranges.cli import build as _build  # noqa: F401
    from date_ranges.cli import count as _count  # noqa: F401

    app()


if __name__ == "__main__":
    main()
