"""Shared fixtures: config files and sample dates."""

from __future__ import annotations

from pathlib import Path

import pytest

from date_ranges.core import Date


@pytest.fixture
def write_config(tmp_path: Path):
    """Write YAML text to a config file and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return str(path)

    return _write


@pytest.fixture
def month_rollover() -> tuple[Date, Date]:
    """June 29 to July 1 2014, crossing a month boundary."""
    return Date(2014, 6, 29), Date(2014, 7, 1)
