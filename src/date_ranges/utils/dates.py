"""Proleptic Gregorian calendar helpers."""

from __future__ import annotations

import re

_DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_ISO_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries unless divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    if month < 1 or month > 12:
        raise ValueError(f"Invalid month {month}. Must be 1-12.")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_PER_MONTH[month - 1]


def split_iso_date(text: str) -> tuple[int, int, int] | None:
    """Split YYYY-MM-DD into (year, month, day).

    Only checks the shape of the string; returns None if it does not match.
    """
    match = _ISO_DATE_RE.match(text.strip())
    if not match:
        return None
    year, month, day = match.groups()
    return int(year), int(month), int(day)
