"""Calendar dates and inclusive date ranges."""

from date_ranges.core.builder import (
    DateRange,
    InvalidRangeError,
    build,
    date_range,
)
from date_ranges.core.date import Date, InvalidDateError

__all__ = [
    "Date",
    "DateRange",
    "InvalidDateError",
    "InvalidRangeError",
    "build",
    "date_range",
]
