"""Calendar date value type."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from date_ranges.utils.dates import days_in_month, split_iso_date


class InvalidDateError(ValueError):
    """Raised for a (year, month, day) that is not a real calendar day."""

    pass


@dataclass(frozen=True, order=True)
class Date:
    """A day in the proleptic Gregorian calendar.

    Instances compare by (year, month, day). Years are limited to the
    range datetime.date supports, 1 through 9999.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDateError(
                    f"Date {name} must be an integer, got: {value!r}"
                )
        if not datetime.MINYEAR <= self.year <= datetime.MAXYEAR:
            raise InvalidDateError(
                f"Year {self.year} out of range "
                f"({datetime.MINYEAR}-{datetime.MAXYEAR})"
            )
        if self.month < 1 or self.month > 12:
            raise InvalidDateError(
                f"Invalid month {self.month}. Must be 1-12."
            )
        last_day = days_in_month(self.year, self.month)
        if self.day < 1 or self.day > last_day:
            raise InvalidDateError(
                f"Invalid day {self.day} for "
                f"{self.year:04d}-{self.month:02d} "
                f"(has {last_day} days)"
            )

    @classmethod
    def from_date(cls, d: datetime.date) -> Date:
        return cls(d.year, d.month, d.day)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse an ISO YYYY-MM-DD string.

        Raises InvalidDateError if the text is malformed or names a day
        that does not exist.
        """
        parts = split_iso_date(text)
        if parts is None:
            raise InvalidDateError(
                f"Invalid date format '{text}'. "
                "Use YYYY-MM-DD (e.g., 2014-06-29)."
            )
        return cls(*parts)

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def plus_days(self, days: int) -> Date:
        """Return the date ``days`` days later, or earlier if negative."""
        try:
            shifted = self.to_date() + datetime.timedelta(days=days)
        except OverflowError:
            raise InvalidDateError(
                f"{self} plus {days} day(s) is out of range"
            )
        return Date.from_date(shifted)

    def next_day(self) -> Date:
        return self.plus_days(1)

    def days_until(self, other: Date) -> int:
        """Signed number of days from this date to ``other``."""
        return other.to_date().toordinal() - self.to_date().toordinal()

    @property
    def weekday(self) -> int:
        """Day of the week, Monday is 0 and Sunday is 6."""
        return self.to_date().weekday()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
