"""Inclusive calendar date ranges."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Union

from date_ranges.core.date import Date

logger = logging.getLogger(__name__)

DateLike = Union[Date, datetime.date, str]


class InvalidRangeError(ValueError):
    """Raised when a range starts after it ends."""

    pass


@dataclass(frozen=True)
class DateRange:
    """Every calendar day from start to end, both included."""

    start: Date
    end: Date

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if not isinstance(value, Date):
                raise TypeError(
                    f"Range {name} must be a Date, "
                    f"got: {type(value).__name__}"
                )
        if self.start > self.end:
            raise InvalidRangeError(
                f"Range start {self.start} is after end {self.end}"
            )

    def __iter__(self) -> Iterator[Date]:
        cursor = self.start
        while True:
            yield cursor
            # Stop on end itself so a range ending 9999-12-31 never
            # steps out of the supported years.
            if cursor == self.end:
                return
            cursor = cursor.next_day()

    def __len__(self) -> int:
        return self.start.days_until(self.end) + 1

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Date):
            return False
        return self.start <= item <= self.end

    def build(self) -> list[Date]:
        dates = list(self)
        logger.debug(
            "Built %d date(s) from %s to %s",
            len(dates),
            self.start,
            self.end,
        )
        return dates


def _coerce(value: DateLike, name: str) -> Date:
    """Accept Date, datetime.date or an ISO string for an endpoint."""
    if isinstance(value, Date):
        return value
    # datetime.datetime subclasses datetime.date
    if isinstance(value, datetime.datetime):
        raise TypeError(
            f"Range {name} must be a date without a time of day, "
            f"got: {value!r}"
        )
    if isinstance(value, datetime.date):
        return Date.from_date(value)
    if isinstance(value, str):
        return Date.parse(value)
    raise TypeError(
        f"Range {name} must be a Date, datetime.date or "
        f"YYYY-MM-DD string, got: {type(value).__name__}"
    )


def build(start: DateLike, end: DateLike) -> list[Date]:
    """Return every calendar day from start to end inclusive.

    Args:
        start: First day of the range
        end: Last day of the range

    Raises InvalidDateError for an unparseable endpoint and
    InvalidRangeError if start is after end.
    """
    return DateRange(_coerce(start, "start"), _coerce(end, "end")).build()


def date_range(
    start: datetime.date, end: datetime.date
) -> list[datetime.date]:
    """Return a list of datetime.date from start to end inclusive."""
    return [d.to_date() for d in build(start, end)]
