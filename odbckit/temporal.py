"""Date, time and timestamp values as exchanged with a database."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import OdbcError

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _days_in_february(year: int) -> int:
    if year % 400 == 0:
        return 29
    if year % 100 == 0:
        return 28
    if year % 4 == 0:
        return 29
    return 28


def days_in_month(year: int, month: int) -> int:
    """Return the number of days of a month in the Gregorian calendar."""
    if not 1 <= month <= 12:
        raise OdbcError(f"Invalid month ({month})")
    if month == 2:
        return _days_in_february(year)
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def _check_date(year: int, month: int, day: int) -> None:
    if not 0 <= year <= 9999:
        raise OdbcError(f"Invalid year ({year})")
    if not 1 <= month <= 12:
        raise OdbcError(f"Invalid month ({month})")
    if not 1 <= day <= days_in_month(year, month):
        raise OdbcError(f"Invalid day ({day})")


def _check_time(hour: int, minute: int, second: int) -> None:
    if not 0 <= hour <= 23:
        raise OdbcError(f"Invalid hour ({hour})")
    if not 0 <= minute <= 59:
        raise OdbcError(f"Invalid minute ({minute})")
    if not 0 <= second <= 59:
        raise OdbcError(f"Invalid second ({second})")


@dataclass(frozen=True, order=True)
class SqlDate:
    """A date made of year (0-9999), month and day in month.

    The default value is 0000-01-01.
    """

    year: int = 0
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        _check_date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class SqlTime:
    """A time of day made of hour, minute and second.

    The default value is 00:00:00.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        _check_time(self.hour, self.minute, self.second)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True, order=True)
class SqlTimestamp:
    """A date and time of day with milliseconds.

    The default value is 0000-01-01 00:00:00.000.
    """

    year: int = 0
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        _check_date(self.year, self.month, self.day)
        _check_time(self.hour, self.minute, self.second)
        if not 0 <= self.milliseconds <= 999:
            raise OdbcError(f"Invalid milliseconds ({self.milliseconds})")

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}."
            f"{self.milliseconds:03d}"
        )

    def date_part(self) -> SqlDate:
        """Return the date of this timestamp."""
        return SqlDate(self.year, self.month, self.day)

    def time_part(self) -> SqlTime:
        """Return the time of day of this timestamp, without milliseconds."""
        return SqlTime(self.hour, self.minute, self.second)