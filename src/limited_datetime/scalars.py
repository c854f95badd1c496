"""Bounded scalar value types: calendar fields, clock fields and durations."""

from __future__ import annotations

from .core import time as cal
from .core.bounded import BoundedInt
from .core.errors import OutOfRangeError


# ============================================================
# Durations
# ============================================================

class Days(BoundedInt):
    """
    Whole days, 0..2_932_896.

    2_932_896 is 9999-12-31 counted from 1970-01-01.
    """
    MIN = 0
    MAX = 2_932_896
    FIELD = "days"

    def to_seconds(self) -> "Seconds":
        return Seconds.from_days(self)


class Seconds(BoundedInt):
    """Duration in whole seconds (unsigned 64-bit)."""
    MIN = 0
    MAX = 2**64 - 1
    FIELD = "seconds"

    @classmethod
    def from_days(cls, days: Days) -> "Seconds":
        return cls(days.value * cal.SECONDS_PER_DAY)


# ============================================================
# Date fields
# ============================================================

class Year(BoundedInt):
    MIN = 1970
    MAX = 9999
    WIDTH = 4
    FIELD = "year"

    def is_leap_year(self) -> bool:
        return cal.is_leap_year(self.value)

    def days(self) -> Days:
        return Days(cal.days_in_year(self.value))

    def first_day_of_year(self) -> "DayOfYear":
        return DayOfYear.min()

    def last_day_of_year(self) -> "DayOfYear":
        if self.is_leap_year():
            return DayOfYear.max_in_leap_year()
        return DayOfYear.max_in_common_year()


class Month(BoundedInt):
    MIN = 1
    MAX = 12
    WIDTH = 2
    FIELD = "month"

    @classmethod
    def january(cls) -> "Month":
        return cls(1)

    @classmethod
    def february(cls) -> "Month":
        return cls(2)

    @classmethod
    def march(cls) -> "Month":
        return cls(3)

    @classmethod
    def april(cls) -> "Month":
        return cls(4)

    @classmethod
    def may(cls) -> "Month":
        return cls(5)

    @classmethod
    def june(cls) -> "Month":
        return cls(6)

    @classmethod
    def july(cls) -> "Month":
        return cls(7)

    @classmethod
    def august(cls) -> "Month":
        return cls(8)

    @classmethod
    def september(cls) -> "Month":
        return cls(9)

    @classmethod
    def october(cls) -> "Month":
        return cls(10)

    @classmethod
    def november(cls) -> "Month":
        return cls(11)

    @classmethod
    def december(cls) -> "Month":
        return cls(12)


class DayOfMonth(BoundedInt):
    """1..31. Whether a given day exists depends on the year and month it is paired with."""
    MIN = 1
    MAX = 31
    WIDTH = 2
    FIELD = "day_of_month"

    def days(self) -> Days:
        return Days(1)

    def __add__(self, other):
        return _add_days(self, other)

    __radd__ = __add__


class DayOfYear(BoundedInt):
    MIN = 1
    MAX = 366
    WIDTH = 3
    FIELD = "day_of_year"

    @classmethod
    def max_in_common_year(cls) -> "DayOfYear":
        return cls(365)

    @classmethod
    def max_in_leap_year(cls) -> "DayOfYear":
        return cls(366)

    def days(self) -> Days:
        return Days(1)

    def __add__(self, other):
        return _add_days(self, other)

    __radd__ = __add__


def _add_days(day, days):
    """day + days within the same type; past MAX is an OutOfRangeError, never a wrap."""
    if not isinstance(days, Days):
        return NotImplemented
    total = day.value + days.value
    if total > day.MAX:
        raise OutOfRangeError(f"{day.FIELD} {day} + {days} days overflows", field=day.FIELD)
    return type(day)(total)


# ============================================================
# Time fields
# ============================================================

class Hour(BoundedInt):
    MIN = 0
    MAX = 23
    WIDTH = 2
    FIELD = "hour"


class Minute(BoundedInt):
    MIN = 0
    MAX = 59
    WIDTH = 2
    FIELD = "minute"


class Second(BoundedInt):
    """0..59; there is no leap second."""
    MIN = 0
    MAX = 59
    WIDTH = 2
    FIELD = "second"
