"""
limited_datetime.dates
----------------------
Composite calendar values: YearMonth, CalendarDate and OrdinalDate.

CalendarDate and OrdinalDate name the same day two ways and convert into
each other without loss through ``core.time``. Navigation (pred/succ) walks
the field scalars and carries into the next field at month and year ends;
it returns None only at 1970-01-01 and 9999-12-31.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .core import time as cal
from .core.bounded import check_length, check_separator
from .core.errors import InvalidDateError, InvalidDayOfYearError
from .scalars import DayOfMonth, DayOfYear, Days, Month, Year


# ============================================================
# YearMonth
# ============================================================

@dataclass(frozen=True, order=True)
class YearMonth:
    """Every Year x Month pair is valid."""
    year: Year
    month: Month

    @classmethod
    def first_year_month_of_year(cls, year: Year) -> "YearMonth":
        return cls(year, Month.january())

    @classmethod
    def last_year_month_of_year(cls, year: Year) -> "YearMonth":
        return cls(year, Month.december())

    def days(self) -> Days:
        return Days(cal.days_in_month(self.year.value, self.month.value))

    def first_day_of_month(self) -> DayOfMonth:
        return DayOfMonth.min()

    def last_day_of_month(self) -> DayOfMonth:
        return DayOfMonth(cal.days_in_month(self.year.value, self.month.value))

    def pred(self) -> Optional["YearMonth"]:
        month = self.month.pred()
        if month is not None:
            return YearMonth(self.year, month)
        year = self.year.pred()
        return None if year is None else YearMonth.last_year_month_of_year(year)

    def succ(self) -> Optional["YearMonth"]:
        month = self.month.succ()
        if month is not None:
            return YearMonth(self.year, month)
        year = self.year.succ()
        return None if year is None else YearMonth.first_year_month_of_year(year)

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        """YYYY-MM"""
        check_length(text, 7, "year_month")
        year = Year.parse(text[0:4])
        check_separator(text, 4, "-", "year_month")
        return cls(year, Month.parse(text[5:7]))


# ============================================================
# CalendarDate
# ============================================================

@dataclass(frozen=True, order=True)
class CalendarDate:
    year: Year
    month: Month
    day_of_month: DayOfMonth

    def __post_init__(self) -> None:
        if self.day_of_month > self.year_month().last_day_of_month():
            raise InvalidDateError(
                f"{self.year}-{self.month} has no day {self.day_of_month}", field="day_of_month"
            )

    @classmethod
    def from_ymd(cls, year: Year, month: Month, day_of_month: DayOfMonth) -> "CalendarDate":
        return cls(year, month, day_of_month)

    @classmethod
    def first_date_of_month(cls, year_month: YearMonth) -> "CalendarDate":
        return cls(year_month.year, year_month.month, year_month.first_day_of_month())

    @classmethod
    def last_date_of_month(cls, year_month: YearMonth) -> "CalendarDate":
        return cls(year_month.year, year_month.month, year_month.last_day_of_month())

    @classmethod
    def first_date_of_year(cls, year: Year) -> "CalendarDate":
        return cls.first_date_of_month(YearMonth.first_year_month_of_year(year))

    @classmethod
    def last_date_of_year(cls, year: Year) -> "CalendarDate":
        return cls.last_date_of_month(YearMonth.last_year_month_of_year(year))

    @classmethod
    def min(cls) -> "CalendarDate":
        return cls.first_date_of_year(Year.min())

    @classmethod
    def max(cls) -> "CalendarDate":
        return cls.last_date_of_year(Year.max())

    def year_month(self) -> YearMonth:
        return YearMonth(self.year, self.month)

    def pred(self) -> Optional["CalendarDate"]:
        ym = self.year_month()
        if self.day_of_month == ym.first_day_of_month():
            prev = ym.pred()
            return None if prev is None else CalendarDate.last_date_of_month(prev)
        return CalendarDate(self.year, self.month, self.day_of_month.pred())

    def succ(self) -> Optional["CalendarDate"]:
        ym = self.year_month()
        if self.day_of_month == ym.last_day_of_month():
            nxt = ym.succ()
            return None if nxt is None else CalendarDate.first_date_of_month(nxt)
        return CalendarDate(self.year, self.month, self.day_of_month.succ())

    def _ymd(self):
        return self.year.value, self.month.value, self.day_of_month.value

    def to_ordinal_date(self) -> "OrdinalDate":
        _, day_of_year = cal.ordinal_date_from_date(self._ymd())
        return OrdinalDate(self.year, DayOfYear(day_of_year))

    @classmethod
    def from_ordinal_date(cls, ordinal_date: "OrdinalDate") -> "CalendarDate":
        _, m, d = cal.date_from_ordinal_date((ordinal_date.year.value, ordinal_date.day_of_year.value))
        return cls(ordinal_date.year, Month(m), DayOfMonth(d))

    def days_from_unix_epoch(self) -> Days:
        """Days since 1970-01-01 (0 for 1970-01-01 itself)."""
        return Days(cal.days_from_unix_epoch_from_date(self._ymd()))

    @classmethod
    def from_days_from_unix_epoch(cls, days: Days) -> "CalendarDate":
        y, m, d = cal.date_from_days_from_unix_epoch(days.value)
        return cls(Year(y), Month(m), DayOfMonth(d))

    def to_date(self) -> date:
        return date(*self._ymd())

    @classmethod
    def from_date(cls, d: date) -> "CalendarDate":
        return cls(Year(d.year), Month(d.month), DayOfMonth(d.day))

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day_of_month}"

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """YYYY-MM-DD"""
        check_length(text, 10, "date")
        year_month = YearMonth.parse(text[0:7])
        check_separator(text, 7, "-", "date")
        return cls(year_month.year, year_month.month, DayOfMonth.parse(text[8:10]))


Date = CalendarDate


# ============================================================
# OrdinalDate
# ============================================================

@dataclass(frozen=True, order=True)
class OrdinalDate:
    year: Year
    day_of_year: DayOfYear

    def __post_init__(self) -> None:
        if self.day_of_year > self.year.last_day_of_year():
            raise InvalidDayOfYearError(
                f"{self.year} has no day {self.day_of_year}", field="day_of_year"
            )

    @classmethod
    def first_date_of_year(cls, year: Year) -> "OrdinalDate":
        return cls(year, year.first_day_of_year())

    @classmethod
    def last_date_of_year(cls, year: Year) -> "OrdinalDate":
        return cls(year, year.last_day_of_year())

    def pred(self) -> Optional["OrdinalDate"]:
        if self.day_of_year == self.year.first_day_of_year():
            year = self.year.pred()
            return None if year is None else OrdinalDate.last_date_of_year(year)
        return OrdinalDate(self.year, self.day_of_year.pred())

    def succ(self) -> Optional["OrdinalDate"]:
        if self.day_of_year == self.year.last_day_of_year():
            year = self.year.succ()
            return None if year is None else OrdinalDate.first_date_of_year(year)
        return OrdinalDate(self.year, self.day_of_year.succ())

    def to_calendar_date(self) -> CalendarDate:
        return CalendarDate.from_ordinal_date(self)

    @classmethod
    def from_calendar_date(cls, calendar_date: CalendarDate) -> "OrdinalDate":
        return calendar_date.to_ordinal_date()

    def __str__(self) -> str:
        return f"{self.year}-{self.day_of_year}"

    @classmethod
    def parse(cls, text: str) -> "OrdinalDate":
        """YYYY-DDD"""
        check_length(text, 8, "ordinal_date")
        year = Year.parse(text[0:4])
        check_separator(text, 4, "-", "ordinal_date")
        return cls(year, DayOfYear.parse(text[5:8]))
