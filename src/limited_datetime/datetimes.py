from __future__ import annotations

from dataclasses import dataclass

from .core.bounded import check_length, check_separator
from .dates import CalendarDate
from .times import Time


@dataclass(frozen=True, order=True)
class DateTime:
    """A calendar date and a time of day, with no offset attached."""
    date: CalendarDate
    time: Time

    @classmethod
    def from_date_time(cls, date: CalendarDate, time: Time) -> "DateTime":
        return cls(date, time)

    @classmethod
    def min(cls) -> "DateTime":
        return cls(CalendarDate.min(), Time.min())

    @classmethod
    def max(cls) -> "DateTime":
        return cls(CalendarDate.max(), Time.max())

    def __str__(self) -> str:
        return f"{self.date}T{self.time}"

    @classmethod
    def parse(cls, text: str) -> "DateTime":
        """YYYY-MM-DDTHH:MM:SS"""
        check_length(text, 19, "date_time")
        date = CalendarDate.parse(text[0:10])
        check_separator(text, 10, "T", "date_time")
        return cls(date, Time.parse(text[11:19]))
