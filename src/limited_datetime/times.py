from __future__ import annotations

from dataclasses import dataclass

from .core import time as cal
from .core.errors import OutOfRangeError
from .core.bounded import check_length, check_separator
from .scalars import Hour, Minute, Second, Seconds


@dataclass(frozen=True, order=True)
class Time:
    """Time of day to the second. Each field is bounded on its own, so every combination is valid."""
    hour: Hour
    minute: Minute
    second: Second

    @classmethod
    def from_hms(cls, hour: Hour, minute: Minute, second: Second) -> "Time":
        return cls(hour, minute, second)

    @classmethod
    def min(cls) -> "Time":
        return cls(Hour.min(), Minute.min(), Second.min())

    @classmethod
    def max(cls) -> "Time":
        return cls(Hour.max(), Minute.max(), Second.max())

    def seconds_from_midnight(self) -> Seconds:
        return Seconds(
            cal.seconds_from_midnight_from_time((self.hour.value, self.minute.value, self.second.value))
        )

    @classmethod
    def from_seconds_from_midnight(cls, seconds: Seconds) -> "Time":
        if seconds.value >= cal.SECONDS_PER_DAY:
            raise OutOfRangeError(f"{seconds} seconds is not within one day", field="seconds")
        h, m, s = cal.time_from_seconds_from_midnight(seconds.value)
        return cls(Hour(h), Minute(m), Second(s))

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute}:{self.second}"

    @classmethod
    def parse(cls, text: str) -> "Time":
        """HH:MM:SS"""
        check_length(text, 8, "time")
        hour = Hour.parse(text[0:2])
        check_separator(text, 2, ":", "time")
        minute = Minute.parse(text[3:5])
        check_separator(text, 5, ":", "time")
        return cls(hour, minute, Second.parse(text[6:8]))
