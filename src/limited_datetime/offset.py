"""
limited_datetime.offset
-----------------------
Fixed UTC offsets and offset date-times (``2021-02-03T04:05:06+09:00``).

An offset is a plain number of minutes; there is no zone database and no
daylight-saving rule behind it.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core import time as cal
from .core.bounded import BoundedInt, check_length
from .core.errors import InvalidFormatError, OutOfRangeError
from .datetimes import DateTime
from .instant import Instant
from .scalars import Hour, Minute


class TimeZoneOffset(BoundedInt):
    """Offset from UTC in whole minutes, -23:59..+23:59."""
    MIN = -(23 * 60 + 59)
    MAX = 23 * 60 + 59
    FIELD = "offset"

    @classmethod
    def utc(cls) -> "TimeZoneOffset":
        return cls(0)

    @classmethod
    def from_hm(cls, hours: int, minutes: int, negative: bool = False) -> "TimeZoneOffset":
        """from_hm(5, 30, negative=True) is -05:30; fields are range-checked as Hour and Minute."""
        total = Hour(hours).value * 60 + Minute(minutes).value
        return cls(-total if negative else total)

    def seconds(self) -> int:
        return self.value * cal.SECONDS_PER_MINUTE

    def __str__(self) -> str:
        sign = "-" if self.value < 0 else "+"
        h, m = divmod(abs(self.value), 60)
        return f"{sign}{h:02d}:{m:02d}"

    @classmethod
    def parse(cls, text: str) -> "TimeZoneOffset":
        """+HH:MM or -HH:MM"""
        check_length(text, 6, cls.FIELD)
        if text[0] not in "+-" or text[3] != ":":
            raise InvalidFormatError(f"offset must look like +HH:MM: {text!r}", field=cls.FIELD)
        hour, minute = Hour.parse(text[1:3]), Minute.parse(text[4:6])
        return cls.from_hm(hour.value, minute.value, negative=text[0] == "-")


@dataclass(frozen=True)
class OffsetDateTime:
    """
    Local date-time plus the offset it was observed at.

    Construction fails with OutOfRangeError when the corresponding UTC
    instant falls outside 1970..9999 (e.g. 1970-01-01T00:00:00+09:00).
    """
    date_time: DateTime
    offset: TimeZoneOffset

    def __post_init__(self) -> None:
        self._utc_seconds()

    def _utc_seconds(self) -> int:
        local = Instant.from_date_time(self.date_time).value
        utc = local - self.offset.seconds()
        if not (Instant.MIN <= utc <= Instant.MAX):
            raise OutOfRangeError(f"{self} is outside the supported instant range", field="instant")
        return utc

    @classmethod
    def new(cls, date_time: DateTime, offset: TimeZoneOffset) -> "OffsetDateTime":
        return cls(date_time, offset)

    @classmethod
    def from_instant(cls, instant: Instant, offset: TimeZoneOffset) -> "OffsetDateTime":
        local = instant.value + offset.seconds()
        if not (Instant.MIN <= local <= Instant.MAX):
            raise OutOfRangeError(
                f"{instant} at {offset} is outside the supported calendar range", field="date_time"
            )
        return cls(Instant(local).to_date_time(), offset)

    def instant(self) -> Instant:
        return Instant(self._utc_seconds())

    def __str__(self) -> str:
        return f"{self.date_time}{self.offset}"

    @classmethod
    def parse(cls, text: str) -> "OffsetDateTime":
        """YYYY-MM-DDTHH:MM:SS+HH:MM"""
        check_length(text, 25, "offset_date_time")
        return cls(DateTime.parse(text[0:19]), TimeZoneOffset.parse(text[19:25]))
