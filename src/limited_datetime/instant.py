"""
limited_datetime.instant
------------------------
Absolute time as whole seconds since 1970-01-01T00:00:00Z.

The value is a flat integer bounded to 9999-12-31T23:59:59Z; calendar
fields are only computed when formatting or parsing.
"""

from __future__ import annotations

import math
import time
from datetime import datetime, timedelta, timezone
from typing import Union

from .core import time as cal
from .core.bounded import BoundedInt
from .core.errors import ClockError, InvalidFormatError, OutOfRangeError
from .dates import CalendarDate
from .datetimes import DateTime
from .scalars import Days, Seconds
from .times import Time

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


class Instant(BoundedInt):
    MIN = 0
    MAX = 253_402_300_799  # 9999-12-31T23:59:59Z
    FIELD = "instant"

    @classmethod
    def now(cls) -> "Instant":
        """
        Current system time, truncated to the second.

        A host clock before 1970 or past 9999 is a misconfigured machine, not a
        domain error: ClockError is a RuntimeError and is not meant to be handled.
        """
        timestamp = math.floor(time.time())
        if not (cls.MIN <= timestamp <= cls.MAX):
            raise ClockError(f"system clock reads {timestamp}, outside 1970..9999")
        return cls(timestamp)

    @classmethod
    def from_seconds(cls, seconds: Seconds) -> "Instant":
        return cls(seconds.value)

    def as_seconds(self) -> Seconds:
        return Seconds(self.value)

    # ---------------------------------------------------------
    # Calendar view
    # ---------------------------------------------------------

    @classmethod
    def from_date_time(cls, date_time: DateTime) -> "Instant":
        days = date_time.date.days_from_unix_epoch()
        seconds = date_time.time.seconds_from_midnight()
        return cls(days.value * cal.SECONDS_PER_DAY + seconds.value)

    def to_date_time(self) -> DateTime:
        days, seconds = divmod(self.value, cal.SECONDS_PER_DAY)
        return DateTime(
            CalendarDate.from_days_from_unix_epoch(Days(days)),
            Time.from_seconds_from_midnight(Seconds(seconds)),
        )

    def __str__(self) -> str:
        return cal.date_time_string_from_seconds_from_unix_epoch(self.value) + "Z"

    @classmethod
    def parse(cls, text: str) -> "Instant":
        """YYYY-MM-DDTHH:MM:SSZ; the Z is required."""
        if not text.endswith("Z"):
            raise InvalidFormatError(f"instant must end with 'Z': {text!r}", field=cls.FIELD)
        return cls.from_date_time(DateTime.parse(text[:-1]))

    # ---------------------------------------------------------
    # stdlib interop
    # ---------------------------------------------------------

    def to_datetime(self) -> datetime:
        """Timezone-aware UTC datetime."""
        return _UNIX_EPOCH + timedelta(seconds=self.value)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        """Aware datetime -> Instant, dropping sub-second precision."""
        if dt.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return cls((dt - _UNIX_EPOCH) // _ONE_SECOND)

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def __add__(self, other: Union[Days, Seconds]) -> "Instant":
        if isinstance(other, Days):
            other = other.to_seconds()
        if not isinstance(other, Seconds):
            return NotImplemented
        total = self.value + other.value
        if total > self.MAX:
            raise OutOfRangeError(f"{self} + {other} seconds is past {Instant.max()}", field=self.FIELD)
        return Instant(total)
