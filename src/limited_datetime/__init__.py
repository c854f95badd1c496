"""limited_datetime public API.

Range-checked calendar and clock values for 1970-01-01 .. 9999-12-31 (UTC),
and the proleptic Gregorian conversions between them.
"""

from .core.errors import (
    LimitedDateTimeError,
    ParseError,
    InvalidLengthError,
    InvalidFormatError,
    InvalidDigitError,
    OutOfRangeError,
    InvalidDateError,
    InvalidDayOfYearError,
    ClockError,
)
from .scalars import (
    Year,
    Month,
    DayOfMonth,
    DayOfYear,
    Hour,
    Minute,
    Second,
    Days,
    Seconds,
)
from .dates import YearMonth, CalendarDate, Date, OrdinalDate
from .times import Time
from .datetimes import DateTime
from .instant import Instant
from .offset import TimeZoneOffset, OffsetDateTime

__all__ = [
    "LimitedDateTimeError",
    "ParseError",
    "InvalidLengthError",
    "InvalidFormatError",
    "InvalidDigitError",
    "OutOfRangeError",
    "InvalidDateError",
    "InvalidDayOfYearError",
    "ClockError",
    "Year",
    "Month",
    "DayOfMonth",
    "DayOfYear",
    "Hour",
    "Minute",
    "Second",
    "Days",
    "Seconds",
    "YearMonth",
    "CalendarDate",
    "Date",
    "OrdinalDate",
    "Time",
    "DateTime",
    "Instant",
    "TimeZoneOffset",
    "OffsetDateTime",
]
