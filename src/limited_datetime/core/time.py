"""
limited_datetime.core.time
--------------------------
Calendar conversion engine (proleptic Gregorian).

Plain-int functions relating four representations of a day:

  (year, month, day)  <->  (year, day_of_year)  <->  days_from_ce

and a time of day to seconds from midnight. ``days_from_ce`` is a 1-based
count: 0001-01-01 is day 1, 1970-01-01 is day 719_163.

Nothing here knows about the value types; callers pass ints and get ints
back. Violated preconditions raise ValueError.
"""

from __future__ import annotations

import re
from typing import Tuple

from .errors import InvalidFormatError

DAYS_PER_YEAR = 365
DAYS_PER_4_YEARS = DAYS_PER_YEAR * 4 + 1        # 1_461
DAYS_PER_100_YEARS = DAYS_PER_4_YEARS * 25 - 1  # 36_524
DAYS_PER_400_YEARS = DAYS_PER_100_YEARS * 4 + 1  # 146_097

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

# 1970-01-01 as days_from_ce, and 1970-01-01T00:00:00 as seconds from the era start
UNIX_EPOCH_DAYS_FROM_CE = 719_163
UNIX_EPOCH_SECONDS_FROM_CE = UNIX_EPOCH_DAYS_FROM_CE * SECONDS_PER_DAY  # 62_135_683_200

DAYS_IN_MONTH_COMMON = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_IN_MONTH_LEAP = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Year-level helpers
# ============================================================

def is_leap_year(year: int) -> bool:
    if year < 0:
        raise ValueError(f"year must be non-negative, got {year}")
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def month_days_table(year: int) -> Tuple[int, ...]:
    return DAYS_IN_MONTH_LEAP if is_leap_year(year) else DAYS_IN_MONTH_COMMON


def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    return month_days_table(year)[month - 1]


# ============================================================
# Ordinal date <-> days from CE
# ============================================================

def days_from_ce_from_year(y: int) -> int:
    """
    Days from the era start through the end of year ``y``.

      y*365 + y/4 - y/100 + y/400

    so 0 for y = 0, 365 for y = 1 and 719_162 for y = 1969.
    """
    if y < 0:
        raise ValueError(f"year must be non-negative, got {y}")
    return y * 365 + y // 4 - y // 100 + y // 400


def days_from_ce_from_ordinal_date(ordinal_date: Tuple[int, int]) -> int:
    year, day_of_year = ordinal_date
    if year < 1:
        raise ValueError(f"year must be >= 1, got {year}")
    return days_from_ce_from_year(year - 1) + day_of_year


def ordinal_date_from_days_from_ce(d: int) -> Tuple[int, int]:
    """
    Inverse of days_from_ce_from_ordinal_date.

    d - 1 is split into whole 400-, 100-, 4- and 1-year cycles. The 100-year
    and 1-year quotients reach 4 only on the final day of a leap cycle (the
    366th day of its last year); that day belongs to the previous year.
    """
    if d < 1:
        raise ValueError(f"days from CE must be >= 1, got {d}")

    c400, r400 = divmod(d - 1, DAYS_PER_400_YEARS)
    c100, r100 = divmod(r400, DAYS_PER_100_YEARS)
    c4, r4 = divmod(r100, DAYS_PER_4_YEARS)
    c1, r1 = divmod(r4, DAYS_PER_YEAR)

    leap_day = c100 == 4 or c1 == 4
    year = c400 * 400 + c100 * 100 + c4 * 4 + c1 + (0 if leap_day else 1)
    day_of_year = (DAYS_PER_YEAR if leap_day else r1) + 1
    return year, day_of_year


# ============================================================
# Ordinal date <-> calendar date
# ============================================================

def date_from_ordinal_date(ordinal_date: Tuple[int, int]) -> Tuple[int, int, int]:
    year, day_of_year = ordinal_date
    if not (1 <= day_of_year <= days_in_year(year)):
        raise ValueError(f"day of year {day_of_year} out of range for {year}")
    days = 0
    for month, n in enumerate(month_days_table(year), start=1):
        if day_of_year <= days + n:
            return year, month, day_of_year - days
        days += n
    raise AssertionError("unreachable")


def ordinal_date_from_date(date: Tuple[int, int, int]) -> Tuple[int, int]:
    year, month, day = date
    table = month_days_table(year)
    if not (1 <= month <= 12) or not (1 <= day <= table[month - 1]):
        raise ValueError(f"invalid date {year}-{month}-{day}")
    return year, sum(table[: month - 1]) + day


def days_from_unix_epoch_from_date(date: Tuple[int, int, int]) -> int:
    return days_from_ce_from_ordinal_date(ordinal_date_from_date(date)) - UNIX_EPOCH_DAYS_FROM_CE


def date_from_days_from_unix_epoch(days: int) -> Tuple[int, int, int]:
    return date_from_ordinal_date(ordinal_date_from_days_from_ce(days + UNIX_EPOCH_DAYS_FROM_CE))


# ============================================================
# Time of day
# ============================================================

def seconds_from_midnight_from_time(time: Tuple[int, int, int]) -> int:
    h, m, s = time
    if not (0 <= h < 24 and 0 <= m < 60 and 0 <= s < 60):
        raise ValueError(f"invalid time {h}:{m}:{s}")
    return h * SECONDS_PER_HOUR + m * SECONDS_PER_MINUTE + s


def time_from_seconds_from_midnight(seconds: int) -> Tuple[int, int, int]:
    if not (0 <= seconds < SECONDS_PER_DAY):
        raise ValueError(f"seconds from midnight must be in [0, 86400), got {seconds}")
    minutes, s = divmod(seconds, 60)
    hours, m = divmod(minutes, 60)
    _, h = divmod(hours, 24)
    return h, m, s


# ============================================================
# Unix timestamp <-> YYYY-MM-DDTHH:MM:SS
# ============================================================

_DATE_TIME_RE = re.compile(
    r"(\+[0-9]{5,}|[0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
)


def format_year(year: int) -> str:
    """4-digit year, or ``+YYYYY`` beyond 9999."""
    return f"{year:04d}" if year <= 9999 else f"+{year}"


def date_time_string_from_seconds_from_unix_epoch(timestamp: int) -> str:
    """
    Unix timestamp -> ``YYYY-MM-DDTHH:MM:SS``.

    Accepts any timestamp from 0001-01-01T00:00:00 upwards; -1 formats as
    1969-12-31T23:59:59 and the first second of year 10000 as
    +10000-01-01T00:00:00.
    """
    days, seconds = divmod(timestamp + UNIX_EPOCH_SECONDS_FROM_CE, SECONDS_PER_DAY)
    if days < 1:
        raise ValueError(f"timestamp {timestamp} is before 0001-01-01")
    y, m, d = date_from_ordinal_date(ordinal_date_from_days_from_ce(days))
    h, mi, s = time_from_seconds_from_midnight(seconds)
    return f"{format_year(y)}-{m:02d}-{d:02d}T{h:02d}:{mi:02d}:{s:02d}"


def seconds_from_unix_epoch_from_date_time_string(text: str) -> int:
    """Inverse of date_time_string_from_seconds_from_unix_epoch."""
    match = _DATE_TIME_RE.fullmatch(text)
    if match is None:
        raise InvalidFormatError(f"not a date-time: {text!r}")
    ys, ms, ds, hs, mis, ss = match.groups()
    y = int(ys)
    if ys.startswith("+") and y <= 9999:
        raise InvalidFormatError(f"signed year must exceed 9999: {text!r}")
    try:
        days = days_from_ce_from_ordinal_date(ordinal_date_from_date((y, int(ms), int(ds))))
        seconds = seconds_from_midnight_from_time((int(hs), int(mis), int(ss)))
    except ValueError as e:
        raise InvalidFormatError(f"invalid date-time {text!r}: {e}") from e
    return (days - UNIX_EPOCH_DAYS_FROM_CE) * SECONDS_PER_DAY + seconds
