"""
limited_datetime.core.arrays
----------------------------
numpy versions of the day-count engine in ``core.time``.

Same formulas, elementwise over int64 arrays, so the whole supported range
(about 3.6 million days counted from the era start) can be converted and
checked at once. ``walk_ordinal_dates`` is an independent oracle: it builds
the (year, day_of_year) sequence by concatenating one range per year and
never uses the cycle arithmetic.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .time import DAYS_PER_100_YEARS, DAYS_PER_400_YEARS, DAYS_PER_4_YEARS, DAYS_PER_YEAR


def _as_int64(a) -> np.ndarray:
    return np.asarray(a, dtype=np.int64)


def is_leap_year(years) -> np.ndarray:
    y = _as_int64(years)
    if (y < 0).any():
        raise ValueError("years must be non-negative")
    return (y % 400 == 0) | ((y % 100 != 0) & (y % 4 == 0))


def days_in_year(years) -> np.ndarray:
    return np.where(is_leap_year(years), 366, 365).astype(np.int64)


def days_from_ce_from_year(years) -> np.ndarray:
    y = _as_int64(years)
    if (y < 0).any():
        raise ValueError("years must be non-negative")
    return y * 365 + y // 4 - y // 100 + y // 400


def days_from_ce_from_ordinal_date(years, days_of_year) -> np.ndarray:
    y = _as_int64(years)
    if (y < 1).any():
        raise ValueError("years must be >= 1")
    return days_from_ce_from_year(y - 1) + _as_int64(days_of_year)


def ordinal_date_from_days_from_ce(days) -> Tuple[np.ndarray, np.ndarray]:
    d = _as_int64(days)
    if (d < 1).any():
        raise ValueError("days from CE must be >= 1")

    c400, r400 = np.divmod(d - 1, DAYS_PER_400_YEARS)
    c100, r100 = np.divmod(r400, DAYS_PER_100_YEARS)
    c4, r4 = np.divmod(r100, DAYS_PER_4_YEARS)
    c1, r1 = np.divmod(r4, DAYS_PER_YEAR)

    leap_day = (c100 == 4) | (c1 == 4)
    years = c400 * 400 + c100 * 100 + c4 * 4 + c1 + np.where(leap_day, 0, 1)
    days_of_year = np.where(leap_day, DAYS_PER_YEAR, r1) + 1
    return years, days_of_year


def walk_ordinal_dates(first_year: int, last_year: int) -> Tuple[np.ndarray, np.ndarray]:
    """Every (year, day_of_year) from first_year-001 through the end of last_year, in order."""
    if first_year < 1 or last_year < first_year:
        raise ValueError(f"bad year span {first_year}..{last_year}")
    years = np.arange(first_year, last_year + 1, dtype=np.int64)
    lengths = days_in_year(years)
    all_years = np.repeat(years, lengths)
    # position within each year: global index minus the index where that year starts
    starts = np.repeat(np.cumsum(lengths) - lengths, lengths)
    all_days = np.arange(all_years.size, dtype=np.int64) - starts + 1
    return all_years, all_days
