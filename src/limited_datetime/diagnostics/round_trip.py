from __future__ import annotations

import argparse
import logging
import random
from datetime import date, datetime, timedelta, timezone
from typing import List

import numpy as np

from limited_datetime import CalendarDate, Instant
from limited_datetime.core import arrays
from limited_datetime.core import time as cal

logger = logging.getLogger(__name__)


def exhaustive_test(first_year: int, last_year: int, *, max_failures: int) -> int:
    """
    Check the cycle arithmetic against a day-by-day walk for every day in
    first_year-01-01 .. last_year-12-31, in both directions.
    """
    years, days_of_year = arrays.walk_ordinal_dates(first_year, last_year)
    first = cal.days_from_ce_from_year(first_year - 1) + 1
    days = np.arange(first, first + years.size, dtype=np.int64)
    logger.debug("walked %d days from %d to %d", years.size, first_year, last_year)

    failures = 0
    got_years, got_days = arrays.ordinal_date_from_days_from_ce(days)
    bad = np.flatnonzero((got_years != years) | (got_days != days_of_year))
    for i in bad[:max_failures]:
        print(f"FAIL ordinal_date_from_days_from_ce({days[i]}) = "
              f"({got_years[i]}, {got_days[i]}), expected ({years[i]}, {days_of_year[i]})")
    failures += bad.size

    back = arrays.days_from_ce_from_ordinal_date(years, days_of_year)
    bad = np.flatnonzero(back != days)
    for i in bad[:max_failures]:
        print(f"FAIL days_from_ce_from_ordinal_date(({years[i]}, {days_of_year[i]})) = "
              f"{back[i]}, expected {days[i]}")
    failures += bad.size

    return failures


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def sampled_test(N: int, seed: int, *, max_failures: int) -> int:
    """Random dates and instants compared with the stdlib datetime."""
    random.seed(seed)
    failures = 0
    start, end = date(1970, 1, 1), date(9999, 12, 31)

    for _ in range(N):
        d0 = random_date(start, end)
        cd = CalendarDate.from_date(d0)
        od = cd.to_ordinal_date()
        problems: List[str] = []
        if od.day_of_year.value != d0.timetuple().tm_yday:
            problems.append(f"ordinal {od}")
        if CalendarDate.from_ordinal_date(od) != cd:
            problems.append(f"back {CalendarDate.from_ordinal_date(od)}")
        if str(cd) != d0.isoformat():
            problems.append(f"text {cd}")

        ts = random.randint(Instant.MIN, Instant.MAX)
        instant = Instant(ts)
        expected = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=ts)
        if str(instant) != expected.strftime("%Y-%m-%dT%H:%M:%SZ"):
            problems.append(f"instant {instant} vs {expected.isoformat()}")
        if Instant.parse(str(instant)) != instant:
            problems.append(f"instant round trip {instant}")

        if problems:
            failures += 1
            print("\nFAIL")
            print("date:", d0, "timestamp:", ts)
            for p in problems:
                print("  ", p)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip checks of the calendar conversion engine.")
    p.add_argument("--first-year", type=int, default=1, help="First year of the exhaustive walk.")
    p.add_argument("--last-year", type=int, default=9999, help="Last year of the exhaustive walk.")
    p.add_argument("--N", type=int, default=2000, help="Random samples compared with datetime.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop reporting after this many failures.")
    args = p.parse_args(argv)

    if args.last_year < args.first_year:
        raise SystemExit("--last-year must be >= --first-year")

    print(f"Exhaustive {args.first_year:04d}..{args.last_year:04d} ...")
    total_fail = exhaustive_test(args.first_year, args.last_year, max_failures=args.max_failures)
    print(f"Sampled N={args.N} ...")
    total_fail += sampled_test(args.N, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
