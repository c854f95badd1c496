from __future__ import annotations

import argparse

from limited_datetime import CalendarDate, Instant, Month, Year, YearMonth


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_calendar(year_month: YearMonth) -> None:
    """Day of month on top, day of year below it."""
    first = CalendarDate.first_date_of_month(year_month)
    last = CalendarDate.last_date_of_month(year_month)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.to_date().weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))

    d = first
    while d is not None and d <= last:
        wk.append(cell(f"{d.day_of_month.value:2d}", str(d.to_ordinal_date().day_of_year)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d = d.succ()
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    leap_tag = " (leap year)" if year_month.year.is_leap_year() else ""
    title = f"{year_month}  {year_month.days()} days{leap_tag}   ({first} .. {last})"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid with the day of year under each date."
    )
    p.add_argument("--year", type=int, help="Year 1970..9999 (default: current UTC year)")
    p.add_argument("--month", type=int, help="Month 1..12 (default: current UTC month)")
    args = p.parse_args(argv)

    if args.year is None or args.month is None:
        today = Instant.now().to_date_time().date
    year = Year(args.year) if args.year is not None else today.year
    month = Month(args.month) if args.month is not None else today.month
    month_calendar(YearMonth(year, month))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
