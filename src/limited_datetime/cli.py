from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from .core.errors import LimitedDateTimeError

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_date(argv: list[str]) -> int:
    from limited_datetime import CalendarDate

    p = argparse.ArgumentParser(prog="limited-datetime date", description="Calendar date -> ordinal date and day counts")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = CalendarDate.parse(args.date)
    logger.debug("parsed %r as %r", args.date, d)
    print(f"date             = {d}")
    print(f"ordinal date     = {d.to_ordinal_date()}")
    print(f"leap year        = {d.year.is_leap_year()}")
    print(f"days in month    = {d.year_month().days()}")
    print(f"days from epoch  = {d.days_from_unix_epoch()}")
    print(f"previous day     = {d.pred() or '-'}")
    print(f"next day         = {d.succ() or '-'}")
    return 0


def cmd_ordinal(argv: list[str]) -> int:
    from limited_datetime import OrdinalDate

    p = argparse.ArgumentParser(prog="limited-datetime ordinal", description="Ordinal date -> calendar date")
    p.add_argument("ordinal_date", help="YYYY-DDD")
    args = p.parse_args(argv)

    od = OrdinalDate.parse(args.ordinal_date)
    print(od.to_calendar_date())
    return 0


def cmd_instant(argv: list[str]) -> int:
    from limited_datetime import Instant

    p = argparse.ArgumentParser(prog="limited-datetime instant", description="Instant text -> Unix timestamp")
    p.add_argument("instant", nargs="?", help="YYYY-MM-DDTHH:MM:SSZ")
    p.add_argument("--now", action="store_true", help="use the system clock")
    args = p.parse_args(argv)

    if args.now == (args.instant is not None):
        raise SystemExit("give exactly one of INSTANT or --now")
    instant = Instant.now() if args.now else Instant.parse(args.instant)
    print(f"{instant}  {int(instant)}")
    return 0


def cmd_timestamp(argv: list[str]) -> int:
    from limited_datetime import Instant

    p = argparse.ArgumentParser(prog="limited-datetime timestamp", description="Unix timestamp -> instant text")
    p.add_argument("seconds", type=int, help="seconds since 1970-01-01T00:00:00Z")
    args = p.parse_args(argv)

    print(Instant(args.seconds))
    return 0


def cmd_add(argv: list[str]) -> int:
    from limited_datetime import Days, Instant, Seconds

    p = argparse.ArgumentParser(prog="limited-datetime add", description="Add days and/or seconds to an instant")
    p.add_argument("instant", help="YYYY-MM-DDTHH:MM:SSZ")
    p.add_argument("--days", type=int, default=0)
    p.add_argument("--seconds", type=int, default=0)
    args = p.parse_args(argv)

    instant = Instant.parse(args.instant)
    instant = instant + Days(args.days) + Seconds(args.seconds)
    print(instant)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `limited-datetime YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["date"] + argv

    p = argparse.ArgumentParser(prog="limited-datetime", description="Bounded calendar/clock toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("date", help="Calendar date -> ordinal date and day counts")
    sub.add_parser("ordinal", help="Ordinal date -> calendar date")
    sub.add_parser("instant", help="Instant text -> Unix timestamp")
    sub.add_parser("timestamp", help="Unix timestamp -> instant text")
    sub.add_parser("add", help="Add days and/or seconds to an instant")

    sub.add_parser("pretty-month", help="Print a month grid with days of year")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "date": cmd_date,
        "ordinal": cmd_ordinal,
        "instant": cmd_instant,
        "timestamp": cmd_timestamp,
        "add": cmd_add,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "pretty-month":
            return _run_module_main("limited_datetime.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "limited_datetime.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except LimitedDateTimeError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        raise SystemExit(f"error: {e}") from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
