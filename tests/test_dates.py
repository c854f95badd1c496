# tests/test_dates.py

import pytest
import random
from datetime import date, timedelta

from limited_datetime import (
    CalendarDate,
    Date,
    DayOfMonth,
    DayOfYear,
    Days,
    InvalidDateError,
    InvalidDayOfYearError,
    InvalidDigitError,
    InvalidFormatError,
    InvalidLengthError,
    Month,
    OrdinalDate,
    OutOfRangeError,
    Year,
    YearMonth,
)


def ymd(y, m, d):
    return CalendarDate.from_ymd(Year(y), Month(m), DayOfMonth(d))


# ============================================================
# YearMonth
# ============================================================

def test_year_month_days():
    assert YearMonth.parse("2021-02").days() == Days(28)
    assert YearMonth.parse("2020-02").days() == Days(29)
    assert YearMonth.parse("2100-02").days() == Days(28)
    assert YearMonth.parse("2021-04").last_day_of_month() == DayOfMonth(30)
    assert YearMonth.parse("2021-04").first_day_of_month() == DayOfMonth(1)


def test_year_month_navigation():
    assert YearMonth.parse("2021-01").succ() == YearMonth.parse("2021-02")
    assert YearMonth.parse("2021-12").succ() == YearMonth.parse("2022-01")
    assert YearMonth.parse("2022-01").pred() == YearMonth.parse("2021-12")
    assert YearMonth.parse("1970-01").pred() is None
    assert YearMonth.parse("9999-12").succ() is None
    assert YearMonth.first_year_month_of_year(Year(2021)) == YearMonth(Year(2021), Month(1))
    assert YearMonth.last_year_month_of_year(Year(2021)) == YearMonth(Year(2021), Month(12))


def test_year_month_text():
    assert str(YearMonth(Year(2021), Month(2))) == "2021-02"
    with pytest.raises(InvalidLengthError):
        YearMonth.parse("2021-2")
    with pytest.raises(InvalidFormatError):
        YearMonth.parse("2021/02")
    with pytest.raises(OutOfRangeError):
        YearMonth.parse("2021-13")


# ============================================================
# CalendarDate
# ============================================================

def test_from_ymd_checks_month_length():
    with pytest.raises(InvalidDateError):
        ymd(2021, 2, 29)
    assert str(ymd(2021, 2, 28)) == "2021-02-28"
    assert str(ymd(2020, 2, 29)) == "2020-02-29"
    with pytest.raises(InvalidDateError):
        ymd(2021, 4, 31)
    with pytest.raises(InvalidDateError):
        CalendarDate(Year(2100), Month(2), DayOfMonth(29))


def test_parse():
    d = CalendarDate.parse("2021-02-03")
    assert (d.year, d.month, d.day_of_month) == (Year(2021), Month(2), DayOfMonth(3))
    assert Date is CalendarDate


@pytest.mark.parametrize("text, err", [
    ("2021-02-3", InvalidLengthError),
    ("2021-02-003", InvalidLengthError),
    ("2021/02-03", InvalidFormatError),
    ("2021-02/03", InvalidFormatError),
    ("2021-0a-03", InvalidDigitError),
    ("1969-12-31", OutOfRangeError),
    ("2021-02-32", OutOfRangeError),
    ("2021-02-29", InvalidDateError),
    ("2021-02-00", OutOfRangeError),
])
def test_parse_errors(text, err):
    with pytest.raises(err):
        CalendarDate.parse(text)


def test_succ_scenarios():
    assert str(CalendarDate.parse("2021-02-03").succ()) == "2021-02-04"
    assert str(CalendarDate.parse("2021-01-31").succ()) == "2021-02-01"
    assert str(CalendarDate.parse("2021-12-31").succ()) == "2022-01-01"
    assert str(CalendarDate.parse("2020-02-28").succ()) == "2020-02-29"
    assert str(CalendarDate.parse("2021-02-28").succ()) == "2021-03-01"
    assert CalendarDate.parse("9999-12-31").succ() is None


def test_pred_scenarios():
    assert str(CalendarDate.parse("2021-02-04").pred()) == "2021-02-03"
    assert str(CalendarDate.parse("2021-03-01").pred()) == "2021-02-28"
    assert str(CalendarDate.parse("2020-03-01").pred()) == "2020-02-29"
    assert str(CalendarDate.parse("2022-01-01").pred()) == "2021-12-31"
    assert CalendarDate.parse("1970-01-01").pred() is None


def test_first_last_dates():
    ym = YearMonth.parse("2020-02")
    assert str(CalendarDate.first_date_of_month(ym)) == "2020-02-01"
    assert str(CalendarDate.last_date_of_month(ym)) == "2020-02-29"
    assert str(CalendarDate.first_date_of_year(Year(2021))) == "2021-01-01"
    assert str(CalendarDate.last_date_of_year(Year(2021))) == "2021-12-31"
    assert str(CalendarDate.min()) == "1970-01-01"
    assert str(CalendarDate.max()) == "9999-12-31"


def test_ordinal_scenarios():
    assert str(CalendarDate.parse("2021-12-31").to_ordinal_date()) == "2021-365"
    assert CalendarDate.parse("2000-12-31").to_ordinal_date().day_of_year == DayOfYear(366)
    assert str(OrdinalDate.from_calendar_date(CalendarDate.parse("2021-03-01"))) == "2021-060"
    assert str(OrdinalDate.parse("2000-060").to_calendar_date()) == "2000-02-29"


def test_walk_matches_datetime():
    """Successive succ() through leap and century years agrees with date + 1 day."""
    for start in (date(1970, 1, 1), date(1999, 12, 1), date(2099, 12, 1), date(9998, 1, 1)):
        d = CalendarDate.from_date(start)
        ref = start
        for _ in range(800):
            nxt = d.succ()
            if nxt is None:
                assert ref == date(9999, 12, 31)
                break
            ref = ref + timedelta(days=1)
            assert nxt.to_date() == ref
            assert nxt.pred() == d
            d = nxt


def test_ordinal_roundtrip_random():
    random.seed(42)
    lo, hi = date(1970, 1, 1).toordinal(), date(9999, 12, 31).toordinal()
    for _ in range(5000):
        ref = date.fromordinal(random.randint(lo, hi))
        d = CalendarDate.from_date(ref)
        od = OrdinalDate.from_calendar_date(d)
        assert od.day_of_year.value == ref.timetuple().tm_yday
        assert CalendarDate.from_ordinal_date(od) == d
        assert CalendarDate.parse(str(d)) == d
        assert d.days_from_unix_epoch() == Days((ref - date(1970, 1, 1)).days)
        assert CalendarDate.from_days_from_unix_epoch(d.days_from_unix_epoch()) == d


def test_days_from_unix_epoch_bounds():
    assert CalendarDate.min().days_from_unix_epoch() == Days(0)
    assert CalendarDate.max().days_from_unix_epoch() == Days.max()


def test_year_month_accessor_and_ordering():
    d = CalendarDate.parse("2021-02-03")
    assert d.year_month() == YearMonth.parse("2021-02")
    assert CalendarDate.parse("2021-02-03") < CalendarDate.parse("2021-10-01")
    assert CalendarDate.parse("2020-12-31") < CalendarDate.parse("2021-01-01")


def test_from_date_out_of_range():
    with pytest.raises(OutOfRangeError):
        CalendarDate.from_date(date(1969, 12, 31))


# ============================================================
# OrdinalDate
# ============================================================

def test_ordinal_date_checks_year_length():
    assert str(OrdinalDate(Year(2020), DayOfYear(366))) == "2020-366"
    with pytest.raises(InvalidDayOfYearError):
        OrdinalDate(Year(2021), DayOfYear(366))
    with pytest.raises(InvalidDateError):
        OrdinalDate.parse("2100-366")


def test_ordinal_date_navigation():
    assert str(OrdinalDate.parse("2021-365").succ()) == "2022-001"
    assert str(OrdinalDate.parse("2021-001").pred()) == "2020-366"
    assert str(OrdinalDate.parse("2021-100").succ()) == "2021-101"
    assert OrdinalDate.parse("1970-001").pred() is None
    assert OrdinalDate.parse("9999-365").succ() is None
    assert OrdinalDate.first_date_of_year(Year(2021)) == OrdinalDate.parse("2021-001")
    assert OrdinalDate.last_date_of_year(Year(2024)) == OrdinalDate.parse("2024-366")


@pytest.mark.parametrize("text, err", [
    ("2021-36", InvalidLengthError),
    ("2021.365", InvalidFormatError),
    ("2021-3x5", InvalidDigitError),
    ("2021-000", OutOfRangeError),
    ("2021-367", OutOfRangeError),
])
def test_ordinal_date_parse_errors(text, err):
    with pytest.raises(err):
        OrdinalDate.parse(text)


def test_every_day_of_a_leap_year_roundtrips():
    od = OrdinalDate.first_date_of_year(Year(2000))
    n = 0
    while od is not None and od.year == Year(2000):
        cd = od.to_calendar_date()
        assert cd.to_ordinal_date() == od
        n += 1
        od = od.succ()
    assert n == 366
