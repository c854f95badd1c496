# tests/test_times.py

import pytest
import random

from limited_datetime import (
    CalendarDate,
    DateTime,
    Hour,
    InvalidFormatError,
    InvalidLengthError,
    Minute,
    OutOfRangeError,
    Second,
    Seconds,
    Time,
)


def test_time_text():
    t = Time.from_hms(Hour(4), Minute(5), Second(6))
    assert str(t) == "04:05:06"
    assert Time.parse("04:05:06") == t
    assert str(Time.min()) == "00:00:00"
    assert str(Time.max()) == "23:59:59"


@pytest.mark.parametrize("text, err", [
    ("4:05:06", InvalidLengthError),
    ("04:05:06Z", InvalidLengthError),
    ("04-05:06", InvalidFormatError),
    ("04:05-06", InvalidFormatError),
    ("24:00:00", OutOfRangeError),
    ("23:60:00", OutOfRangeError),
    ("23:59:60", OutOfRangeError),
])
def test_time_parse_errors(text, err):
    with pytest.raises(err):
        Time.parse(text)


def test_seconds_from_midnight():
    assert Time.min().seconds_from_midnight() == Seconds(0)
    assert Time.max().seconds_from_midnight() == Seconds(86_399)
    assert Time.from_seconds_from_midnight(Seconds(3661)) == Time.parse("01:01:01")
    with pytest.raises(OutOfRangeError):
        Time.from_seconds_from_midnight(Seconds(86_400))


def test_seconds_from_midnight_roundtrip():
    random.seed(42)
    for _ in range(2000):
        s = Seconds(random.randint(0, 86_399))
        assert Time.from_seconds_from_midnight(s).seconds_from_midnight() == s


def test_time_ordering():
    assert Time.parse("00:00:59") < Time.parse("00:01:00")
    assert Time.parse("09:59:59") < Time.parse("10:00:00")


# ============================================================
# DateTime
# ============================================================

def test_date_time_text():
    dt = DateTime.parse("2021-02-03T04:05:06")
    assert dt.date == CalendarDate.parse("2021-02-03")
    assert dt.time == Time.parse("04:05:06")
    assert str(dt) == "2021-02-03T04:05:06"
    assert DateTime.from_date_time(dt.date, dt.time) == dt
    assert str(DateTime.min()) == "1970-01-01T00:00:00"
    assert str(DateTime.max()) == "9999-12-31T23:59:59"


@pytest.mark.parametrize("text, err", [
    ("2021-02-03T04:05", InvalidLengthError),
    ("2021-02-03T04:05:06Z", InvalidLengthError),
    ("2021-02-03 04:05:06", InvalidFormatError),
    ("2021-02-03T04:05:60", OutOfRangeError),
])
def test_date_time_parse_errors(text, err):
    with pytest.raises(err):
        DateTime.parse(text)


def test_date_time_ordering():
    assert DateTime.parse("2021-02-03T23:59:59") < DateTime.parse("2021-02-04T00:00:00")
    assert DateTime.min() < DateTime.max()
