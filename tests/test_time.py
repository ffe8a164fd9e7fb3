"""Tests for TimeOfDay and CalendarDate.

Run just these tests using `pytest tests/test_time.py`
"""

import datetime

import pytest

from gtfs_reader.errors import DateFormatError, InvalidFieldFormat, TimeFormatError
from gtfs_reader.time import CalendarDate, TimeOfDay, is_leap_year

time_str_cases = [
    # Test case format: (raw_time, expected_hh_mm_ss, expected_time_str)
    ("0:19:00", (0, 19, 0), "00:19:00"),
    ("6:00:00", (6, 0, 0), "06:00:00"),
    ("14:30:15", (14, 30, 15), "14:30:15"),
    ("28:41:30", (28, 41, 30), "28:41:30"),
    ("39:45:30", (39, 45, 30), "39:45:30"),
    ("12:60:60", (12, 60, 60), "12:60:60"),  # upper bound of 60 is accepted
]


@pytest.mark.parametrize(("raw_time", "expected_hh_mm_ss", "expected_time_str"), time_str_cases)
def test_time_from_str(raw_time, expected_hh_mm_ss, expected_time_str):
    time = TimeOfDay(raw_time)
    hh, mm, ss = expected_hh_mm_ss

    assert time.is_provided()
    assert time.hh_mm_ss == expected_hh_mm_ss
    assert time.total_seconds == hh * 3600 + mm * 60 + ss
    assert time.raw_time == raw_time
    assert time.time_str == expected_time_str


def test_time_from_integers():
    time = TimeOfDay.from_hh_mm_ss(14, 30, 0)
    assert time.hh_mm_ss == (14, 30, 0)
    assert time.raw_time == "14:30:00"
    assert time.total_seconds == 14 * 60 * 60 + 30 * 60

    time = TimeOfDay((3, 0, 0))
    assert time.raw_time == "03:00:00"
    assert time.total_seconds == 3 * 60 * 60
    assert time.is_provided()


invalid_time_cases = [
    "12/10/00",
    "12:100:00",
    "12:10:100",
    "1:2:3",
    "123:00:00",
    "ab:cd:ef",
    "12:61:00",
    "12:00:61",
    "1:2\u00b2:00",
    "+1:00:00",
]


@pytest.mark.parametrize("raw_time", invalid_time_cases)
def test_invalid_time(raw_time):
    with pytest.raises(TimeFormatError):
        TimeOfDay(raw_time)


def test_invalid_time_is_invalid_field_format():
    with pytest.raises(InvalidFieldFormat):
        TimeOfDay("12/10/00")
    with pytest.raises(TimeFormatError):
        TimeOfDay((1, -1, 0))


def test_time_not_provided():
    time = TimeOfDay("")
    assert not time.is_provided()
    assert time.total_seconds == 0
    assert time.time_str == ""
    assert time != TimeOfDay("0:00:00")


def test_reduce_to_24h():
    near_midnight = TimeOfDay("24:05:00")
    assert near_midnight.reduce_to_24h()
    assert near_midnight.raw_time == "00:05:00"
    assert near_midnight.total_seconds == 5 * 60

    morning = TimeOfDay("27:05:00")
    assert morning.reduce_to_24h()
    assert morning.raw_time == "03:05:00"

    evening = TimeOfDay("21:05:00")
    assert not evening.reduce_to_24h()
    assert evening.raw_time == "21:05:00"
    assert evening.hh_mm_ss == (21, 5, 0)


def test_time_equality_and_order():
    assert TimeOfDay("6:00:00") == TimeOfDay((6, 0, 0))
    assert TimeOfDay("6:00:00") < TimeOfDay("06:00:01")
    assert TimeOfDay("25:00:00") > TimeOfDay("23:59:59")
    assert sorted([TimeOfDay("8:00:00"), TimeOfDay("7:00:00")]) == [
        TimeOfDay("7:00:00"),
        TimeOfDay("8:00:00"),
    ]


def test_date_from_str():
    date = CalendarDate("20230903")
    assert date.yyyy_mm_dd == (2023, 9, 3)
    assert date.raw_date == "20230903"
    assert date.is_provided()

    assert CalendarDate("20161231").yyyy_mm_dd == (2016, 12, 31)
    assert CalendarDate("20200229").yyyy_mm_dd == (2020, 2, 29)


def test_date_from_integers():
    date = CalendarDate.from_yyyy_mm_dd(2022, 8, 16)
    assert date.yyyy_mm_dd == (2022, 8, 16)
    assert date.raw_date == "20220816"
    assert date.is_provided()
    assert date == CalendarDate("20220816")
    assert date.to_date() == datetime.date(2022, 8, 16)


def test_date_not_provided():
    date = CalendarDate("")
    assert not date.is_provided()
    with pytest.raises(DateFormatError):
        date.to_date()


invalid_date_cases = [
    "1999314",
    "20081414",
    "20170432",
    "20200230",
    "20210229",
    "19000229",
    "19980431",
    "19980631",
    "19980931",
    "19981131",
    "09991231",
    "2020-1-1",
    "2020\u00b2101",
    "\u0662\u0660\u0662\u06600101",
]


@pytest.mark.parametrize("raw_date", invalid_date_cases)
def test_invalid_date(raw_date):
    with pytest.raises(DateFormatError):
        CalendarDate(raw_date)


def test_leap_years():
    assert is_leap_year(2000)
    assert is_leap_year(2020)
    assert not is_leap_year(1900)
    assert not is_leap_year(2021)
    assert CalendarDate("20000229").is_provided()


def test_date_order():
    assert CalendarDate("20070604") < CalendarDate("20080101")
    assert CalendarDate((2010, 12, 31)) > CalendarDate((2007, 1, 1))
