"""Module for GTFS time-of-day and calendar date values."""

from __future__ import annotations

from datetime import date
from functools import total_ordering
from typing import Any, Union

from .errors import DateFormatError, TimeFormatError
from .params import MAX_MINUTES_SECONDS, MAX_YEAR, MIN_YEAR
from .utils.utils import is_ascii_digits

TimeType = Union[str, tuple[int, int, int], list[int]]
DateType = Union[str, tuple[int, int, int], list[int]]

THIRTY_DAY_MONTHS = (4, 6, 9, 11)


def _zero_pad(value: int) -> str:
    return f"{value:02d}"


def _digits_to_int(text: str, what: str, error: type[ValueError]) -> int:
    if not is_ascii_digits(text):
        msg = f"{what} is not a number: '{text}'"
        raise error(msg)
    return int(text)


def is_leap_year(year: int) -> bool:
    """True if year is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@total_ordering
class TimeOfDay:
    """Time within a service day in the [H]H:MM:SS format.

    Time within a service day can be above 24:00:00, e.g. 28:41:30 for trips that finish after
    midnight. An empty string is a valid value which is "not provided".

    Attributes:
        raw_time (str): canonical text. The text as it was read if constructed from a string,
            otherwise zero-padded HH:MM:SS.
        time_str (str): zero-padded HH:MM:SS text.
        total_seconds (int): seconds since the start of the service day.
        hh_mm_ss (tuple[int, int, int]): hours, minutes and seconds.

    """

    def __init__(self, value: TimeType = ""):
        """Initializes a TimeOfDay object.

        Args:
            value: a string in [H]H:MM:SS format, an empty string for a time which is not
                provided, or a tuple of (hours, minutes, seconds).

        Raises:
            TimeFormatError: If the value is not a valid time.
        """
        self._provided = False
        self._hh = 0
        self._mm = 0
        self._ss = 0
        self._total_seconds = 0
        self._raw_time = ""

        if isinstance(value, str):
            self._init_from_str(value)
        elif isinstance(value, (tuple, list)) and len(value) == 3:  # noqa: PLR2004
            self._init_from_hh_mm_ss(*value)
        else:
            msg = f"time must be a [H]H:MM:SS string or (hours, minutes, seconds). Got: {value}"
            raise TimeFormatError(msg)

    @classmethod
    def from_hh_mm_ss(cls, hours: int, minutes: int, seconds: int) -> TimeOfDay:
        """Create a provided TimeOfDay from its components."""
        return cls((hours, minutes, seconds))

    def _init_from_str(self, raw_time: str):
        self._raw_time = raw_time
        if not raw_time:
            return

        length = len(raw_time)
        if length not in (7, 8) or (raw_time[length - 3] != ":" and raw_time[length - 6] != ":"):
            msg = f"Time is not in [H]H:MM:SS format: '{raw_time}'"
            raise TimeFormatError(msg)

        self._hh = _digits_to_int(raw_time[: length - 6], "Time hours", TimeFormatError)
        self._mm = _digits_to_int(raw_time[length - 5 : length - 3], "Time minutes", TimeFormatError)
        self._ss = _digits_to_int(raw_time[length - 2 :], "Time seconds", TimeFormatError)
        self._check_minutes_seconds()

        self._set_total_seconds()
        self._provided = True

    def _init_from_hh_mm_ss(self, hours: int, minutes: int, seconds: int):
        if min(hours, minutes, seconds) < 0:
            msg = f"Time components can't be negative: {hours}, {minutes}, {seconds}"
            raise TimeFormatError(msg)
        self._hh, self._mm, self._ss = int(hours), int(minutes), int(seconds)
        self._check_minutes_seconds()

        self._set_total_seconds()
        self._set_raw_time()
        self._provided = True

    def _check_minutes_seconds(self):
        # upper bound is inclusive, so 60 minutes or 60 seconds are accepted
        if self._mm > MAX_MINUTES_SECONDS or self._ss > MAX_MINUTES_SECONDS:
            msg = f"Time minutes/seconds wrong value: {self._mm} minutes, {self._ss} seconds"
            raise TimeFormatError(msg)

    def _set_total_seconds(self):
        self._total_seconds = self._hh * 3600 + self._mm * 60 + self._ss

    def _set_raw_time(self):
        self._raw_time = self.time_str

    def is_provided(self) -> bool:
        """False if the time was read from an empty field."""
        return self._provided

    @property
    def total_seconds(self) -> int:
        """Seconds since the start of the service day."""
        return self._total_seconds

    @property
    def hh_mm_ss(self) -> tuple[int, int, int]:
        """Hours, minutes and seconds."""
        return (self._hh, self._mm, self._ss)

    @property
    def raw_time(self) -> str:
        """Canonical text of the time."""
        return self._raw_time

    @property
    def time_str(self) -> str:
        """Zero-padded HH:MM:SS text or an empty string if not provided."""
        if not self._provided:
            return ""
        return f"{_zero_pad(self._hh)}:{_zero_pad(self._mm)}:{_zero_pad(self._ss)}"

    def reduce_to_24h(self) -> bool:
        """Reduce hours modulo 24 in place.

        Returns:
            bool: True if the time was changed, False if hours were already below 24.
        """
        if self._hh < 24:  # noqa: PLR2004
            return False

        self._hh = self._hh % 24
        self._set_total_seconds()
        self._set_raw_time()
        return True

    def __eq__(self, other: Any) -> bool:
        """Equal if same hours, minutes, seconds and presence."""
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.hh_mm_ss == other.hh_mm_ss and self.is_provided() == other.is_provided()

    def __lt__(self, other: Any) -> bool:
        """Ordered by seconds since the start of the service day."""
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.total_seconds < other.total_seconds

    def __hash__(self) -> int:
        """Hash value of the TimeOfDay object."""
        return hash((self.hh_mm_ss, self._provided))

    def __str__(self) -> str:
        """Canonical text of the time."""
        return self._raw_time

    def __repr__(self) -> str:
        """Representation of the TimeOfDay object."""
        return f"TimeOfDay('{self._raw_time}')"


@total_ordering
class CalendarDate:
    """Service day in the YYYYMMDD format.

    An empty string is a valid value which is "not provided".

    Attributes:
        raw_date (str): canonical YYYYMMDD text or an empty string.
        yyyy_mm_dd (tuple[int, int, int]): year, month and day.
    """

    def __init__(self, value: DateType = ""):
        """Initializes a CalendarDate object.

        Args:
            value: a string in YYYYMMDD format, an empty string for a date which is not provided
                or a tuple of (year, month, day).

        Raises:
            DateFormatError: If the value is not a valid Gregorian date.
        """
        self._provided = False
        self._yyyy = 0
        self._mm = 0
        self._dd = 0
        self._raw_date = ""

        if isinstance(value, str):
            self._init_from_str(value)
        elif isinstance(value, (tuple, list)) and len(value) == 3:  # noqa: PLR2004
            self._init_from_yyyy_mm_dd(*value)
        else:
            msg = f"date must be a YYYYMMDD string or (year, month, day). Got: {value}"
            raise DateFormatError(msg)

    @classmethod
    def from_yyyy_mm_dd(cls, year: int, month: int, day: int) -> CalendarDate:
        """Create a provided CalendarDate from its components."""
        return cls((year, month, day))

    def _init_from_str(self, raw_date: str):
        self._raw_date = raw_date
        if not raw_date:
            return

        if len(raw_date) != 8:  # noqa: PLR2004
            msg = f"Date is not in YYYYMMDD format: '{raw_date}'"
            raise DateFormatError(msg)

        self._yyyy = _digits_to_int(raw_date[0:4], "Date year", DateFormatError)
        self._mm = _digits_to_int(raw_date[4:6], "Date month", DateFormatError)
        self._dd = _digits_to_int(raw_date[6:8], "Date day", DateFormatError)
        self._check_valid()

        self._provided = True

    def _init_from_yyyy_mm_dd(self, year: int, month: int, day: int):
        self._yyyy, self._mm, self._dd = int(year), int(month), int(day)
        self._check_valid()

        self._raw_date = f"{self._yyyy}{_zero_pad(self._mm)}{_zero_pad(self._dd)}"
        self._provided = True

    def _check_valid(self):
        yyyy, mm, dd = self._yyyy, self._mm, self._dd
        if not (MIN_YEAR <= yyyy <= MAX_YEAR) or not (1 <= mm <= 12) or not (1 <= dd <= 31):  # noqa: PLR2004
            msg = f"Date check failed: out of range. {yyyy} year, {mm} month, {dd} day"
            raise DateFormatError(msg)

        if mm == 2 and dd > 28:  # noqa: PLR2004
            if not is_leap_year(yyyy):
                msg = f"Invalid days count in February of non-leap year: {dd} days in {yyyy}"
                raise DateFormatError(msg)
            if dd > 29:  # noqa: PLR2004
                msg = f"Invalid days count in February of leap year: {dd} days in {yyyy}"
                raise DateFormatError(msg)

        if dd > 30 and mm in THIRTY_DAY_MONTHS:  # noqa: PLR2004
            msg = f"Invalid days count in month: {dd} days in month {mm}"
            raise DateFormatError(msg)

    def is_provided(self) -> bool:
        """False if the date was read from an empty field."""
        return self._provided

    @property
    def yyyy_mm_dd(self) -> tuple[int, int, int]:
        """Year, month and day."""
        return (self._yyyy, self._mm, self._dd)

    @property
    def raw_date(self) -> str:
        """Canonical YYYYMMDD text."""
        return self._raw_date

    def to_date(self) -> date:
        """The date as a datetime.date.

        Raises:
            DateFormatError: If the date isn't provided.
        """
        if not self._provided:
            msg = "Date is not provided."
            raise DateFormatError(msg)
        return date(self._yyyy, self._mm, self._dd)

    def __eq__(self, other: Any) -> bool:
        """Equal if same year, month, day and presence."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.yyyy_mm_dd == other.yyyy_mm_dd and self.is_provided() == other.is_provided()

    def __lt__(self, other: Any) -> bool:
        """Ordered chronologically."""
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.yyyy_mm_dd < other.yyyy_mm_dd

    def __hash__(self) -> int:
        """Hash value of the CalendarDate object."""
        return hash((self.yyyy_mm_dd, self._provided))

    def __str__(self) -> str:
        """Canonical text of the date."""
        return self._raw_date

    def __repr__(self) -> str:
        """Representation of the CalendarDate object."""
        return f"CalendarDate('{self._raw_date}')"
