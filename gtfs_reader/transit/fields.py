"""Parsers of typed values from the fields of a GTFS row.

A row is a mapping of field name (from the table header) to its text. All parsers follow the same
presence policy:

- a required field whose key is missing raises `RequiredFieldAbsentError`,
- an optional field which is missing or empty gets the default,
- a value which is present but doesn't parse raises `InvalidFieldFormat`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, TypeVar

from ..errors import CoordinateRangeError, InvalidFieldFormat, RequiredFieldAbsentError
from ..params import DEFAULT_FLOAT, DEFAULT_INT, DEFAULT_TEXT, MAX_LAT, MAX_LON, MIN_LAT, MIN_LON
from ..time import CalendarDate, TimeOfDay
from ..utils.utils import is_ascii_digits

Row = dict[str, str]

EnumT = TypeVar("EnumT", bound=IntEnum)


def _invalid(key: str, value: str, expected: str) -> InvalidFieldFormat:
    return InvalidFieldFormat(f"Invalid value of '{key}': '{value}' is not {expected}.")


def get_required(row: Row, key: str) -> str:
    """Text of a required field. Empty text is accepted."""
    if key not in row:
        raise RequiredFieldAbsentError(key)
    return row[key]


def get_text(row: Row, key: str, default: str = DEFAULT_TEXT) -> str:
    """Text of an optional field or default if the field is missing."""
    return row.get(key, default)


def has_value(row: Row, key: str) -> bool:
    """True if the field is in the row and isn't empty."""
    return bool(row.get(key, ""))


def _value_or_none(row: Row, key: str, is_optional: bool) -> Optional[str]:
    """Text of the field, or None if an optional field should take its default."""
    if is_optional:
        value = row.get(key, "")
        return value or None
    return get_required(row, key)


def parse_int(
    row: Row, key: str, default: int = DEFAULT_INT, is_optional: bool = True
) -> int:
    """Non-negative integer value of a field.

    Raises:
        RequiredFieldAbsentError: if a required field is missing.
        InvalidFieldFormat: if the value isn't a non-negative integer.
    """
    value = _value_or_none(row, key, is_optional)
    if value is None:
        return default
    if not is_ascii_digits(value):
        raise _invalid(key, value, "a non-negative integer")
    return int(value)


def parse_float(
    row: Row,
    key: str,
    default: float = DEFAULT_FLOAT,
    is_optional: bool = True,
    non_negative: bool = False,
) -> float:
    """Floating point value of a field.

    Raises:
        RequiredFieldAbsentError: if a required field is missing.
        InvalidFieldFormat: if the value isn't a number, or is negative when `non_negative`.
    """
    value = _value_or_none(row, key, is_optional)
    if value is None:
        return default
    try:
        number = float(value)
    except ValueError as e:
        raise _invalid(key, value, "a number") from e
    if non_negative and number < 0:
        raise _invalid(key, value, "a non-negative number")
    return number


def parse_enum(
    row: Row,
    key: str,
    enum_type: type[EnumT],
    default: Optional[EnumT] = None,
    is_optional: bool = True,
) -> EnumT:
    """Member of an enumeration from the integer code in a field.

    Raises:
        RequiredFieldAbsentError: if a required field is missing.
        InvalidFieldFormat: if the value isn't an integer code of enum_type.
    """
    value = _value_or_none(row, key, is_optional)
    if value is None:
        return default
    if not is_ascii_digits(value):
        raise _invalid(key, value, f"a {enum_type.__name__} code")
    try:
        return enum_type(int(value))
    except ValueError as e:
        raise _invalid(key, value, f"a {enum_type.__name__} code") from e


def parse_time(row: Row, key: str, is_optional: bool = True) -> TimeOfDay:
    """TimeOfDay from a field. An empty or missing optional field is a not-provided time."""
    if is_optional:
        return TimeOfDay(row.get(key, ""))
    return TimeOfDay(get_required(row, key))


def parse_date(row: Row, key: str, is_optional: bool = True) -> CalendarDate:
    """CalendarDate from a field. An empty or missing optional field is a not-provided date."""
    if is_optional:
        return CalendarDate(row.get(key, ""))
    return CalendarDate(get_required(row, key))


def check_coordinates(lat: float, lon: float) -> None:
    """Raises CoordinateRangeError if not valid WGS84 decimal degrees."""
    if not MIN_LAT <= lat <= MAX_LAT:
        msg = f"Latitude out of range [{MIN_LAT}, {MAX_LAT}]: {lat}"
        raise CoordinateRangeError(msg)
    if not MIN_LON <= lon <= MAX_LON:
        msg = f"Longitude out of range [{MIN_LON}, {MAX_LON}]: {lon}"
        raise CoordinateRangeError(msg)


def parse_coordinates(lat: str, lon: str) -> tuple[float, float]:
    """Latitude and longitude from their decimal text.

    Raises:
        InvalidFieldFormat: if either isn't a number.
        CoordinateRangeError: if latitude isn't in [-90, 90] or longitude in [-180, 180].
    """
    try:
        lat_value, lon_value = float(lat), float(lon)
    except ValueError as e:
        msg = f"Coordinates are not numbers: '{lat}', '{lon}'"
        raise InvalidFieldFormat(msg) from e
    check_coordinates(lat_value, lon_value)
    return lat_value, lon_value
