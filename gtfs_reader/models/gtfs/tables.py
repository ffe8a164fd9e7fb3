"""Data models for GTFS tables exported to DataFrames using pandera library.

The module includes the following classes:

- AgenciesTable: Represents the Agency table in the GTFS dataset.
- StopsTable: Represents the Stops table in the GTFS dataset.
- RoutesTable: Represents the Routes table in the GTFS dataset.
- TripsTable: Represents the Trips table in the GTFS dataset.
- StopTimesTable: Represents the Stop Times table in the GTFS dataset.
- ShapesTable: Represents the Shapes table in the GTFS dataset.
- FrequenciesTable: Represents the Frequencies table in the GTFS dataset.
- CalendarTable: Represents the Calendar table in the GTFS dataset.
- CalendarDatesTable: Represents the Calendar Dates table in the GTFS dataset.

Tables are exported from parsed records, so enumerated codes are integers and times and dates
are their GTFS text. A time or date which wasn't provided is an empty string.

!!! example "Validating a table to the StopsTable"

    ```python
    from gtfs_reader.models.gtfs.tables import StopsTable
    from gtfs_reader.utils.models import validate_df_to_model

    validated_stops_df = validate_df_to_model(stops_df, StopsTable)
    ```
"""

from typing import ClassVar

import pandera as pa
from pandera.typing import Series

from .types import (
    CalendarAvailability,
    CalendarDateException,
    FrequencyTripService,
    RouteType,
    StopLocationType,
    StopTimeBoarding,
    StopTimePoint,
    TripAccess,
    TripDirectionId,
)

TIME_PATTERN = r"^(\d+:\d{2}:\d{2})?$"
DATE_PATTERN = r"^(\d{8})?$"


def _codes(enum_type) -> list[int]:
    return [member.value for member in enum_type]


class AgenciesTable(pa.DataFrameModel):
    """Represents the Agency table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#agencytxt>

    Attributes:
        agency_id (str): The agency_id. Required to be unique. May be empty for a single agency.
        agency_name (str): The agency name.
        agency_url (str): The agency URL.
        agency_timezone (str): The agency timezone.
    """

    agency_id: Series[str] = pa.Field(coerce=True, nullable=False, unique=True)
    agency_name: Series[str] = pa.Field(coerce=True, nullable=False)
    agency_url: Series[str] = pa.Field(coerce=True, nullable=False)
    agency_timezone: Series[str] = pa.Field(coerce=True, nullable=False)

    class Config:
        """Config for the AgenciesTable data model."""

        coerce = True


class StopsTable(pa.DataFrameModel):
    """Represents the Stops table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#stopstxt>

    Attributes:
        stop_id (str): The stop_id. Primary key. Required to be unique.
        stop_lat (float): The stop latitude. 0.0 if `coordinates_present` is False.
        stop_lon (float): The stop longitude. 0.0 if `coordinates_present` is False.
        location_type (int): The location type. Values can be:
            - 0: stop platform
            - 1: station
            - 2: entrance/exit
            - 3: generic node
            - 4: boarding area
        wheelchair_boarding (int): The wheelchair boarding.
    """

    stop_id: Series[str] = pa.Field(coerce=True, nullable=False, unique=True)
    coordinates_present: Series[bool] = pa.Field(coerce=True)
    stop_lat: Series[float] = pa.Field(coerce=True, nullable=False, ge=-90, le=90)
    stop_lon: Series[float] = pa.Field(coerce=True, nullable=False, ge=-180, le=180)
    location_type: Series[int] = pa.Field(coerce=True, isin=_codes(StopLocationType))
    wheelchair_boarding: Series[int] = pa.Field(coerce=True, isin=_codes(TripAccess))

    class Config:
        """Config for the StopsTable data model."""

        coerce = True


class RoutesTable(pa.DataFrameModel):
    """Represents the Routes table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#routestxt>

    Attributes:
        route_id (str): The route_id. Primary key. Required to be unique.
        route_type (int): The route type, basic or extended.
        route_sort_order (int): The route sort order.
    """

    route_id: Series[str] = pa.Field(nullable=False, unique=True, coerce=True)
    route_type: Series[int] = pa.Field(coerce=True, nullable=False, isin=_codes(RouteType))
    route_short_name: Series[str] = pa.Field(nullable=False, coerce=True)
    route_long_name: Series[str] = pa.Field(nullable=False, coerce=True)
    route_sort_order: Series[int] = pa.Field(coerce=True, ge=0)

    class Config:
        """Config for the RoutesTable data model."""

        coerce = True


class TripsTable(pa.DataFrameModel):
    """Represents the Trips table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#tripstxt>

    Attributes:
        trip_id (str): Primary key. Required to be unique.
        route_id (str): The route id.
        service_id (str): The service id.
        direction_id (int): The direction id. Values can be:
            - 0: Outbound
            - 1: Inbound
        wheelchair_accessible (int): The wheelchair accessible.
        bikes_allowed (int): The bikes allowed.
    """

    trip_id: Series[str] = pa.Field(nullable=False, unique=True, coerce=True)
    route_id: Series[str] = pa.Field(nullable=False, coerce=True)
    service_id: Series[str] = pa.Field(nullable=False, coerce=True)
    direction_id: Series[int] = pa.Field(coerce=True, isin=_codes(TripDirectionId))
    wheelchair_accessible: Series[int] = pa.Field(coerce=True, isin=_codes(TripAccess))
    bikes_allowed: Series[int] = pa.Field(coerce=True, isin=_codes(TripAccess))

    class Config:
        """Config for the TripsTable data model."""

        coerce = True


class StopTimesTable(pa.DataFrameModel):
    """Represents the Stop Times table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#stop_timestxt>

    The primary key of this table is a composite key of `trip_id` and `stop_sequence`.

    Attributes:
        trip_id (str): Foreign key to `trip_id` in the trips table.
        stop_id (str): Foreign key to `stop_id` in the stops table.
        stop_sequence (int): The stop sequence.
        arrival_time (str): The arrival time in [H]H:MM:SS format or empty.
        departure_time (str): The departure time in [H]H:MM:SS format or empty.
        pickup_type (int): The pickup type.
        drop_off_type (int): The drop off type.
        shape_dist_traveled (float): The shape distance traveled.
        timepoint (int): The timepoint type.
    """

    trip_id: Series[str] = pa.Field(nullable=False, coerce=True)
    stop_id: Series[str] = pa.Field(nullable=False, coerce=True)
    stop_sequence: Series[int] = pa.Field(nullable=False, coerce=True, ge=0)
    arrival_time: Series[str] = pa.Field(coerce=True, str_matches=TIME_PATTERN)
    departure_time: Series[str] = pa.Field(coerce=True, str_matches=TIME_PATTERN)
    pickup_type: Series[int] = pa.Field(coerce=True, isin=_codes(StopTimeBoarding))
    drop_off_type: Series[int] = pa.Field(coerce=True, isin=_codes(StopTimeBoarding))
    shape_dist_traveled: Series[float] = pa.Field(coerce=True, ge=0)
    timepoint: Series[int] = pa.Field(coerce=True, isin=_codes(StopTimePoint))

    class Config:
        """Config for the StopTimesTable data model."""

        coerce = True
        unique: ClassVar[list[str]] = ["trip_id", "stop_sequence"]


class ShapesTable(pa.DataFrameModel):
    """Represents the Shapes table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#shapestxt>

    Attributes:
        shape_id (str): The shape_id.
        shape_pt_lat (float): The shape point latitude.
        shape_pt_lon (float): The shape point longitude.
        shape_pt_sequence (int): The shape point sequence.
        shape_dist_traveled (float): The shape distance traveled.
    """

    shape_id: Series[str] = pa.Field(nullable=False, coerce=True)
    shape_pt_lat: Series[float] = pa.Field(coerce=True, nullable=False, ge=-90, le=90)
    shape_pt_lon: Series[float] = pa.Field(coerce=True, nullable=False, ge=-180, le=180)
    shape_pt_sequence: Series[int] = pa.Field(coerce=True, nullable=False, ge=0)
    shape_dist_traveled: Series[float] = pa.Field(coerce=True, ge=0)

    class Config:
        """Config for the ShapesTable data model."""

        coerce = True
        unique: ClassVar[list[str]] = ["shape_id", "shape_pt_sequence"]


class FrequenciesTable(pa.DataFrameModel):
    """Represents the Frequency table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#frequenciestxt>

    The primary key of this table is a composite key of `trip_id` and `start_time`.

    Attributes:
        trip_id (str): Foreign key to `trip_id` in the trips table.
        start_time (str): The start time in [H]H:MM:SS format.
        end_time (str): The end time in [H]H:MM:SS format.
        headway_secs (int): The headway in seconds.
        exact_times (int): Whether trips are frequency or schedule based.
    """

    trip_id: Series[str] = pa.Field(nullable=False, coerce=True)
    start_time: Series[str] = pa.Field(nullable=False, coerce=True, str_matches=TIME_PATTERN)
    end_time: Series[str] = pa.Field(nullable=False, coerce=True, str_matches=TIME_PATTERN)
    headway_secs: Series[int] = pa.Field(coerce=True, ge=0, nullable=False)
    exact_times: Series[int] = pa.Field(coerce=True, isin=_codes(FrequencyTripService))

    class Config:
        """Config for the FrequenciesTable data model."""

        coerce = True
        unique: ClassVar[list[str]] = ["trip_id", "start_time"]


class CalendarTable(pa.DataFrameModel):
    """Represents the Calendar table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#calendartxt>

    Attributes:
        service_id (str): The service_id. Required to be unique.
        monday..sunday (int): 1 if service is available on that day of the week, else 0.
        start_date (str): The start date in YYYYMMDD format.
        end_date (str): The end date in YYYYMMDD format.
    """

    service_id: Series[str] = pa.Field(nullable=False, unique=True, coerce=True)
    monday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    tuesday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    wednesday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    thursday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    friday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    saturday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    sunday: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarAvailability))
    start_date: Series[str] = pa.Field(coerce=True, str_matches=DATE_PATTERN)
    end_date: Series[str] = pa.Field(coerce=True, str_matches=DATE_PATTERN)

    class Config:
        """Config for the CalendarTable data model."""

        coerce = True


class CalendarDatesTable(pa.DataFrameModel):
    """Represents the Calendar Dates table in the GTFS dataset.

    For field definitions, see the GTFS reference: <https://gtfs.org/documentation/schedule/reference/#calendar_datestxt>

    Attributes:
        service_id (str): The service_id.
        date (str): The date of the exception in YYYYMMDD format.
        exception_type (int): 1 if service is added, 2 if removed.
    """

    service_id: Series[str] = pa.Field(nullable=False, coerce=True)
    date: Series[str] = pa.Field(nullable=False, coerce=True, str_matches=DATE_PATTERN)
    exception_type: Series[int] = pa.Field(coerce=True, isin=_codes(CalendarDateException))

    class Config:
        """Config for the CalendarDatesTable data model."""

        coerce = True
        unique: ClassVar[list[str]] = ["service_id", "date"]


TABLE_MODELS: dict[str, type[pa.DataFrameModel]] = {
    "agency": AgenciesTable,
    "stops": StopsTable,
    "routes": RoutesTable,
    "trips": TripsTable,
    "stop_times": StopTimesTable,
    "shapes": ShapesTable,
    "frequencies": FrequenciesTable,
    "calendar": CalendarTable,
    "calendar_dates": CalendarDatesTable,
}
"""DataFrame model of each exported GTFS table which has one, keyed by table name."""
