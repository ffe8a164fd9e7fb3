"""Maps rows of GTFS tables to records.

Each `map_<entity>` function takes a row, a mapping of header field names to field text, and
returns the record for it or raises:

- `RequiredFieldAbsentError` if a required field is missing,
- `InvalidFieldFormat` (or one of its subclasses) if a field doesn't parse,
- `pydantic.ValidationError` if a parsed value doesn't validate to the record model.

`add_row` is the boundary where those faults become a `Result`.

```python
from gtfs_reader.transit.mappers import add_row

result = add_row(feed, "agency", {"agency_name": "DTA", ...})
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pydantic import ValidationError

from ..errors import InvalidFieldFormat, RequiredFieldAbsentError
from ..logger import GtfsLogger
from ..models.gtfs.records import (
    AgencyRecord,
    AttributionRecord,
    CalendarDateRecord,
    CalendarRecord,
    FareAttributeRecord,
    FareRuleRecord,
    FeedInfoRecord,
    FrequencyRecord,
    LevelRecord,
    PathwayRecord,
    RouteRecord,
    ShapePointRecord,
    StopRecord,
    StopTimeRecord,
    TransferRecord,
    TranslationRecord,
    TripRecord,
)
from ..models.gtfs.types import (
    AttributionRole,
    CalendarAvailability,
    CalendarDateException,
    FarePayment,
    FareTransfers,
    FrequencyTripService,
    PathwayDirection,
    PathwayMode,
    RouteType,
    StopLocationType,
    StopTimeBoarding,
    StopTimePoint,
    TransferType,
    TranslationTable,
    TripAccess,
    TripDirectionId,
)
from ..params import (
    DEFAULT_ATTRIBUTION_ROLE,
    DEFAULT_BOARDING,
    DEFAULT_DIRECTION_ID,
    DEFAULT_EXACT_TIMES,
    DEFAULT_FARE_TRANSFERS,
    DEFAULT_LOCATION_TYPE,
    DEFAULT_TIMEPOINT,
    DEFAULT_TRIP_ACCESS,
)
from ..result import Result, ResultCode
from .fields import (
    Row,
    check_coordinates,
    get_required,
    get_text,
    has_value,
    parse_coordinates,
    parse_date,
    parse_enum,
    parse_float,
    parse_int,
    parse_time,
)

if TYPE_CHECKING:
    from .feed.feed import Feed

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def map_agency(row: Row) -> AgencyRecord:
    """Agency from a row of agency.txt."""
    return AgencyRecord(
        agency_id=get_text(row, "agency_id"),
        agency_name=get_required(row, "agency_name"),
        agency_url=get_required(row, "agency_url"),
        agency_timezone=get_required(row, "agency_timezone"),
        agency_lang=get_text(row, "agency_lang"),
        agency_phone=get_text(row, "agency_phone"),
        agency_fare_url=get_text(row, "agency_fare_url"),
        agency_email=get_text(row, "agency_email"),
    )


def map_stop(row: Row) -> StopRecord:
    """Stop from a row of stops.txt.

    Coordinates are conditionally required: each one given must be a number, and
    `coordinates_present` is False unless both `stop_lat` and `stop_lon` have a value. Only a
    complete pair is range checked and kept, otherwise both are 0.0.
    """
    stop_id = get_required(row, "stop_id")

    stop_lat = parse_float(row, "stop_lat")
    stop_lon = parse_float(row, "stop_lon")
    coordinates_present = has_value(row, "stop_lat") and has_value(row, "stop_lon")
    if coordinates_present:
        check_coordinates(stop_lat, stop_lon)
    else:
        stop_lat, stop_lon = 0.0, 0.0

    return StopRecord(
        stop_id=stop_id,
        stop_name=get_text(row, "stop_name"),
        coordinates_present=coordinates_present,
        stop_lat=stop_lat,
        stop_lon=stop_lon,
        zone_id=get_text(row, "zone_id"),
        parent_station=get_text(row, "parent_station"),
        stop_code=get_text(row, "stop_code"),
        stop_desc=get_text(row, "stop_desc"),
        stop_url=get_text(row, "stop_url"),
        location_type=parse_enum(row, "location_type", StopLocationType, DEFAULT_LOCATION_TYPE),
        stop_timezone=get_text(row, "stop_timezone"),
        wheelchair_boarding=parse_enum(
            row, "wheelchair_boarding", TripAccess, DEFAULT_TRIP_ACCESS
        ),
        level_id=get_text(row, "level_id"),
        platform_code=get_text(row, "platform_code"),
    )


def map_route(row: Row) -> RouteRecord:
    """Route from a row of routes.txt.

    Raises:
        RequiredFieldAbsentError: if both route_short_name and route_long_name are empty.
    """
    route_id = get_required(row, "route_id")
    route_type = parse_enum(row, "route_type", RouteType, is_optional=False)
    route_sort_order = parse_int(row, "route_sort_order")

    route_short_name = get_text(row, "route_short_name")
    route_long_name = get_text(row, "route_long_name")
    if not route_short_name and not route_long_name:
        raise RequiredFieldAbsentError(
            "route_short_name",
            "'route_short_name' or 'route_long_name' must be specified",
        )

    return RouteRecord(
        route_id=route_id,
        route_type=route_type,
        agency_id=get_text(row, "agency_id"),
        route_short_name=route_short_name,
        route_long_name=route_long_name,
        route_desc=get_text(row, "route_desc"),
        route_url=get_text(row, "route_url"),
        route_color=get_text(row, "route_color"),
        route_text_color=get_text(row, "route_text_color"),
        route_sort_order=route_sort_order,
    )


def map_trip(row: Row) -> TripRecord:
    """Trip from a row of trips.txt."""
    return TripRecord(
        route_id=get_required(row, "route_id"),
        service_id=get_required(row, "service_id"),
        trip_id=get_required(row, "trip_id"),
        trip_headsign=get_text(row, "trip_headsign"),
        trip_short_name=get_text(row, "trip_short_name"),
        direction_id=parse_enum(row, "direction_id", TripDirectionId, DEFAULT_DIRECTION_ID),
        block_id=get_text(row, "block_id"),
        shape_id=get_text(row, "shape_id"),
        wheelchair_accessible=parse_enum(
            row, "wheelchair_accessible", TripAccess, DEFAULT_TRIP_ACCESS
        ),
        bikes_allowed=parse_enum(row, "bikes_allowed", TripAccess, DEFAULT_TRIP_ACCESS),
    )


def map_stop_time(row: Row) -> StopTimeRecord:
    """Stop time from a row of stop_times.txt.

    Arrival and departure times must be in the header but may be empty, e.g. for stops which
    aren't timepoints.
    """
    return StopTimeRecord(
        trip_id=get_required(row, "trip_id"),
        stop_id=get_required(row, "stop_id"),
        stop_sequence=parse_int(row, "stop_sequence", is_optional=False),
        arrival_time=parse_time(row, "arrival_time", is_optional=False),
        departure_time=parse_time(row, "departure_time", is_optional=False),
        stop_headsign=get_text(row, "stop_headsign"),
        pickup_type=parse_enum(row, "pickup_type", StopTimeBoarding, DEFAULT_BOARDING),
        drop_off_type=parse_enum(row, "drop_off_type", StopTimeBoarding, DEFAULT_BOARDING),
        shape_dist_traveled=parse_float(row, "shape_dist_traveled", non_negative=True),
        timepoint=parse_enum(row, "timepoint", StopTimePoint, DEFAULT_TIMEPOINT),
    )


def map_calendar_item(row: Row) -> CalendarRecord:
    """Weekly service from a row of calendar.txt."""
    service_id = get_required(row, "service_id")
    days = {
        day: parse_enum(row, day, CalendarAvailability, is_optional=False) for day in WEEKDAYS
    }
    return CalendarRecord(
        service_id=service_id,
        **days,
        start_date=parse_date(row, "start_date", is_optional=False),
        end_date=parse_date(row, "end_date", is_optional=False),
    )


def map_calendar_date(row: Row) -> CalendarDateRecord:
    """Service exception from a row of calendar_dates.txt."""
    return CalendarDateRecord(
        service_id=get_required(row, "service_id"),
        date=parse_date(row, "date", is_optional=False),
        exception_type=parse_enum(
            row, "exception_type", CalendarDateException, is_optional=False
        ),
    )


def map_fare_attribute(row: Row) -> FareAttributeRecord:
    """Fare from a row of fare_attributes.txt."""
    return FareAttributeRecord(
        fare_id=get_required(row, "fare_id"),
        price=parse_float(row, "price", is_optional=False, non_negative=True),
        currency_type=get_required(row, "currency_type"),
        payment_method=parse_enum(row, "payment_method", FarePayment, is_optional=False),
        transfers=parse_enum(row, "transfers", FareTransfers, DEFAULT_FARE_TRANSFERS),
        agency_id=get_text(row, "agency_id"),
        transfer_duration=parse_int(row, "transfer_duration"),
    )


def map_fare_rule(row: Row) -> FareRuleRecord:
    """Fare rule from a row of fare_rules.txt."""
    return FareRuleRecord(
        fare_id=get_required(row, "fare_id"),
        route_id=get_text(row, "route_id"),
        origin_id=get_text(row, "origin_id"),
        destination_id=get_text(row, "destination_id"),
        contains_id=get_text(row, "contains_id"),
    )


def map_shape(row: Row) -> ShapePointRecord:
    """Shape point from a row of shapes.txt."""
    shape_id = get_required(row, "shape_id")
    shape_pt_sequence = parse_int(row, "shape_pt_sequence", is_optional=False)
    shape_pt_lat, shape_pt_lon = parse_coordinates(
        get_required(row, "shape_pt_lat"), get_required(row, "shape_pt_lon")
    )
    return ShapePointRecord(
        shape_id=shape_id,
        shape_pt_lat=shape_pt_lat,
        shape_pt_lon=shape_pt_lon,
        shape_pt_sequence=shape_pt_sequence,
        shape_dist_traveled=parse_float(row, "shape_dist_traveled", non_negative=True),
    )


def map_frequency(row: Row) -> FrequencyRecord:
    """Headway-based service from a row of frequencies.txt."""
    return FrequencyRecord(
        trip_id=get_required(row, "trip_id"),
        start_time=parse_time(row, "start_time", is_optional=False),
        end_time=parse_time(row, "end_time", is_optional=False),
        headway_secs=parse_int(row, "headway_secs", is_optional=False),
        exact_times=parse_enum(row, "exact_times", FrequencyTripService, DEFAULT_EXACT_TIMES),
    )


def map_transfer(row: Row) -> TransferRecord:
    """Transfer rule from a row of transfers.txt."""
    return TransferRecord(
        from_stop_id=get_required(row, "from_stop_id"),
        to_stop_id=get_required(row, "to_stop_id"),
        transfer_type=parse_enum(row, "transfer_type", TransferType, is_optional=False),
        min_transfer_time=parse_int(row, "min_transfer_time"),
    )


def map_pathway(row: Row) -> PathwayRecord:
    """Pathway from a row of pathways.txt."""
    return PathwayRecord(
        pathway_id=get_required(row, "pathway_id"),
        from_stop_id=get_required(row, "from_stop_id"),
        to_stop_id=get_required(row, "to_stop_id"),
        pathway_mode=parse_enum(row, "pathway_mode", PathwayMode, is_optional=False),
        is_bidirectional=parse_enum(
            row, "is_bidirectional", PathwayDirection, is_optional=False
        ),
        length=parse_float(row, "length", non_negative=True),
        traversal_time=parse_int(row, "traversal_time"),
        stair_count=parse_int(row, "stair_count"),
        max_slope=parse_float(row, "max_slope"),
        min_width=parse_float(row, "min_width", non_negative=True),
        signposted_as=get_text(row, "signposted_as"),
        reversed_signposted_as=get_text(row, "reversed_signposted_as"),
    )


def map_level(row: Row) -> LevelRecord:
    """Station level from a row of levels.txt."""
    return LevelRecord(
        level_id=get_required(row, "level_id"),
        level_index=parse_float(row, "level_index", is_optional=False),
        level_name=get_text(row, "level_name"),
    )


def map_feed_info(row: Row) -> FeedInfoRecord:
    """Feed metadata from a row of feed_info.txt."""
    return FeedInfoRecord(
        feed_publisher_name=get_required(row, "feed_publisher_name"),
        feed_publisher_url=get_required(row, "feed_publisher_url"),
        feed_lang=get_required(row, "feed_lang"),
        feed_start_date=parse_date(row, "feed_start_date"),
        feed_end_date=parse_date(row, "feed_end_date"),
        feed_version=get_text(row, "feed_version"),
        feed_contact_email=get_text(row, "feed_contact_email"),
        feed_contact_url=get_text(row, "feed_contact_url"),
    )


def _parse_translation_table(row: Row) -> TranslationTable:
    """Translated table from its integer code or its GTFS table name."""
    value = get_required(row, "table_name")
    try:
        return TranslationTable[value.upper()]
    except KeyError:
        return parse_enum(row, "table_name", TranslationTable, is_optional=False)


def map_translation(row: Row) -> TranslationRecord:
    """Translation from a row of translations.txt."""
    return TranslationRecord(
        translation_table=_parse_translation_table(row),
        field_name=get_required(row, "field_name"),
        language=get_required(row, "language"),
        translation=get_required(row, "translation"),
        record_id=get_text(row, "record_id"),
        record_sub_id=get_text(row, "record_sub_id"),
        field_value=get_text(row, "field_value"),
    )


def map_attribution(row: Row) -> AttributionRecord:
    """Attribution from a row of attributions.txt."""
    roles = {
        role: parse_enum(row, role, AttributionRole, DEFAULT_ATTRIBUTION_ROLE)
        for role in ["is_producer", "is_operator", "is_authority"]
    }
    return AttributionRecord(
        organization_name=get_required(row, "organization_name"),
        attribution_id=get_text(row, "attribution_id"),
        agency_id=get_text(row, "agency_id"),
        route_id=get_text(row, "route_id"),
        trip_id=get_text(row, "trip_id"),
        **roles,
        attribution_url=get_text(row, "attribution_url"),
        attribution_email=get_text(row, "attribution_email"),
        attribution_phone=get_text(row, "attribution_phone"),
    )


MAPPERS: dict[str, Callable[[Row], object]] = {
    "agency": map_agency,
    "stops": map_stop,
    "routes": map_route,
    "trips": map_trip,
    "stop_times": map_stop_time,
    "calendar": map_calendar_item,
    "calendar_dates": map_calendar_date,
    "fare_attributes": map_fare_attribute,
    "fare_rules": map_fare_rule,
    "shapes": map_shape,
    "frequencies": map_frequency,
    "transfers": map_transfer,
    "pathways": map_pathway,
    "levels": map_level,
    "feed_info": map_feed_info,
    "translations": map_translation,
    "attributions": map_attribution,
}
"""Mapper of each GTFS table, keyed by table name."""


def _validation_message(e: ValidationError) -> str:
    error = e.errors()[0]
    field = ".".join(str(loc) for loc in error["loc"])
    return f"Invalid value of '{field}': {error['msg']}"


def add_row(feed: Feed, table_name: str, row: Row) -> Result:
    """Map a row of table_name to a record and add it to the feed.

    Args:
        feed: Feed to add the record to.
        table_name: name of the GTFS table the row was read from, e.g. `stops`.
        row: mapping of field names to field text.

    Returns:
        Result with code `REQUIRED_FIELD_ABSENT` or `INVALID_FIELD_FORMAT` if the row can't be
        mapped, in which case nothing is added. `OK` otherwise.
    """
    if table_name not in MAPPERS:
        msg = f"No mapper for table: {table_name}. Available: {list(MAPPERS)}"
        raise ValueError(msg)

    try:
        record = MAPPERS[table_name](row)
    except RequiredFieldAbsentError as e:
        GtfsLogger.debug(f"Required field '{e.field}' absent in {table_name} row: {row}")
        return Result(code=ResultCode.REQUIRED_FIELD_ABSENT, message=str(e), table=table_name)
    except InvalidFieldFormat as e:
        GtfsLogger.debug(f"Invalid field format in {table_name} row: {row}")
        return Result(code=ResultCode.INVALID_FIELD_FORMAT, message=str(e), table=table_name)
    except ValidationError as e:
        GtfsLogger.debug(f"Invalid record in {table_name} row: {row}\n{e}")
        return Result(
            code=ResultCode.INVALID_FIELD_FORMAT,
            message=_validation_message(e),
            table=table_name,
        )

    feed.add_record(record)
    return Result(table=table_name, records_read=1)
