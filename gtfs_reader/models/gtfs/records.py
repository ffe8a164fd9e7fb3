"""This module contains pydantic data models for GTFS records.

One record model per GTFS table. Fields follow the GTFS reference and are grouped as required,
conditionally required and optional. Fields which are absent from a row get the default value
of the model.

1. Validates records built from parsed rows, e.g. coordinates are checked to be WGS84.

```python
from gtfs_reader.models.gtfs.records import StopRecord

stop = StopRecord(stop_id="FUR_CREEK_RES", stop_lat=36.425288, stop_lon=-117.133162)
```

2. Coerces assignment so records stay valid when edited.

```python
stop.stop_lat = 91.0
# > ValidationError
```
"""

from typing import ClassVar

from pydantic import Field

from ...time import CalendarDate, TimeOfDay
from .._base.records import RecordModel
from .._base.types import (
    CurrencyCode,
    Id,
    LanguageCode,
    Latitude,
    Longitude,
    NonNegativeFloat,
    NonNegativeInt,
    Text,
)
from .types import (
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


class AgencyRecord(RecordModel):
    """Represents a transit agency."""

    table_name: ClassVar[str] = "agency"

    # Conditionally required
    agency_id: Id = ""

    agency_name: Text
    agency_url: Text
    agency_timezone: Text

    # Optional
    agency_lang: LanguageCode = ""
    agency_phone: Text = ""
    agency_fare_url: Text = ""
    agency_email: Text = ""


class StopRecord(RecordModel):
    """Represents a stop or station where vehicles pick up or drop off passengers."""

    table_name: ClassVar[str] = "stops"

    stop_id: Id

    # Conditionally required
    stop_name: Text = ""
    coordinates_present: bool = True
    stop_lat: Latitude = 0.0
    stop_lon: Longitude = 0.0
    zone_id: Id = ""
    parent_station: Id = ""

    # Optional
    stop_code: Text = ""
    stop_desc: Text = ""
    stop_url: Text = ""
    location_type: StopLocationType = StopLocationType.GENERIC_NODE
    stop_timezone: Text = ""
    wheelchair_boarding: TripAccess = TripAccess.NO_INFO
    level_id: Id = ""
    platform_code: Text = ""


class RouteRecord(RecordModel):
    """Represents a transit route."""

    table_name: ClassVar[str] = "routes"

    route_id: Id
    route_type: RouteType

    # Conditionally required
    agency_id: Id = ""
    route_short_name: Text = ""
    route_long_name: Text = ""

    # Optional
    route_desc: Text = ""
    route_url: Text = ""
    route_color: Text = ""
    route_text_color: Text = ""
    route_sort_order: NonNegativeInt = 0


class TripRecord(RecordModel):
    """Describes trips which are sequences of two or more stops that occur at specific time."""

    table_name: ClassVar[str] = "trips"

    route_id: Id
    service_id: Id
    trip_id: Id

    # Optional
    trip_headsign: Text = ""
    trip_short_name: Text = ""
    direction_id: TripDirectionId = TripDirectionId.DEFAULT_DIRECTION
    block_id: Id = ""
    shape_id: Id = ""
    wheelchair_accessible: TripAccess = TripAccess.NO_INFO
    bikes_allowed: TripAccess = TripAccess.NO_INFO


class StopTimeRecord(RecordModel):
    """Times that a vehicle arrives at and departs from stops for each trip."""

    table_name: ClassVar[str] = "stop_times"

    trip_id: Id
    stop_id: Id
    stop_sequence: NonNegativeInt

    # Conditionally required
    arrival_time: TimeOfDay = Field(default_factory=TimeOfDay)
    departure_time: TimeOfDay = Field(default_factory=TimeOfDay)

    # Optional
    stop_headsign: Text = ""
    pickup_type: StopTimeBoarding = StopTimeBoarding.REGULARLY_SCHEDULED
    drop_off_type: StopTimeBoarding = StopTimeBoarding.REGULARLY_SCHEDULED
    shape_dist_traveled: NonNegativeFloat = 0.0
    timepoint: StopTimePoint = StopTimePoint.EXACT


class CalendarRecord(RecordModel):
    """Service dates specified using a weekly schedule with start and end dates."""

    table_name: ClassVar[str] = "calendar"

    service_id: Id

    monday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    tuesday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    wednesday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    thursday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    friday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    saturday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE
    sunday: CalendarAvailability = CalendarAvailability.NOT_AVAILABLE

    start_date: CalendarDate = Field(default_factory=CalendarDate)
    end_date: CalendarDate = Field(default_factory=CalendarDate)


class CalendarDateRecord(RecordModel):
    """Exception for a service on a date."""

    table_name: ClassVar[str] = "calendar_dates"

    service_id: Id
    date: CalendarDate = Field(default_factory=CalendarDate)
    exception_type: CalendarDateException = CalendarDateException.ADDED


class FareAttributeRecord(RecordModel):
    """Fare information for a transit agency's routes."""

    table_name: ClassVar[str] = "fare_attributes"

    fare_id: Id
    price: NonNegativeFloat = 0.0
    currency_type: CurrencyCode
    payment_method: FarePayment = FarePayment.BEFORE_BOARDING
    transfers: FareTransfers = FareTransfers.UNLIMITED

    # Conditionally required
    agency_id: Id = ""

    # Optional
    transfer_duration: NonNegativeInt = 0


class FareRuleRecord(RecordModel):
    """Rules to apply fares for itineraries."""

    table_name: ClassVar[str] = "fare_rules"

    fare_id: Id

    # Optional
    route_id: Id = ""
    origin_id: Id = ""
    destination_id: Id = ""
    contains_id: Id = ""


class ShapePointRecord(RecordModel):
    """Represents a point on a path (shape) that a transit vehicle takes."""

    table_name: ClassVar[str] = "shapes"

    shape_id: Id
    shape_pt_lat: Latitude = 0.0
    shape_pt_lon: Longitude = 0.0
    shape_pt_sequence: NonNegativeInt = 0

    # Optional
    shape_dist_traveled: NonNegativeFloat = 0.0


class FrequencyRecord(RecordModel):
    """Represents headway (time between trips) for routes with variable frequency."""

    table_name: ClassVar[str] = "frequencies"

    trip_id: Id
    start_time: TimeOfDay = Field(default_factory=TimeOfDay)
    end_time: TimeOfDay = Field(default_factory=TimeOfDay)
    headway_secs: NonNegativeInt = 0

    # Optional
    exact_times: FrequencyTripService = FrequencyTripService.FREQUENCY_BASED


class TransferRecord(RecordModel):
    """Rules for making connections at transfer points between routes."""

    table_name: ClassVar[str] = "transfers"

    from_stop_id: Id
    to_stop_id: Id
    transfer_type: TransferType = TransferType.RECOMMENDED

    # Optional
    min_transfer_time: NonNegativeInt = 0


class PathwayRecord(RecordModel):
    """Pathway linking together locations within a station."""

    table_name: ClassVar[str] = "pathways"

    pathway_id: Id
    from_stop_id: Id
    to_stop_id: Id
    pathway_mode: PathwayMode = PathwayMode.WALKWAY
    is_bidirectional: PathwayDirection = PathwayDirection.UNIDIRECTIONAL

    # Optional
    length: NonNegativeFloat = 0.0
    traversal_time: NonNegativeInt = 0
    stair_count: NonNegativeInt = 0
    max_slope: float = 0.0
    min_width: NonNegativeFloat = 0.0
    signposted_as: Text = ""
    reversed_signposted_as: Text = ""


class LevelRecord(RecordModel):
    """Level in a station."""

    table_name: ClassVar[str] = "levels"

    level_id: Id
    # Ground level is 0, levels above ground are positive and below ground negative.
    level_index: float = 0.0

    # Optional
    level_name: Text = ""


class FeedInfoRecord(RecordModel):
    """Dataset metadata, including publisher, version, and expiration information."""

    table_name: ClassVar[str] = "feed_info"

    feed_publisher_name: Text = ""
    feed_publisher_url: Text = ""
    feed_lang: LanguageCode = ""

    # Optional
    feed_start_date: CalendarDate = Field(default_factory=CalendarDate)
    feed_end_date: CalendarDate = Field(default_factory=CalendarDate)
    feed_version: Text = ""
    feed_contact_email: Text = ""
    feed_contact_url: Text = ""


class TranslationRecord(RecordModel):
    """Translation of a customer-facing dataset value."""

    table_name: ClassVar[str] = "translations"

    # `table_name` is a GTFS field of translations.txt, stored as `translation_table`.
    translation_table: TranslationTable = TranslationTable.AGENCY
    field_name: Text
    language: LanguageCode
    translation: Text

    # Conditionally required
    record_id: Id = ""
    record_sub_id: Id = ""
    field_value: Text = ""


class AttributionRecord(RecordModel):
    """Organization involved in the creation of the dataset."""

    table_name: ClassVar[str] = "attributions"

    organization_name: Text

    # Optional
    attribution_id: Id = ""
    agency_id: Id = ""
    route_id: Id = ""
    trip_id: Id = ""
    is_producer: AttributionRole = AttributionRole.NO
    is_operator: AttributionRole = AttributionRole.NO
    is_authority: AttributionRole = AttributionRole.NO
    attribution_url: Text = ""
    attribution_email: Text = ""
    attribution_phone: Text = ""
