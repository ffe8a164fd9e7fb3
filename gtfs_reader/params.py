"""Parameters for GTFS Reader which should not be changed by the user.

Parameters that are here are used throughout the codebase and are stated here for easy reference.
Additional parameters that are more narrowly scoped are defined in the appropriate modules.
"""

from .models.gtfs.types import (
    AttributionRole,
    FareTransfers,
    FrequencyTripService,
    StopLocationType,
    StopTimeBoarding,
    StopTimePoint,
    TripAccess,
    TripDirectionId,
)

DELIMITER: str = ","
QUOTE: str = '"'

UTF8_BOM: str = "\ufeff"
"""Byte-order mark as it reads from a stream decoded as UTF-8."""

UTF8_BOM_UNDECODED: str = "\xef\xbb\xbf"
"""Byte-order mark as it reads from a stream decoded as latin-1."""

DROPPED_CHARS: str = "\r\t"
"""Characters removed from every record before it is split into fields."""

MAX_MINUTES_SECONDS: int = 60

MIN_YEAR: int = 1000
MAX_YEAR: int = 9999

MIN_LAT: float = -90.0
MAX_LAT: float = 90.0
MIN_LON: float = -180.0
MAX_LON: float = 180.0

# Defaults for absent optional fields
DEFAULT_TEXT: str = ""
DEFAULT_INT: int = 0
DEFAULT_FLOAT: float = 0.0
DEFAULT_LOCATION_TYPE: StopLocationType = StopLocationType.GENERIC_NODE
DEFAULT_DIRECTION_ID: TripDirectionId = TripDirectionId.DEFAULT_DIRECTION
DEFAULT_TRIP_ACCESS: TripAccess = TripAccess.NO_INFO
DEFAULT_BOARDING: StopTimeBoarding = StopTimeBoarding.REGULARLY_SCHEDULED
DEFAULT_TIMEPOINT: StopTimePoint = StopTimePoint.EXACT
DEFAULT_FARE_TRANSFERS: FareTransfers = FareTransfers.UNLIMITED
DEFAULT_EXACT_TIMES: FrequencyTripService = FrequencyTripService.FREQUENCY_BASED
DEFAULT_ATTRIBUTION_ROLE: AttributionRole = AttributionRole.NO

REQUIRED_TABLES: list[str] = ["agency", "stops", "routes", "trips", "stop_times"]

OPTIONAL_TABLES: list[str] = [
    "calendar",
    "calendar_dates",
    "shapes",
    "transfers",
    "frequencies",
    "fare_attributes",
    "fare_rules",
    "levels",
    "pathways",
    "translations",
    "attributions",
    "feed_info",
]
"""Conditionally required and optional tables. A missing file reads as an empty table."""

SMALL_RECS: int = 5
"""Number of records to display in a summary."""
