"""Field types for GTFS data.

Every enumerated GTFS field is an `IntEnum` which parses from the integer code used in the
GTFS text files.

Full documentation: https://gtfs.org/schedule/reference
"""

from enum import IntEnum

__all__ = [
    "AttributionRole",
    "CalendarAvailability",
    "CalendarDateException",
    "FarePayment",
    "FareTransfers",
    "FrequencyTripService",
    "PathwayDirection",
    "PathwayMode",
    "RouteType",
    "StopLocationType",
    "StopTimeBoarding",
    "StopTimePoint",
    "TransferType",
    "TranslationTable",
    "TripAccess",
    "TripDirectionId",
]


class StopLocationType(IntEnum):
    """Indicates the type of node the stop record represents.

    Full documentation: https://gtfs.org/schedule/reference/#stopstxt
    """

    STOP_OR_PLATFORM = 0
    STATION = 1
    ENTRANCE_EXIT = 2
    GENERIC_NODE = 3
    BOARDING_AREA = 4


class RouteType(IntEnum):
    """Indicates the type of transportation used on a route.

    Includes the basic GTFS route types and the extended (hierarchical) route types.

    Full documentation: https://gtfs.org/schedule/reference/#routestxt and
    https://developers.google.com/transit/gtfs/reference/extended-route-types
    """

    TRAM = 0
    SUBWAY = 1
    RAIL = 2
    BUS = 3
    FERRY = 4
    CABLE_TRAM = 5
    AERIAL_LIFT = 6
    FUNICULAR = 7
    TROLLEYBUS = 11
    MONORAIL = 12

    RAILWAY_SERVICE = 100
    HIGH_SPEED_RAIL_SERVICE = 101
    LONG_DISTANCE_TRAINS = 102
    INTER_REGIONAL_RAIL_SERVICE = 103
    CAR_TRANSPORT_RAIL_SERVICE = 104
    SLEEPER_RAIL_SERVICE = 105
    REGIONAL_RAIL_SERVICE = 106
    TOURIST_RAILWAY_SERVICE = 107
    RAIL_SHUTTLE_WITHIN_COMPLEX = 108
    SUBURBAN_RAILWAY = 109
    REPLACEMENT_RAIL_SERVICE = 110
    SPECIAL_RAIL_SERVICE = 111
    LORRY_TRANSPORT_RAIL_SERVICE = 112
    ALL_RAIL_SERVICES = 113
    CROSS_COUNTRY_RAIL_SERVICE = 114
    VEHICLE_TRANSPORT_RAIL_SERVICE = 115
    RACK_AND_PINION_RAILWAY = 116
    ADDITIONAL_RAIL_SERVICE = 117

    COACH_SERVICE = 200
    INTERNATIONAL_COACH_SERVICE = 201
    NATIONAL_COACH_SERVICE = 202
    SHUTTLE_COACH_SERVICE = 203
    REGIONAL_COACH_SERVICE = 204
    SPECIAL_COACH_SERVICE = 205
    SIGHTSEEING_COACH_SERVICE = 206
    TOURIST_COACH_SERVICE = 207
    COMMUTER_COACH_SERVICE = 208
    ALL_COACH_SERVICES = 209

    URBAN_RAILWAY_SERVICE_400 = 400
    METRO_SERVICE = 401
    UNDERGROUND_SERVICE = 402
    URBAN_RAILWAY_SERVICE_403 = 403
    ALL_URBAN_RAILWAY_SERVICES = 404
    MONORAIL_405 = 405

    BUS_SERVICE = 700
    REGIONAL_BUS_SERVICE = 701
    EXPRESS_BUS_SERVICE = 702
    STOPPING_BUS_SERVICE = 703
    LOCAL_BUS_SERVICE = 704
    NIGHT_BUS_SERVICE = 705
    POST_BUS_SERVICE = 706
    SPECIAL_NEEDS_BUS = 707
    MOBILITY_BUS_SERVICE = 708
    MOBILITY_BUS_FOR_REGISTERED_DISABLED = 709
    SIGHTSEEING_BUS = 710
    SHUTTLE_BUS = 711
    SCHOOL_BUS = 712
    SCHOOL_AND_PUBLIC_SERVICE_BUS = 713
    RAIL_REPLACEMENT_BUS_SERVICE = 714
    DEMAND_AND_RESPONSE_BUS_SERVICE = 715
    ALL_BUS_SERVICES = 716

    TROLLEYBUS_SERVICE = 800

    TRAM_SERVICE = 900
    CITY_TRAM_SERVICE = 901
    LOCAL_TRAM_SERVICE = 902
    REGIONAL_TRAM_SERVICE = 903
    SIGHTSEEING_TRAM_SERVICE = 904
    SHUTTLE_TRAM_SERVICE = 905
    ALL_TRAM_SERVICES = 906

    WATER_TRANSPORT_SERVICE = 1000
    AIR_SERVICE = 1100
    FERRY_SERVICE = 1200
    AERIAL_LIFT_SERVICE = 1300
    FUNICULAR_SERVICE = 1400
    TAXI_SERVICE = 1500
    COMMUNAL_TAXI_SERVICE = 1501
    WATER_TAXI_SERVICE = 1502
    RAIL_TAXI_SERVICE = 1503
    BIKE_TAXI_SERVICE = 1504
    LICENSED_TAXI_SERVICE = 1505
    PRIVATE_HIRE_SERVICE_VEHICLE = 1506
    ALL_TAXI_SERVICES = 1507
    MISCELLANEOUS_SERVICE = 1700
    HORSE_DRAWN_CARRIAGE = 1702


class TripDirectionId(IntEnum):
    """Indicates the direction of travel for a trip."""

    DEFAULT_DIRECTION = 0
    OPPOSITE_DIRECTION = 1


class TripAccess(IntEnum):
    """Indicates whether a trip or stop is wheelchair accessible or allows bikes.

    Full documentation: https://gtfs.org/schedule/reference/#tripstxt
    """

    NO_INFO = 0
    YES = 1
    NO = 2


class StopTimeBoarding(IntEnum):
    """Indicates the pickup or drop off method for passengers at a stop.

    Full documentation: https://gtfs.org/schedule/reference/#stop_timestxt
    """

    REGULARLY_SCHEDULED = 0
    NO = 1
    PHONE = 2
    COORDINATE_WITH_DRIVER = 3


class StopTimePoint(IntEnum):
    """Indicates whether the specified time is exact or approximate."""

    APPROXIMATE = 0
    EXACT = 1


class CalendarAvailability(IntEnum):
    """Indicates whether the service operates on a day of the week."""

    NOT_AVAILABLE = 0
    AVAILABLE = 1


class CalendarDateException(IntEnum):
    """Indicates whether service is added or removed on a date."""

    ADDED = 1
    REMOVED = 2


class FarePayment(IntEnum):
    """Indicates when the fare must be paid."""

    ON_BOARD = 0
    BEFORE_BOARDING = 1


class FareTransfers(IntEnum):
    """Indicates the number of transfers permitted on a fare.

    An empty value in GTFS means unlimited transfers.
    """

    NO = 0
    ONCE = 1
    TWICE = 2
    UNLIMITED = 3


class FrequencyTripService(IntEnum):
    """Indicates the type of service for a trip with frequencies."""

    FREQUENCY_BASED = 0
    SCHEDULE_BASED = 1


class TransferType(IntEnum):
    """Indicates the type of connection between two stops.

    Full documentation: https://gtfs.org/schedule/reference/#transferstxt
    """

    RECOMMENDED = 0
    TIMED = 1
    MINIMUM_TIME = 2
    NOT_POSSIBLE = 3


class PathwayMode(IntEnum):
    """Type of pathway between two locations of a station.

    Full documentation: https://gtfs.org/schedule/reference/#pathwaystxt
    """

    WALKWAY = 1
    STAIRS = 2
    MOVING_SIDEWALK = 3
    ESCALATOR = 4
    ELEVATOR = 5
    FARE_GATE = 6
    EXIT_GATE = 7


class PathwayDirection(IntEnum):
    """Indicates the direction that a pathway can be taken."""

    UNIDIRECTIONAL = 0
    BIDIRECTIONAL = 1


class TranslationTable(IntEnum):
    """Table containing the field to be translated.

    Parses from its integer code or from the GTFS table name, e.g. "stop_times".
    """

    AGENCY = 0
    STOPS = 1
    ROUTES = 2
    TRIPS = 3
    STOP_TIMES = 4
    FEED_INFO = 5


class AttributionRole(IntEnum):
    """Indicates whether an organization has a role for the dataset."""

    NO = 0
    YES = 1
