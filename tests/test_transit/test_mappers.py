"""Tests for mapping rows of GTFS tables to records.

Run just these tests using `pytest tests/test_transit/test_mappers.py`
"""

import pytest

from gtfs_reader.logger import GtfsLogger
from gtfs_reader.models.gtfs.records import RouteRecord, StopRecord
from gtfs_reader.models.gtfs.types import (
    FareTransfers,
    PathwayDirection,
    RouteType,
    StopLocationType,
    TranslationTable,
    TripAccess,
    TripDirectionId,
)
from gtfs_reader.result import ResultCode
from gtfs_reader.transit import Feed
from gtfs_reader.transit.mappers import (
    MAPPERS,
    add_row,
    map_fare_attribute,
    map_feed_info,
    map_route,
    map_stop,
    map_stop_time,
    map_translation,
    map_trip,
)

ROUTE_ROW = {
    "route_id": "AB",
    "agency_id": "DTA",
    "route_short_name": "10",
    "route_long_name": "Airport - Bullfrog",
    "route_desc": "",
    "route_type": "3",
}

STOP_ROW = {
    "stop_id": "FUR_CREEK_RES",
    "stop_name": "Furnace Creek Resort (Demo)",
    "stop_desc": "",
    "stop_lat": "36.425288",
    "stop_lon": "-117.133162",
    "zone_id": "",
    "stop_url": "",
}


def test_map_route(request):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    route = map_route(ROUTE_ROW)
    assert isinstance(route, RouteRecord)
    assert route.route_type == RouteType.BUS
    assert route.route_short_name == "10"
    assert route.route_sort_order == 0
    assert route.route_color == ""
    GtfsLogger.info(f"--Finished: {request.node.name}")


route_name_cases = [
    # Test case format: (route_short_name, route_long_name)
    ("10", ""),
    ("", "Airport - Bullfrog"),
]


@pytest.mark.parametrize(("short_name", "long_name"), route_name_cases)
def test_route_needs_one_name(short_name, long_name):
    row = {**ROUTE_ROW, "route_short_name": short_name, "route_long_name": long_name}
    assert map_route(row).route_id == "AB"


def test_route_without_names(request):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    feed = Feed()
    row = {**ROUTE_ROW, "route_short_name": "", "route_long_name": ""}
    result = add_row(feed, "routes", row)
    assert result.code == ResultCode.REQUIRED_FIELD_ABSENT
    assert "route_long_name" in result.message
    assert not feed.routes
    GtfsLogger.info(f"--Finished: {request.node.name}")


def test_map_stop():
    stop = map_stop(STOP_ROW)
    assert isinstance(stop, StopRecord)
    assert stop.coordinates_present
    assert stop.stop_lat == pytest.approx(36.425288)
    assert stop.stop_lon == pytest.approx(-117.133162)
    assert stop.location_type == StopLocationType.GENERIC_NODE
    assert stop.wheelchair_boarding == TripAccess.NO_INFO


def test_map_stop_without_coordinates():
    row = {**STOP_ROW, "stop_lat": "", "stop_lon": "", "location_type": "3"}
    stop = map_stop(row)
    assert not stop.coordinates_present
    assert stop.stop_lat == 0.0


lone_coordinate_cases = [
    # Test case format: (stop_lat, stop_lon)
    ("36.425288", ""),
    ("", "-117.133162"),
    ("120", ""),
]


@pytest.mark.parametrize(("lat", "lon"), lone_coordinate_cases)
def test_map_stop_lone_coordinate(lat, lon):
    stop = map_stop({**STOP_ROW, "stop_lat": lat, "stop_lon": lon})
    assert not stop.coordinates_present
    assert (stop.stop_lat, stop.stop_lon) == (0.0, 0.0)


def test_map_trip_empty_direction():
    row = {
        "route_id": "STBA",
        "service_id": "FULLW",
        "trip_id": "STBA",
        "trip_headsign": "Shuttle",
        "direction_id": "",
        "block_id": "",
        "shape_id": "",
    }
    trip = map_trip(row)
    assert trip.direction_id == TripDirectionId.DEFAULT_DIRECTION
    assert trip.bikes_allowed == TripAccess.NO_INFO


def test_map_stop_time_empty_times():
    row = {
        "trip_id": "AB1",
        "arrival_time": "",
        "departure_time": "",
        "stop_id": "BEATTY_AIRPORT",
        "stop_sequence": "2",
    }
    stop_time = map_stop_time(row)
    assert not stop_time.arrival_time.is_provided()
    assert not stop_time.departure_time.is_provided()
    assert stop_time.stop_sequence == 2


def test_map_fare_attribute_default_transfers():
    row = {
        "fare_id": "p",
        "price": "1.25",
        "currency_type": "USD",
        "payment_method": "0",
        "transfers": "",
    }
    fare = map_fare_attribute(row)
    assert fare.transfers == FareTransfers.UNLIMITED
    assert fare.price == 1.25


def test_map_feed_info_optional_dates():
    row = {
        "feed_publisher_name": "DTA",
        "feed_publisher_url": "http://google.com",
        "feed_lang": "en",
    }
    feed_info = map_feed_info(row)
    assert not feed_info.feed_start_date.is_provided()
    assert feed_info.feed_version == ""


translation_table_cases = [
    # Test case format: (table_name, expected)
    ("stops", TranslationTable.STOPS),
    ("feed_info", TranslationTable.FEED_INFO),
    ("2", TranslationTable.ROUTES),
]


@pytest.mark.parametrize(("table_name", "expected"), translation_table_cases)
def test_map_translation_table(table_name, expected):
    row = {
        "table_name": table_name,
        "field_name": "stop_name",
        "language": "es",
        "translation": "Parada",
    }
    assert map_translation(row).translation_table == expected


add_row_failure_cases = [
    # Test case format: (table_name, row, expected_code)
    ("routes", {"route_id": "AB", "route_short_name": "10"}, ResultCode.REQUIRED_FIELD_ABSENT),
    ("routes", {**ROUTE_ROW, "route_type": "99"}, ResultCode.INVALID_FIELD_FORMAT),
    ("stops", {**STOP_ROW, "stop_lat": "91"}, ResultCode.INVALID_FIELD_FORMAT),
    ("stops", {**STOP_ROW, "stop_lat": "abc", "stop_lon": ""}, ResultCode.INVALID_FIELD_FORMAT),
    ("stops", {**STOP_ROW, "stop_lat": "", "stop_lon": "east"}, ResultCode.INVALID_FIELD_FORMAT),
    ("stops", {}, ResultCode.REQUIRED_FIELD_ABSENT),
    (
        "calendar_dates",
        {"service_id": "FULLW", "date": "20070230", "exception_type": "2"},
        ResultCode.INVALID_FIELD_FORMAT,
    ),
    (
        "stop_times",
        {
            "trip_id": "AB1",
            "arrival_time": "8:00:00",
            "departure_time": "8:00:00",
            "stop_id": "BEATTY_AIRPORT",
            "stop_sequence": "-1",
        },
        ResultCode.INVALID_FIELD_FORMAT,
    ),
    (
        "stop_times",
        {
            "trip_id": "AB1",
            "arrival_time": "1:2\u00b2:00",
            "departure_time": "1:22:00",
            "stop_id": "BEATTY_AIRPORT",
            "stop_sequence": "1",
        },
        ResultCode.INVALID_FIELD_FORMAT,
    ),
    (
        "routes",
        {**ROUTE_ROW, "route_sort_order": "1_000"},
        ResultCode.INVALID_FIELD_FORMAT,
    ),
    (
        "pathways",
        {
            "pathway_id": "P1",
            "from_stop_id": "A",
            "to_stop_id": "B",
            "pathway_mode": "8",
            "is_bidirectional": "1",
        },
        ResultCode.INVALID_FIELD_FORMAT,
    ),
]


@pytest.mark.parametrize(("table_name", "row", "expected_code"), add_row_failure_cases)
def test_add_row_failures(request, table_name, row, expected_code):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    feed = Feed()
    result = add_row(feed, table_name, row)
    assert not result
    assert result.code == expected_code
    assert result.table == table_name
    assert not feed.get_table(table_name)
    GtfsLogger.info(f"--Finished: {request.node.name}")


def test_add_row_appends(request):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    feed = Feed()
    result = add_row(feed, "routes", ROUTE_ROW)
    assert result.ok
    assert result.records_read == 1
    assert feed.routes[0].route_id == "AB"

    pathway_row = {
        "pathway_id": "P1",
        "from_stop_id": "A",
        "to_stop_id": "B",
        "pathway_mode": "1",
        "is_bidirectional": "1",
        "length": "12.5",
    }
    assert add_row(feed, "pathways", pathway_row)
    assert feed.pathways[0].is_bidirectional == PathwayDirection.BIDIRECTIONAL
    GtfsLogger.info(f"--Finished: {request.node.name}")


def test_add_row_unknown_table():
    with pytest.raises(ValueError):
        add_row(Feed(), "vehicles", {})


def test_all_tables_have_mappers():
    assert set(MAPPERS) == {*Feed.table_names, "feed_info"}
