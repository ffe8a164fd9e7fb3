"""Tests for the GTFS record models.

Run just these tests using `pytest tests/test_models/test_records.py`
"""

import pytest
from pydantic import ValidationError

from gtfs_reader.models.gtfs.records import (
    FeedInfoRecord,
    ShapePointRecord,
    StopRecord,
    StopTimeRecord,
    TranslationRecord,
)
from gtfs_reader.models.gtfs.types import RouteType, StopLocationType, TranslationTable
from gtfs_reader.time import TimeOfDay


def test_stop_record_defaults():
    stop = StopRecord(stop_id="S1")
    assert stop.location_type == StopLocationType.GENERIC_NODE
    assert stop.stop_name == ""
    assert (stop.stop_lat, stop.stop_lon) == (0.0, 0.0)


def test_record_validates_assignment():
    stop = StopRecord(stop_id="S1", stop_lat=36.4, stop_lon=-117.1)
    with pytest.raises(ValidationError):
        stop.stop_lat = 91.0
    with pytest.raises(ValidationError):
        stop.location_type = 9


invalid_record_cases = [
    # Test case format: (record_type, fields)
    (StopRecord, {"stop_id": "S1", "stop_lon": 181.0}),
    (StopRecord, {"stop_id": "S1", "platform": "2"}),
    (StopTimeRecord, {"trip_id": "T1", "stop_id": "S1", "stop_sequence": -1}),
    (ShapePointRecord, {"shape_id": "SH1", "shape_dist_traveled": -0.5}),
]


@pytest.mark.parametrize(("record_type", "fields"), invalid_record_cases)
def test_invalid_records(record_type, fields):
    with pytest.raises(ValidationError):
        record_type(**fields)


def test_stop_time_record_times():
    stop_time = StopTimeRecord(
        trip_id="T1", stop_id="S1", stop_sequence=0, arrival_time=TimeOfDay("25:10:00")
    )
    assert stop_time.arrival_time.total_seconds == 25 * 3600 + 10 * 60
    assert not stop_time.departure_time.is_provided()
    # default times aren't shared between records
    other = StopTimeRecord(trip_id="T2", stop_id="S1", stop_sequence=0)
    assert other.departure_time is not stop_time.departure_time


def test_feed_info_record_empty():
    feed_info = FeedInfoRecord()
    assert feed_info.feed_publisher_name == ""
    assert not feed_info.feed_end_date.is_provided()


def test_translation_record():
    translation = TranslationRecord(
        translation_table=TranslationTable.STOPS,
        field_name="stop_name",
        language="es",
        translation="Parada",
        record_id="S1",
    )
    assert translation.translation_table == TranslationTable.STOPS
    assert TranslationRecord.table_name == "translations"


def test_extended_route_types():
    assert RouteType(3) == RouteType.BUS
    assert RouteType(1700).name == "MISCELLANEOUS_SERVICE"
