"""Tests for the pandera models of exported GTFS tables.

Run just these tests using `pytest tests/test_models/test_tables.py`
"""

import pandas as pd
import pytest
from pandera.errors import SchemaError, SchemaErrors

from gtfs_reader.models.gtfs.tables import (
    TABLE_MODELS,
    FrequenciesTable,
    RoutesTable,
    ShapesTable,
    StopTimesTable,
)


def _stop_times_df(**overrides):
    data = {
        "trip_id": ["AB1", "AB1"],
        "stop_id": ["BEATTY_AIRPORT", "BULLFROG"],
        "stop_sequence": [1, 2],
        "arrival_time": ["8:00:00", ""],
        "departure_time": ["8:00:00", "28:10:00"],
        "pickup_type": [0, 0],
        "drop_off_type": [0, 1],
        "shape_dist_traveled": [0.0, 10.5],
        "timepoint": [1, 0],
    }
    data.update(overrides)
    return pd.DataFrame(data)


def test_stop_times_table_valid():
    StopTimesTable.validate(_stop_times_df(), lazy=True)


invalid_stop_times_cases = [
    {"arrival_time": ["8:00", ""]},
    {"stop_sequence": [1, 1]},
    {"pickup_type": [0, 4]},
    {"shape_dist_traveled": [-1.0, 0.0]},
]


@pytest.mark.parametrize("overrides", invalid_stop_times_cases)
def test_stop_times_table_invalid(overrides):
    with pytest.raises((SchemaError, SchemaErrors)):
        StopTimesTable.validate(_stop_times_df(**overrides), lazy=True)


def test_routes_table_extended_type():
    df = pd.DataFrame(
        {
            "route_id": ["AB", "BFC"],
            "route_type": [3, 700],
            "route_short_name": ["10", ""],
            "route_long_name": ["", "Bullfrog - Furnace Creek Resort"],
            "route_sort_order": [0, 1],
        }
    )
    RoutesTable.validate(df)
    with pytest.raises(SchemaError):
        RoutesTable.validate(df.assign(route_type=[3, 99]))


def test_shapes_table_out_of_range():
    df = pd.DataFrame(
        {
            "shape_id": ["10237"],
            "shape_pt_lat": [95.0],
            "shape_pt_lon": [-79.69],
            "shape_pt_sequence": [50017],
            "shape_dist_traveled": [12669.0],
        }
    )
    with pytest.raises(SchemaError):
        ShapesTable.validate(df)


def test_frequencies_table_unique_start():
    df = pd.DataFrame(
        {
            "trip_id": ["CITY1", "CITY1"],
            "start_time": ["6:00:00", "6:00:00"],
            "end_time": ["7:59:59", "9:59:59"],
            "headway_secs": [1800, 600],
            "exact_times": [0, 0],
        }
    )
    with pytest.raises(SchemaError):
        FrequenciesTable.validate(df)


def test_table_models():
    assert set(TABLE_MODELS) == {
        "agency",
        "stops",
        "routes",
        "trips",
        "stop_times",
        "shapes",
        "frequencies",
        "calendar",
        "calendar_dates",
    }
