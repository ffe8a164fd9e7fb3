"""Queries of a gtfs trips table."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import TripRecord
from ...utils.data import filter_records, first_record


def trip_for_id(trips: list[TripRecord], trip_id: str) -> Optional[TripRecord]:
    """Returns the trip record for a given trip_id."""
    return first_record(trips, trip_id=trip_id)


def trips_for_route_id(trips: list[TripRecord], route_id: str) -> list[TripRecord]:
    """Returns trip records for a given route_id in table order."""
    return filter_records(trips, route_id=route_id)


def trips_for_shape_id(trips: list[TripRecord], shape_id: str) -> list[TripRecord]:
    """Returns trip records for a given shape_id in table order."""
    return filter_records(trips, shape_id=shape_id)
