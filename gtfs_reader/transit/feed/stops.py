"""Queries of a gtfs stops table."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import StopRecord
from ...utils.data import filter_records, first_record


def stop_for_id(stops: list[StopRecord], stop_id: str) -> Optional[StopRecord]:
    """Returns the stop record for a given stop_id."""
    return first_record(stops, stop_id=stop_id)


def child_stops_for_station(stops: list[StopRecord], parent_station: str) -> list[StopRecord]:
    """Returns stop records with the given parent_station in table order."""
    return filter_records(stops, parent_station=parent_station)
