"""Queries of a gtfs frequencies table."""

from __future__ import annotations

from ...models.gtfs.records import FrequencyRecord
from ...utils.data import filter_records


def frequencies_for_trip_id(
    frequencies: list[FrequencyRecord], trip_id: str
) -> list[FrequencyRecord]:
    """Returns frequency records for a given trip_id in table order."""
    return filter_records(frequencies, trip_id=trip_id)
