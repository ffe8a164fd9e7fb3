"""Queries of a gtfs stop_times table."""

from __future__ import annotations

from ...models.gtfs.records import StopTimeRecord
from ...utils.data import filter_records


def _by_stop_sequence(stop_time: StopTimeRecord) -> int:
    return stop_time.stop_sequence


def stop_times_for_trip_id(
    stop_times: list[StopTimeRecord], trip_id: str, sort_by_sequence: bool = True
) -> list[StopTimeRecord]:
    """Returns stop_time records for a given trip_id.

    Args:
        stop_times: stop_times table. Not modified.
        trip_id: trip to select.
        sort_by_sequence: if True, sort by stop_sequence. Records with equal stop_sequence keep
            their table order.
    """
    return filter_records(
        stop_times, sort_key=_by_stop_sequence if sort_by_sequence else None, trip_id=trip_id
    )


def stop_times_for_stop_id(stop_times: list[StopTimeRecord], stop_id: str) -> list[StopTimeRecord]:
    """Returns stop_time records for a given stop_id in table order."""
    return filter_records(stop_times, stop_id=stop_id)
