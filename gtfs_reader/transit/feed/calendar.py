"""Queries of the gtfs calendar and calendar_dates tables."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import CalendarDateRecord, CalendarRecord
from ...utils.data import filter_records, first_record


def calendar_for_service_id(
    calendar: list[CalendarRecord], service_id: str
) -> Optional[CalendarRecord]:
    """Returns the calendar record for a given service_id."""
    return first_record(calendar, service_id=service_id)


def calendar_dates_for_service_id(
    calendar_dates: list[CalendarDateRecord], service_id: str, sort_by_date: bool = True
) -> list[CalendarDateRecord]:
    """Returns the service exceptions of a service_id, sorted by date by default.

    Dates sort by their YYYYMMDD text which is chronological.
    """
    return filter_records(
        calendar_dates,
        sort_key=(lambda d: d.date.raw_date) if sort_by_date else None,
        service_id=service_id,
    )
