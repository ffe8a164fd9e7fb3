"""Queries of a gtfs routes table."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import RouteRecord
from ...utils.data import filter_records, first_record


def route_for_id(routes: list[RouteRecord], route_id: str) -> Optional[RouteRecord]:
    """Returns the route record for a given route_id."""
    return first_record(routes, route_id=route_id)


def routes_for_agency_id(routes: list[RouteRecord], agency_id: str) -> list[RouteRecord]:
    """Returns route records of an agency in table order."""
    return filter_records(routes, agency_id=agency_id)
