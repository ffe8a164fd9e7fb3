"""Queries of a gtfs agency table."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import AgencyRecord
from ...utils.data import first_record


def agency_for_id(agencies: list[AgencyRecord], agency_id: str) -> Optional[AgencyRecord]:
    """Returns the agency record for a given agency_id.

    agency_id is conditionally required in GTFS: it may be empty if the feed has a single agency,
    so an empty agency_id returns the sole agency of such a feed.
    """
    if not agency_id and len(agencies) == 1:
        return agencies[0]
    return first_record(agencies, agency_id=agency_id)
