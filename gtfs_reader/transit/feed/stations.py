"""Queries of the gtfs transfers, pathways and levels tables."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import LevelRecord, PathwayRecord, TransferRecord
from ...utils.data import first_record


def transfer_for_stops(
    transfers: list[TransferRecord], from_stop_id: str, to_stop_id: str
) -> Optional[TransferRecord]:
    """Returns the transfer record from one stop to another."""
    return first_record(transfers, from_stop_id=from_stop_id, to_stop_id=to_stop_id)


def pathway_for_id(pathways: list[PathwayRecord], pathway_id: str) -> Optional[PathwayRecord]:
    """Returns the pathway record for a given pathway_id."""
    return first_record(pathways, pathway_id=pathway_id)


def pathway_for_stops(
    pathways: list[PathwayRecord], from_stop_id: str, to_stop_id: str
) -> Optional[PathwayRecord]:
    """Returns the pathway record from one location to another as listed in the table.

    A bidirectional pathway isn't matched in reverse.
    """
    return first_record(pathways, from_stop_id=from_stop_id, to_stop_id=to_stop_id)


def level_for_id(levels: list[LevelRecord], level_id: str) -> Optional[LevelRecord]:
    """Returns the level record for a given level_id."""
    return first_record(levels, level_id=level_id)
