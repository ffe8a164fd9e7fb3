"""Queries of a gtfs shapes table."""

from __future__ import annotations

from ...models.gtfs.records import ShapePointRecord
from ...utils.data import filter_records


def shape_for_shape_id(
    shapes: list[ShapePointRecord], shape_id: str, sort_by_sequence: bool = True
) -> list[ShapePointRecord]:
    """Returns the shape points of a given shape_id, sorted by shape_pt_sequence by default."""
    return filter_records(
        shapes,
        sort_key=(lambda p: p.shape_pt_sequence) if sort_by_sequence else None,
        shape_id=shape_id,
    )


def shape_ids(shapes: list[ShapePointRecord]) -> list[str]:
    """Unique shape_ids in order of first appearance."""
    return list(dict.fromkeys(p.shape_id for p in shapes))
