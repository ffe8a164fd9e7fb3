"""Helpers for filtering and sorting lists of records."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


def _matches(record: BaseModel, selection: dict[str, Any]) -> bool:
    return all(getattr(record, field) == value for field, value in selection.items())


def first_record(records: list[RecordT], **selection: Any) -> Optional[RecordT]:
    """First record whose fields equal all the values in `selection`, or None.

    The record itself is returned, not a copy.

    ```python
    first_record(feed.stops, stop_id="STAGECOACH")
    ```
    """
    for record in records:
        if _matches(record, selection):
            return record
    return None


def filter_records(
    records: list[RecordT],
    sort_key: Optional[Callable[[RecordT], Any]] = None,
    **selection: Any,
) -> list[RecordT]:
    """New list of the records whose fields equal all the values in `selection`.

    The list is new but its records are the ones in `records`.

    Args:
        records: list of records to filter. Not modified.
        sort_key: if given, the result is sorted (stable, ascending) with this key.
        selection: field names and the values they must equal.
    """
    selected = [r for r in records if _matches(r, selection)]
    if sort_key is not None:
        selected = sorted(selected, key=sort_key)
    return selected
