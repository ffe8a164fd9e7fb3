"""Tests for /utils/data.

Run just these tests using `pytest tests/test_utils/test_data.py`
"""

from gtfs_reader.models.gtfs.records import LevelRecord
from gtfs_reader.utils.data import filter_records, first_record

LEVELS = [
    LevelRecord(level_id="L0", level_index=0, level_name="Street"),
    LevelRecord(level_id="L1", level_index=-1, level_name="Mezzanine"),
    LevelRecord(level_id="L2", level_index=-1, level_name="Platform"),
    LevelRecord(level_id="L3", level_index=1, level_name="Street"),
]


def test_first_record():
    assert first_record(LEVELS, level_id="L1").level_name == "Mezzanine"
    assert first_record(LEVELS, level_name="Street").level_id == "L0"
    assert first_record(LEVELS, level_name="Street", level_index=1).level_id == "L3"
    assert first_record(LEVELS, level_id="L9") is None
    assert first_record([], level_id="L0") is None


def test_filter_records():
    selected = filter_records(LEVELS, level_index=-1)
    assert [level.level_id for level in selected] == ["L1", "L2"]
    assert filter_records(LEVELS, level_id="L9") == []
    assert filter_records(LEVELS) == LEVELS
    assert filter_records(LEVELS) is not LEVELS


def test_filter_records_sorted():
    selected = filter_records(LEVELS, sort_key=lambda level: level.level_index)
    assert [level.level_id for level in selected] == ["L1", "L2", "L0", "L3"]
    assert [level.level_id for level in LEVELS] == ["L0", "L1", "L2", "L3"]
