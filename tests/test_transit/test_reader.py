"""Tests for reading a table from a text stream.

Run just these tests using `pytest tests/test_transit/test_reader.py`
"""

import io
from functools import partial

import pytest

from gtfs_reader.configs import load_reader_config
from gtfs_reader.logger import GtfsLogger
from gtfs_reader.result import Result, ResultCode
from gtfs_reader.transit import Feed, ReaderState, TableReader
from gtfs_reader.transit.mappers import add_row
from gtfs_reader.utils.io_table import file_opener

AGENCY_HEADER = "agency_id,agency_name,agency_url,agency_timezone\n"
AGENCY_ROW = "DTA,Demo Transit Authority,http://google.com,America/Los_Angeles\n"


def _stream(text: str):
    return partial(io.StringIO, text, newline="\n")


class RowCollector:
    """Row handler which keeps rows and fails on rows with a `fail` field set."""

    def __init__(self):
        self.rows = []

    def __call__(self, row):
        if row.get("fail"):
            return Result(code=ResultCode.INVALID_FIELD_FORMAT, message="bad row")
        self.rows.append(row)
        return Result(records_read=1)


def test_read_rows(request):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    handler = RowCollector()
    reader = TableReader("things", handler)
    assert reader.state == ReaderState.START

    result = reader.read(_stream("a, b,c\n1,2,3\n4,\"5,6\",7\n"))
    assert result.ok
    assert result.records_read == 2
    assert result.table == "things"
    assert reader.state == ReaderState.DONE
    assert reader.field_names == ["a", "b", "c"]
    assert handler.rows == [{"a": "1", "b": "2", "c": "3"}, {"a": "4", "b": "5,6", "c": "7"}]
    GtfsLogger.info(f"--Finished: {request.node.name}")


def test_header_only():
    reader = TableReader("things", RowCollector())
    result = reader.read(_stream("a,b\n"))
    assert result.ok
    assert result.records_read == 0
    assert reader.state == ReaderState.DONE


def test_empty_header():
    reader = TableReader("things", RowCollector())
    result = reader.read(_stream(""))
    assert result.code == ResultCode.INVALID_FIELD_FORMAT
    assert reader.state == ReaderState.FAILED


def test_file_absent(tmp_path):
    reader = TableReader("transfers", RowCollector())
    result = reader.read(file_opener(tmp_path / "transfers.txt", "utf-8"))
    assert result.code == ResultCode.FILE_ABSENT
    assert result.table == "transfers"
    assert reader.state == ReaderState.FAILED



def test_undecodable_stream():
    data = b"a,b\n1,\xe92\n"
    handler = RowCollector()
    reader = TableReader("things", handler)
    result = reader.read(partial(io.TextIOWrapper, io.BytesIO(data), encoding="utf-8"))
    assert result.code == ResultCode.INVALID_FIELD_FORMAT
    assert result.table == "things"
    assert "Can't decode things" in result.message
    assert reader.state == ReaderState.FAILED
    assert not handler.rows


def test_blank_lines_skipped():
    handler = RowCollector()
    result = TableReader("things", handler).read(_stream("a,b\n1,2\n\n\r\n3,4\n\n"))
    assert result.records_read == 2
    assert [row["a"] for row in handler.rows] == ["1", "3"]


def test_crlf_line_endings():
    handler = RowCollector()
    result = TableReader("things", handler).read(_stream("a,b\r\n1,2\r\n3,4\r\n"))
    assert result.ok
    assert handler.rows == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]


def test_field_count_mismatch_is_empty_row(caplog):
    handler = RowCollector()
    result = TableReader("things", handler).read(_stream("a,b\n1,2,3\n"))
    assert result.ok
    assert handler.rows == [{}]
    assert "has 3 fields" in caplog.text


def test_field_count_mismatch_without_warning(caplog):
    config = load_reader_config({"PARSING": {"WARN_ON_FIELD_COUNT_MISMATCH": False}})
    handler = RowCollector()
    TableReader("things", handler, config=config).read(_stream("a,b\n1\n"))
    assert handler.rows == [{}]
    assert "has 1 fields" not in caplog.text


def test_field_count_mismatch_fails_mapping():
    feed = Feed()
    text = AGENCY_HEADER + "DTA,Demo Transit Authority\n"
    result = TableReader("agency", partial(add_row, feed, "agency")).read(_stream(text))
    assert result.code == ResultCode.REQUIRED_FIELD_ABSENT
    assert not feed.agencies


def test_failure_keeps_earlier_records(request):
    GtfsLogger.info(f"--Starting: {request.node.name}")
    handler = RowCollector()
    reader = TableReader("things", handler)
    result = reader.read(_stream("a,fail\n1,\n2,\n3,x\n4,\n"))
    assert result.code == ResultCode.INVALID_FIELD_FORMAT
    assert result.records_read == 2
    assert reader.state == ReaderState.FAILED
    assert [row["a"] for row in handler.rows] == ["1", "2"]
    GtfsLogger.info(f"--Finished: {request.node.name}")


def test_read_into_feed():
    feed = Feed()
    reader = TableReader("agency", partial(add_row, feed, "agency"))
    result = reader.read(_stream(AGENCY_HEADER + AGENCY_ROW))
    assert result.records_read == 1
    assert feed.agencies[0].agency_timezone == "America/Los_Angeles"


def test_reader_reuse():
    reader = TableReader("things", RowCollector())
    reader.read(_stream("a\n1\n"))
    with pytest.raises(RuntimeError):
        reader.read(_stream("a\n1\n"))
