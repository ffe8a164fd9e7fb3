"""Reads one GTFS table from a text stream.

A `TableReader` drives the tokenizer and a row handler over the lines of one stream:

    START -> HEADER_READ -> ROW_LOOP -> DONE
      |                        |
      +-------> FAILED <-------+

Records appended by the row handler before a failure are kept.

!!! Example "Reading stops from a file"

    ```python
    from functools import partial
    from gtfs_reader.transit.reader import TableReader

    reader = TableReader("stops", partial(add_row, feed, "stops"))
    result = reader.read(partial(open, "stops.txt", encoding="utf-8", newline="\\n"))
    ```
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Optional, TextIO

from ..configs import DefaultConfig, ReaderConfig
from ..logger import GtfsLogger
from ..result import Result, ResultCode
from .fields import Row
from .tokenizer import split_record

BLANK_LINES = ["", "\r"]

# bytes a surrogateescape stream couldn't decode
UNDECODED_BYTES = re.compile("[\udc80-\udcff]")


class ReaderState(str, Enum):
    """States of a TableReader."""

    START = "start"
    HEADER_READ = "header_read"
    ROW_LOOP = "row_loop"
    DONE = "done"
    FAILED = "failed"


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class TableReader:
    """Reads rows of one table and hands each of them to a row handler.

    Attributes:
        table_name: name of the table being read, used in results and logs.
        row_handler: callable which takes a row and returns a Result.
        config: ReaderConfig governing the parsing.
        state: ReaderState of the reader.
        field_names: field names from the header once it is read.
        records_read: number of rows the row handler accepted.
    """

    def __init__(
        self,
        table_name: str,
        row_handler: Callable[[Row], Result],
        config: ReaderConfig = DefaultConfig,
    ):
        """Constructor for TableReader."""
        self.table_name = table_name
        self.row_handler = row_handler
        self.config = config
        self.state = ReaderState.START
        self.field_names: list[str] = []
        self.records_read = 0
        self._line_number = 0

    def _fail(self, code: ResultCode, message: str) -> Result:
        self.state = ReaderState.FAILED
        return Result(
            code=code, message=message, table=self.table_name, records_read=self.records_read
        )

    def _fail_undecodable(self, reason: str) -> Result:
        msg = f"Can't decode {self.table_name} line {self._line_number}: {reason}"
        GtfsLogger.error(msg)
        return self._fail(ResultCode.INVALID_FIELD_FORMAT, msg)

    def _read_header(self, stream: TextIO) -> Optional[Result]:
        header = _strip_newline(stream.readline())
        self._line_number = 1
        if UNDECODED_BYTES.search(header):
            return self._fail_undecodable(f"invalid {self.config.LOADING.ENCODING} bytes")
        if not header:
            return self._fail(
                ResultCode.INVALID_FIELD_FORMAT, f"Empty header in table {self.table_name}."
            )
        self.field_names = split_record(header, is_header=True)
        self.state = ReaderState.HEADER_READ
        GtfsLogger.debug(f"{self.table_name} fields: {self.field_names}")
        return None

    def _row_from_line(self, line: str) -> Row:
        values = split_record(line)
        if len(values) != len(self.field_names):
            if self.config.PARSING.WARN_ON_FIELD_COUNT_MISMATCH:
                GtfsLogger.warning(
                    f"{self.table_name} line {self._line_number} has {len(values)} fields, "
                    f"header has {len(self.field_names)}. Reading it as an empty row."
                )
            return {}
        return dict(zip(self.field_names, values))

    def _read_rows(self, stream: TextIO) -> Result:
        self.state = ReaderState.ROW_LOOP
        for raw_line in stream:
            self._line_number += 1
            line = _strip_newline(raw_line)
            if line in BLANK_LINES:
                continue
            if UNDECODED_BYTES.search(line):
                return self._fail_undecodable(f"invalid {self.config.LOADING.ENCODING} bytes")

            result = self.row_handler(self._row_from_line(line))
            if not result.ok:
                GtfsLogger.error(
                    f"Failed reading {self.table_name} line {self._line_number}: {result.message}"
                )
                return self._fail(result.code, result.message)
            self.records_read += 1

        self.state = ReaderState.DONE
        return Result(table=self.table_name, records_read=self.records_read)

    def read(self, open_stream: Callable[[], TextIO]) -> Result:
        """Read the table from the stream returned by open_stream.

        Args:
            open_stream: callable returning a text stream of the table. The stream is closed
                when reading finishes or fails.

        Returns:
            Result with code:
                - `FILE_ABSENT` if the stream can't be opened,
                - `INVALID_FIELD_FORMAT` if the header is missing or a line can't be decoded
                  with the stream's encoding,
                - the code of the row handler's first failing result,
                - `OK` with the number of records read otherwise.
        """
        if self.state != ReaderState.START:
            msg = f"TableReader for {self.table_name} already used. State: {self.state}"
            raise RuntimeError(msg)

        try:
            stream = open_stream()
        except OSError as e:
            GtfsLogger.debug(f"Can't open {self.table_name}: {e}")
            return self._fail(ResultCode.FILE_ABSENT, f"File for {self.table_name} not found.")

        with stream:
            try:
                fail = self._read_header(stream)
                if fail is not None:
                    return fail
                result = self._read_rows(stream)
            except UnicodeDecodeError as e:
                msg = f"Can't decode {self.table_name} after line {self._line_number}: {e.reason}"
                GtfsLogger.error(msg)
                return self._fail(ResultCode.INVALID_FIELD_FORMAT, msg)

        GtfsLogger.debug(f"Read {self.records_read} records of {self.table_name}.")
        return result
