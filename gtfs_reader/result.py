"""Outcome of reading a table or a feed."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ResultCode(str, Enum):
    """Outcome codes of table and feed reads."""

    OK = "ok"
    INVALID_GTFS_PATH = "invalid_gtfs_path"
    FILE_ABSENT = "file_absent"
    REQUIRED_FIELD_ABSENT = "required_field_absent"
    INVALID_FIELD_FORMAT = "invalid_field_format"


class Result(BaseModel):
    """Outcome of an operation which doesn't raise.

    Attributes:
        code: outcome code. `ResultCode.OK` on success.
        message: human readable detail. Empty on success.
        table: name of the table the outcome refers to, if any.
        records_read: number of records appended before the operation finished or failed.
    """

    model_config = ConfigDict(frozen=True)

    code: ResultCode = ResultCode.OK
    message: str = ""
    table: str = ""
    records_read: int = 0

    @property
    def ok(self) -> bool:
        """True if the code is `ResultCode.OK`."""
        return self.code == ResultCode.OK

    def __bool__(self) -> bool:
        """Truthy on success."""
        return self.ok
