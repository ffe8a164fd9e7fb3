"""GTFS Reader: decode, validate and query GTFS feeds."""

__version__ = "0.1.0"

from .configs import DefaultConfig, ReaderConfig, load_reader_config
from .logger import GtfsLogger, setup_logging
from .result import Result, ResultCode
from .time import CalendarDate, TimeOfDay
from .transit.feed.feed import Feed
from .transit.io import load_feed, read_feed, read_table

__all__ = [
    "CalendarDate",
    "DefaultConfig",
    "Feed",
    "GtfsLogger",
    "ReaderConfig",
    "Result",
    "ResultCode",
    "TimeOfDay",
    "load_feed",
    "load_reader_config",
    "read_feed",
    "read_table",
    "setup_logging",
]
