"""Functions for reading GTFS feeds into a Feed."""

from functools import partial
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from ..configs import ConfigInputTypes, DefaultConfig, ReaderConfig, load_reader_config
from ..errors import FeedReadError
from ..logger import GtfsLogger
from ..result import Result, ResultCode
from ..utils.io_table import ARCHIVE_SUFFIXES, feed_dir_from_path, file_opener, table_path
from .feed.feed import Feed
from .mappers import add_row
from .reader import TableReader


def read_table(
    feed: Feed,
    table_name: str,
    feed_path: Optional[Path] = None,
    open_stream: Optional[Callable[[], TextIO]] = None,
    config: ReaderConfig = DefaultConfig,
) -> Result:
    """Read one GTFS table into the feed.

    Args:
        feed: Feed to add the records to.
        table_name: GTFS name of the table, e.g. `stop_times`.
        feed_path: directory holding the table file. Used if open_stream isn't given.
        open_stream: callable returning a text stream of the table.
        config: ReaderConfig. Defaults to DefaultConfig.

    Returns:
        Result of reading the table. Records read before a failure stay in the feed.
    """
    if open_stream is None:
        if feed_path is None:
            msg = "Either feed_path or open_stream is required to read a table."
            raise ValueError(msg)
        path = table_path(feed_path, table_name, config.LOADING.FILE_EXTENSION)
        open_stream = file_opener(path, config.LOADING.ENCODING)

    GtfsLogger.debug(f"...reading {table_name}.")
    reader = TableReader(table_name, partial(add_row, feed, table_name), config)
    result = reader.read(open_stream)
    if result.ok:
        GtfsLogger.info(f"Read {result.records_read} {table_name} records.")
    return result


def _is_feed_path(path: Path) -> bool:
    return path.is_dir() or (path.is_file() and path.suffix.lower() in ARCHIVE_SUFFIXES)


def read_feed(
    feed: Feed, feed_path: Union[Path, str], config: ReaderConfig = DefaultConfig
) -> Result:
    """Read the tables of a GTFS feed directory or zip archive into feed.

    Required tables are read first, then the optional ones. A missing optional table is left
    empty. Reading stops at the first table which fails.

    Args:
        feed: Feed to add the records to.
        feed_path: directory or zip archive holding the table files.
        config: ReaderConfig. Defaults to DefaultConfig.

    Returns:
        Result with code:
            - `INVALID_GTFS_PATH` if feed_path isn't a directory or zip archive,
            - the code of the first failing table,
            - `OK` with the total number of records read otherwise.
    """
    feed_path = Path(feed_path)
    if not _is_feed_path(feed_path):
        msg = f"Feed path is not a directory or zip archive: {feed_path}"
        GtfsLogger.error(msg)
        return Result(code=ResultCode.INVALID_GTFS_PATH, message=msg)

    GtfsLogger.info(f"Reading GTFS feed tables from {feed_path}")
    feed.feed_path = feed_path
    records_read = 0

    with feed_dir_from_path(feed_path) as feed_dir:
        for table_name in config.LOADING.REQUIRED_TABLES:
            result = read_table(feed, table_name, feed_path=feed_dir, config=config)
            if not result.ok:
                GtfsLogger.error(f"Failed reading required table {table_name}: {result.message}")
                return result
            records_read += result.records_read

        for table_name in config.LOADING.OPTIONAL_TABLES:
            result = read_table(feed, table_name, feed_path=feed_dir, config=config)
            if result.code == ResultCode.FILE_ABSENT:
                GtfsLogger.debug(f"Optional table {table_name} not in feed.")
                continue
            if not result.ok:
                GtfsLogger.error(f"Failed reading table {table_name}: {result.message}")
                return result
            records_read += result.records_read

    return Result(records_read=records_read)


def load_feed(
    feed_path: Union[Path, str], config: Optional[ConfigInputTypes] = None
) -> Feed:
    """Create a Feed object from the path to a GTFS transit feed.

    Args:
        feed_path: directory or zip archive holding the table files.
        config: ReaderConfig, dictionary or path(s) to config files. Defaults to DefaultConfig.

    Raises:
        FeedReadError: if the feed can't be read.
    """
    config = DefaultConfig if config is None else load_reader_config(config)
    feed = Feed()
    result = read_feed(feed, feed_path, config)
    if not result.ok:
        msg = f"Error reading feed {feed_path}. {result.code.value}: {result.message}"
        raise FeedReadError(msg)
    return feed
