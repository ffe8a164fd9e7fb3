"""Configuration for reading GTFS feeds.

Users can change a handful of parameters which control the way feeds are read. These parameters
can be saved as a config file which can be read in repeatedly to make sure the same parameters
are used each time.

Usage:
    ```python
    load_feed("path/to/feed", config=my_config)
    ```

    `my_config` can be a:

    - Path to a config file in yaml/toml/json,
    - List of paths to config files,
    - Dictionary which is in the same structure of a config file, or
    - A `ReaderConfig()` instance.

??? Example "Default Reader Configuration Values"

    ```yaml
    LOADING:
        FILE_EXTENSION: txt
        ENCODING: utf-8
        REQUIRED_TABLES: [agency, stops, routes, trips, stop_times]
        OPTIONAL_TABLES: [calendar, calendar_dates, shapes, transfers, frequencies,
            fare_attributes, fare_rules, levels, pathways, translations, attributions, feed_info]
    PARSING:
        WARN_ON_FIELD_COUNT_MISMATCH: true
    ```

Extended usage:
    Modify the default configuration in-line:

    ```python
    from gtfs_reader.configs import DefaultConfig

    DefaultConfig.LOADING.ENCODING = "latin-1"
    ```
"""

from pydantic import Field
from pydantic.dataclasses import dataclass

from ..models._base.types import TransitFileTypes
from ..params import OPTIONAL_TABLES, REQUIRED_TABLES
from .utils import ConfigItem


@dataclass
class LoadingConfig(ConfigItem):
    """Configuration for locating and opening table files.

    Attributes:
        FILE_EXTENSION: extension of the table files in a feed directory. Defaults to `txt`.
        ENCODING: text encoding of the table files. Defaults to `utf-8`.
        REQUIRED_TABLES: tables which must be present. A missing file fails the feed read.
        OPTIONAL_TABLES: tables read after the required ones. A missing file is an empty table.
    """

    FILE_EXTENSION: TransitFileTypes = "txt"
    ENCODING: str = "utf-8"
    REQUIRED_TABLES: list[str] = Field(default_factory=lambda: list(REQUIRED_TABLES))
    OPTIONAL_TABLES: list[str] = Field(default_factory=lambda: list(OPTIONAL_TABLES))


@dataclass
class ParsingConfig(ConfigItem):
    """Configuration for parsing rows.

    Attributes:
        WARN_ON_FIELD_COUNT_MISMATCH: log a warning when a row doesn't have as many fields as
            the header. The row is passed on as an empty row either way.
    """

    WARN_ON_FIELD_COUNT_MISMATCH: bool = True


@dataclass
class ReaderConfig(ConfigItem):
    """Configuration for GTFS Reader.

    Attributes:
        LOADING: Parameters governing which files are read and how.
        PARSING: Parameters governing how rows are parsed.
    """

    LOADING: LoadingConfig = Field(default_factory=LoadingConfig)
    PARSING: ParsingConfig = Field(default_factory=ParsingConfig)


DefaultConfig = ReaderConfig()
