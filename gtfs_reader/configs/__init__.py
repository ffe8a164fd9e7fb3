"""Configuration module for gtfs_reader."""

from pathlib import Path
from typing import Optional, Union

from ..logger import GtfsLogger
from .reader import DefaultConfig, LoadingConfig, ParsingConfig, ReaderConfig
from .utils import _config_data_from_files

ConfigInputTypes = Union[dict, Path, list[Path], ReaderConfig]


def load_reader_config(data: Optional[ConfigInputTypes] = None) -> ReaderConfig:
    """Load the ReaderConfig.

    Args:
        data: a ReaderConfig, a dictionary, or a path or list of paths to config files.
            Defaults to None, which returns the default configuration.
    """
    if isinstance(data, ReaderConfig):
        return data
    if data is None:
        return ReaderConfig()
    if isinstance(data, dict):
        return ReaderConfig().update(data)
    if isinstance(data, (str, Path)) or (
        isinstance(data, list) and all(isinstance(d, (str, Path)) for d in data)
    ):
        if isinstance(data, list):
            data = [Path(d) for d in data]
        else:
            data = Path(data)
        return load_reader_config(_config_data_from_files(data, ReaderConfig))
    msg = "No valid configuration data found."
    GtfsLogger.error(msg + f"\n   Found: {data}.")
    raise ValueError(msg)


__all__ = [
    "ConfigInputTypes",
    "DefaultConfig",
    "LoadingConfig",
    "ParsingConfig",
    "ReaderConfig",
    "load_reader_config",
]
