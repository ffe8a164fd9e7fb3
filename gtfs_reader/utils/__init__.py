"""Utility functions for gtfs_reader."""

from .data import filter_records, first_record
from .io_dict import load_dict, load_merge_dict
from .io_table import feed_dir_from_path, unzip_file
from .utils import is_ascii_digits, merge_dicts
