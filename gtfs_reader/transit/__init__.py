"""Reading GTFS tables into a Feed."""

from .feed.feed import Feed
from .io import load_feed, read_feed, read_table
from .mappers import add_row
from .reader import ReaderState, TableReader
from .tokenizer import split_record
