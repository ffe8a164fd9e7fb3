"""Models for GTFS field types, records and tables."""

from .types import *
