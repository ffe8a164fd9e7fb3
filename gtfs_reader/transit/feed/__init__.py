"""GTFS feed store and the queries of its tables."""

from .agencies import *
from .calendar import *
from .fares import *
from .feed import Feed
from .frequencies import *
from .routes import *
from .shapes import *
from .stations import *
from .stop_times import *
from .stops import *
from .trips import *
