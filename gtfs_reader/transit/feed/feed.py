"""Main functionality for GTFS tables including Feed object."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Optional

import pandas as pd

from ...logger import GtfsLogger
from ...models._base.records import RecordModel
from ...models.gtfs.records import (
    AgencyRecord,
    AttributionRecord,
    CalendarDateRecord,
    CalendarRecord,
    FareAttributeRecord,
    FareRuleRecord,
    FeedInfoRecord,
    FrequencyRecord,
    LevelRecord,
    PathwayRecord,
    RouteRecord,
    ShapePointRecord,
    StopRecord,
    StopTimeRecord,
    TransferRecord,
    TranslationRecord,
    TripRecord,
)
from ...models.gtfs.tables import TABLE_MODELS
from ...models.gtfs.types import TranslationTable
from ...utils.data import first_record
from ...utils.models import order_fields_from_data_model, records_to_df, validate_df_to_model
from .agencies import agency_for_id
from .calendar import calendar_dates_for_service_id, calendar_for_service_id
from .fares import fare_attribute_for_id, fare_rule_for_id, fare_rules_for_route_id
from .frequencies import frequencies_for_trip_id
from .routes import route_for_id, routes_for_agency_id
from .shapes import shape_for_shape_id, shape_ids
from .stations import level_for_id, pathway_for_id, pathway_for_stops, transfer_for_stops
from .stop_times import stop_times_for_stop_id, stop_times_for_trip_id
from .stops import child_stops_for_station, stop_for_id
from .trips import trip_for_id, trips_for_route_id, trips_for_shape_id


class Feed:
    """In-memory GTFS feed: one list of records per table plus the feed info.

    Tables keep the order records were added in. Records are only ever added, through the
    `add_*` methods or by reading a feed with `gtfs_reader.transit.io.read_feed`. Queries return
    new lists and never change a table.

    Point lookups (`get_stop`, `get_route`...) return the first matching record or None.

    Lookups and selections return the records stored in the tables, not copies. Editing a
    returned record edits the table, and the edit is validated as on any record.

    Attributes:
        table_names (list[str]): GTFS names of the tables in the feed.
        agencies (list[AgencyRecord]): agency table.
        stops (list[StopRecord]): stops table.
        routes (list[RouteRecord]): routes table.
        trips (list[TripRecord]): trips table.
        stop_times (list[StopTimeRecord]): stop_times table.
        calendar (list[CalendarRecord]): calendar table.
        calendar_dates (list[CalendarDateRecord]): calendar_dates table.
        fare_attributes (list[FareAttributeRecord]): fare_attributes table.
        fare_rules (list[FareRuleRecord]): fare_rules table.
        shapes (list[ShapePointRecord]): shapes table.
        frequencies (list[FrequencyRecord]): frequencies table.
        transfers (list[TransferRecord]): transfers table.
        pathways (list[PathwayRecord]): pathways table.
        levels (list[LevelRecord]): levels table.
        translations (list[TranslationRecord]): translations table.
        attributions (list[AttributionRecord]): attributions table.
        feed_info (FeedInfoRecord): feed metadata. Empty until set.
        feed_path (Optional[Path]): where the feed was read from, if it was read.
    """

    # GTFS table name: Feed attribute
    _table_attrs: ClassVar[dict[str, str]] = {
        "agency": "agencies",
        "stops": "stops",
        "routes": "routes",
        "trips": "trips",
        "stop_times": "stop_times",
        "calendar": "calendar",
        "calendar_dates": "calendar_dates",
        "fare_attributes": "fare_attributes",
        "fare_rules": "fare_rules",
        "shapes": "shapes",
        "frequencies": "frequencies",
        "transfers": "transfers",
        "pathways": "pathways",
        "levels": "levels",
        "translations": "translations",
        "attributions": "attributions",
    }

    table_names: ClassVar[list[str]] = list(_table_attrs)

    def __init__(self):
        """Create an empty Feed."""
        self.feed_path: Optional[Path] = None

        self.agencies: list[AgencyRecord] = []
        self.stops: list[StopRecord] = []
        self.routes: list[RouteRecord] = []
        self.trips: list[TripRecord] = []
        self.stop_times: list[StopTimeRecord] = []
        self.calendar: list[CalendarRecord] = []
        self.calendar_dates: list[CalendarDateRecord] = []
        self.fare_attributes: list[FareAttributeRecord] = []
        self.fare_rules: list[FareRuleRecord] = []
        self.shapes: list[ShapePointRecord] = []
        self.frequencies: list[FrequencyRecord] = []
        self.transfers: list[TransferRecord] = []
        self.pathways: list[PathwayRecord] = []
        self.levels: list[LevelRecord] = []
        self.translations: list[TranslationRecord] = []
        self.attributions: list[AttributionRecord] = []
        self.feed_info: FeedInfoRecord = FeedInfoRecord()

    def __repr__(self) -> str:
        """Record count of each non-empty table."""
        counts = ", ".join(
            f"{name}={len(self.get_table(name))}"
            for name in self.table_names
            if self.get_table(name)
        )
        return f"Feed({counts})"

    # Adding records

    def add_record(self, record: RecordModel) -> None:
        """Add a record to the table it belongs to, or set it if it is the feed info."""
        if isinstance(record, FeedInfoRecord):
            self.set_feed_info(record)
            return
        self.get_table(record.table_name).append(record)

    def add_agency(self, agency: AgencyRecord) -> None:
        """Append an agency."""
        self.agencies.append(agency)

    def add_stop(self, stop: StopRecord) -> None:
        """Append a stop."""
        self.stops.append(stop)

    def add_route(self, route: RouteRecord) -> None:
        """Append a route."""
        self.routes.append(route)

    def add_trip(self, trip: TripRecord) -> None:
        """Append a trip."""
        self.trips.append(trip)

    def add_stop_time(self, stop_time: StopTimeRecord) -> None:
        """Append a stop time."""
        self.stop_times.append(stop_time)

    def add_calendar_item(self, calendar_item: CalendarRecord) -> None:
        """Append a weekly service."""
        self.calendar.append(calendar_item)

    def add_calendar_date(self, calendar_date: CalendarDateRecord) -> None:
        """Append a service exception."""
        self.calendar_dates.append(calendar_date)

    def add_fare_attribute(self, fare_attribute: FareAttributeRecord) -> None:
        """Append a fare."""
        self.fare_attributes.append(fare_attribute)

    def add_fare_rule(self, fare_rule: FareRuleRecord) -> None:
        """Append a fare rule."""
        self.fare_rules.append(fare_rule)

    def add_shape(self, shape_point: ShapePointRecord) -> None:
        """Append a shape point."""
        self.shapes.append(shape_point)

    def add_frequency(self, frequency: FrequencyRecord) -> None:
        """Append a frequency."""
        self.frequencies.append(frequency)

    def add_transfer(self, transfer: TransferRecord) -> None:
        """Append a transfer."""
        self.transfers.append(transfer)

    def add_pathway(self, pathway: PathwayRecord) -> None:
        """Append a pathway."""
        self.pathways.append(pathway)

    def add_level(self, level: LevelRecord) -> None:
        """Append a level."""
        self.levels.append(level)

    def add_translation(self, translation: TranslationRecord) -> None:
        """Append a translation."""
        self.translations.append(translation)

    def add_attribution(self, attribution: AttributionRecord) -> None:
        """Append an attribution."""
        self.attributions.append(attribution)

    def set_feed_info(self, feed_info: FeedInfoRecord) -> None:
        """Set the feed info. feed_info.txt has a single row so a second one replaces the first."""
        if self.feed_info.feed_publisher_name:
            GtfsLogger.warning(
                f"Replacing feed info of {self.feed_info.feed_publisher_name} with "
                f"{feed_info.feed_publisher_name}."
            )
        self.feed_info = feed_info

    # Point lookups

    def get_agency(self, agency_id: str = "") -> Optional[AgencyRecord]:
        """Agency with agency_id. An empty agency_id returns the only agency of the feed."""
        return agency_for_id(self.agencies, agency_id)

    def get_stop(self, stop_id: str) -> Optional[StopRecord]:
        """Stop with stop_id."""
        return stop_for_id(self.stops, stop_id)

    def get_route(self, route_id: str) -> Optional[RouteRecord]:
        """Route with route_id."""
        return route_for_id(self.routes, route_id)

    def get_trip(self, trip_id: str) -> Optional[TripRecord]:
        """Trip with trip_id."""
        return trip_for_id(self.trips, trip_id)

    def get_calendar(self, service_id: str) -> Optional[CalendarRecord]:
        """Weekly service with service_id."""
        return calendar_for_service_id(self.calendar, service_id)

    def get_fare_attribute(self, fare_id: str) -> Optional[FareAttributeRecord]:
        """Fare with fare_id."""
        return fare_attribute_for_id(self.fare_attributes, fare_id)

    def get_fare_rule(self, fare_id: str) -> Optional[FareRuleRecord]:
        """First fare rule of fare_id."""
        return fare_rule_for_id(self.fare_rules, fare_id)

    def get_level(self, level_id: str) -> Optional[LevelRecord]:
        """Level with level_id."""
        return level_for_id(self.levels, level_id)

    def get_pathway(self, pathway_id: str) -> Optional[PathwayRecord]:
        """Pathway with pathway_id."""
        return pathway_for_id(self.pathways, pathway_id)

    def get_pathway_for_stops(self, from_stop_id: str, to_stop_id: str) -> Optional[PathwayRecord]:
        """Pathway from from_stop_id to to_stop_id."""
        return pathway_for_stops(self.pathways, from_stop_id, to_stop_id)

    def get_transfer(self, from_stop_id: str, to_stop_id: str) -> Optional[TransferRecord]:
        """Transfer from from_stop_id to to_stop_id."""
        return transfer_for_stops(self.transfers, from_stop_id, to_stop_id)

    def get_translation(self, table_name: TranslationTable) -> Optional[TranslationRecord]:
        """First translation of a field in table_name."""
        return first_record(self.translations, translation_table=TranslationTable(table_name))

    # Selections

    def get_stop_times_for_stop(self, stop_id: str) -> list[StopTimeRecord]:
        """Stop times at stop_id in table order."""
        return stop_times_for_stop_id(self.stop_times, stop_id)

    def get_stop_times_for_trip(
        self, trip_id: str, sort_by_sequence: bool = True
    ) -> list[StopTimeRecord]:
        """Stop times of trip_id, sorted by stop_sequence by default."""
        return stop_times_for_trip_id(self.stop_times, trip_id, sort_by_sequence)

    def get_calendar_dates(
        self, service_id: str, sort_by_date: bool = True
    ) -> list[CalendarDateRecord]:
        """Service exceptions of service_id, sorted by date by default."""
        return calendar_dates_for_service_id(self.calendar_dates, service_id, sort_by_date)

    def get_shape(self, shape_id: str, sort_by_sequence: bool = True) -> list[ShapePointRecord]:
        """Points of shape_id, sorted by shape_pt_sequence by default."""
        return shape_for_shape_id(self.shapes, shape_id, sort_by_sequence)

    def get_frequencies(self, trip_id: str) -> list[FrequencyRecord]:
        """Frequencies of trip_id in table order."""
        return frequencies_for_trip_id(self.frequencies, trip_id)

    def get_trips_for_route(self, route_id: str) -> list[TripRecord]:
        """Trips of route_id in table order."""
        return trips_for_route_id(self.trips, route_id)

    def get_trips_for_shape(self, shape_id: str) -> list[TripRecord]:
        """Trips following shape_id in table order."""
        return trips_for_shape_id(self.trips, shape_id)

    def get_routes_for_agency(self, agency_id: str) -> list[RouteRecord]:
        """Routes of agency_id in table order."""
        return routes_for_agency_id(self.routes, agency_id)

    def get_child_stops(self, parent_station: str) -> list[StopRecord]:
        """Stops, entrances and nodes whose parent_station is the given station."""
        return child_stops_for_station(self.stops, parent_station)

    def get_fare_rules_for_route(self, route_id: str) -> list[FareRuleRecord]:
        """Fare rules which apply to route_id."""
        return fare_rules_for_route_id(self.fare_rules, route_id)

    def get_shape_ids(self) -> list[str]:
        """Unique shape_ids of the shapes table in order of first appearance."""
        return shape_ids(self.shapes)

    # Tables

    def get_table(self, table_name: str) -> list[RecordModel]:
        """Get table by its GTFS name, e.g. `agency` or `stop_times`.

        Raises:
            ValueError: if table_name isn't a GTFS table of the feed.
        """
        if table_name not in self._table_attrs:
            msg = f"{table_name} table is not in the feed. Available: {self.table_names}"
            raise ValueError(msg)
        return getattr(self, self._table_attrs[table_name])

    def get_table_df(self, table_name: str) -> pd.DataFrame:
        """Table as a DataFrame, validated to its DataFrame model if it has one.

        Columns of a validated table come in the order of its model.

        Raises:
            TableValidationError: if the DataFrame doesn't validate to its model.
        """
        df = records_to_df(self.get_table(table_name), _RECORD_TYPES[table_name])
        df.attrs["name"] = table_name
        if table_name in TABLE_MODELS:
            model = TABLE_MODELS[table_name]
            df = order_fields_from_data_model(validate_df_to_model(df, model), model)
        return df


_RECORD_TYPES: dict[str, type[RecordModel]] = {
    "agency": AgencyRecord,
    "stops": StopRecord,
    "routes": RouteRecord,
    "trips": TripRecord,
    "stop_times": StopTimeRecord,
    "calendar": CalendarRecord,
    "calendar_dates": CalendarDateRecord,
    "fare_attributes": FareAttributeRecord,
    "fare_rules": FareRuleRecord,
    "shapes": ShapePointRecord,
    "frequencies": FrequencyRecord,
    "transfers": TransferRecord,
    "pathways": PathwayRecord,
    "levels": LevelRecord,
    "translations": TranslationRecord,
    "attributions": AttributionRecord,
}
