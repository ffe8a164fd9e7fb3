"""Queries of the gtfs fare_attributes and fare_rules tables."""

from __future__ import annotations

from typing import Optional

from ...models.gtfs.records import FareAttributeRecord, FareRuleRecord
from ...utils.data import filter_records, first_record


def fare_attribute_for_id(
    fare_attributes: list[FareAttributeRecord], fare_id: str
) -> Optional[FareAttributeRecord]:
    """Returns the fare attribute record for a given fare_id."""
    return first_record(fare_attributes, fare_id=fare_id)


def fare_rule_for_id(fare_rules: list[FareRuleRecord], fare_id: str) -> Optional[FareRuleRecord]:
    """Returns the first fare rule record for a given fare_id."""
    return first_record(fare_rules, fare_id=fare_id)


def fare_rules_for_route_id(fare_rules: list[FareRuleRecord], route_id: str) -> list[FareRuleRecord]:
    """Returns fare rule records which apply to a given route_id in table order."""
    return filter_records(fare_rules, route_id=route_id)
