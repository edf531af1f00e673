"""
Filtering of ship collections.

Each constraint of a ``ShipFilter`` is turned into an independent
predicate; a ship is kept when it satisfies all of them.  Filtering
preserves the order of the input and never mutates it.
"""

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from ..schemas.ship import ShipFilter, ShipRead, ShipType

ShipPredicate = Callable[[ShipRead], bool]


def name_contains(fragment: str) -> ShipPredicate:
    return lambda ship: fragment in ship.name


def planet_contains(fragment: str) -> ShipPredicate:
    return lambda ship: fragment in ship.planet


def type_equals(ship_type: ShipType) -> ShipPredicate:
    return lambda ship: ship.ship_type == ship_type


def produced_after(bound: datetime) -> ShipPredicate:
    """Production date on or after ``bound``."""
    return lambda ship: ship.prod_date >= bound


def produced_before(bound: datetime) -> ShipPredicate:
    """Production date on or before ``bound``."""
    return lambda ship: ship.prod_date <= bound


def used_equals(is_used: bool) -> ShipPredicate:
    return lambda ship: ship.is_used == is_used


def in_range(attribute: str, low: Optional[float], high: Optional[float]) -> ShipPredicate:
    """Inclusive range check on ``attribute``; a ``None`` bound is open."""

    def predicate(ship: ShipRead) -> bool:
        value = getattr(ship, attribute)
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True

    return predicate


def build_predicates(criteria: Optional[ShipFilter]) -> List[ShipPredicate]:
    """Return one predicate per constraint present in ``criteria``."""
    if criteria is None:
        return []
    predicates: List[ShipPredicate] = []
    if criteria.name is not None:
        predicates.append(name_contains(criteria.name))
    if criteria.planet is not None:
        predicates.append(planet_contains(criteria.planet))
    if criteria.ship_type is not None:
        predicates.append(type_equals(criteria.ship_type))
    if criteria.after is not None:
        predicates.append(produced_after(criteria.after))
    if criteria.before is not None:
        predicates.append(produced_before(criteria.before))
    if criteria.is_used is not None:
        predicates.append(used_equals(criteria.is_used))
    ranges = (
        ("speed", criteria.min_speed, criteria.max_speed),
        ("crew_size", criteria.min_crew_size, criteria.max_crew_size),
        ("rating", criteria.min_rating, criteria.max_rating),
    )
    for attribute, low, high in ranges:
        if low is not None or high is not None:
            predicates.append(in_range(attribute, low, high))
    return predicates


def filter_ships(ships: Iterable[ShipRead], criteria: Optional[ShipFilter] = None) -> List[ShipRead]:
    predicates = build_predicates(criteria)
    return [ship for ship in ships if all(predicate(ship) for predicate in predicates)]
