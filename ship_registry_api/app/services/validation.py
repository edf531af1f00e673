"""
Field-level validation rules for ships.

Every function here is a pure predicate: it never raises and never
mutates its argument.  ``find_invalid_field`` reports which field of a
candidate ship is the first to fail so callers can surface it.
"""

from datetime import datetime
from typing import Any, Optional

from ..core.timeutils import utc_year
from ..schemas.ship import ShipType

MAX_TEXT_LENGTH = 50
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999
MIN_SPEED = 0.01
MAX_SPEED = 0.99


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_text(value: Any) -> bool:
    """Non-empty string of at most 50 characters."""
    return isinstance(value, str) and 0 < len(value) <= MAX_TEXT_LENGTH


def is_valid_prod_date(value: Any) -> bool:
    """Production date whose UTC calendar year lies in [2800, 3019]."""
    return isinstance(value, datetime) and MIN_PROD_YEAR <= utc_year(value) <= MAX_PROD_YEAR


def is_valid_crew_size(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and MIN_CREW_SIZE <= value <= MAX_CREW_SIZE


def is_valid_speed(value: Any) -> bool:
    return _is_number(value) and MIN_SPEED <= value <= MAX_SPEED


def is_valid_ship_type(value: Any) -> bool:
    """Member of ``ShipType``, given either as the enum or its name."""
    if isinstance(value, ShipType):
        return True
    return isinstance(value, str) and value in ShipType.__members__


def find_invalid_field(ship: Any) -> Optional[str]:
    """Return the name of the first field of ``ship`` that fails validation.

    Checks name, planet, speed, crew_size and prod_date in that order
    and returns ``None`` when all of them pass.  ``ship_type`` is not
    part of this check.
    """
    checks = (
        ("name", is_valid_text),
        ("planet", is_valid_text),
        ("speed", is_valid_speed),
        ("crew_size", is_valid_crew_size),
        ("prod_date", is_valid_prod_date),
    )
    for field, predicate in checks:
        if not predicate(getattr(ship, field, None)):
            return field
    return None


def is_valid_ship(ship: Any) -> bool:
    return ship is not None and find_invalid_field(ship) is None
