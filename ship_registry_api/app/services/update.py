"""
Partial updates of ships.

``merge_update`` applies the fields supplied in a ``ShipUpdate`` onto a
copy of an existing ship.  Every supplied field is validated first;
the first failure raises ``InvalidField`` and the existing ship is
left untouched.  When a rating-affecting field (production date,
condition or speed) is supplied, the rating is recomputed from the
merged values.
"""

from typing import Any, Callable, Dict, Tuple

from ..core.errors import InvalidField
from ..schemas.ship import ShipRead, ShipUpdate
from .rating import compute_rating
from .validation import (
    is_valid_crew_size,
    is_valid_prod_date,
    is_valid_ship_type,
    is_valid_speed,
    is_valid_text,
)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


# Order in which patch fields are checked.
FIELD_VALIDATORS: Tuple[Tuple[str, Callable[[Any], bool]], ...] = (
    ("name", is_valid_text),
    ("planet", is_valid_text),
    ("ship_type", is_valid_ship_type),
    ("prod_date", is_valid_prod_date),
    ("is_used", _is_bool),
    ("speed", is_valid_speed),
    ("crew_size", is_valid_crew_size),
)

RATING_FIELDS = frozenset({"prod_date", "is_used", "speed"})


def merge_update(existing: ShipRead, patch: ShipUpdate) -> ShipRead:
    """Return a new ship with the supplied fields of ``patch`` applied.

    Fields set to ``None`` in the patch count as not supplied.  ``id``
    is never changed.

    Raises
    ------
    InvalidField
        If a supplied field fails validation.
    """
    changes: Dict[str, Any] = {}
    for field, predicate in FIELD_VALIDATORS:
        value = getattr(patch, field)
        if value is None:
            continue
        if not predicate(value):
            raise InvalidField(field)
        changes[field] = value

    working = existing.model_copy(update=changes)
    if changes.keys() & RATING_FIELDS:
        working = working.model_copy(
            update={"rating": compute_rating(working.speed, working.is_used, working.prod_date)}
        )
    return working
