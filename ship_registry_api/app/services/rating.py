"""Rating of a ship, derived from its speed, condition and age."""

import math
from datetime import datetime

from ..core.timeutils import utc_year

CURRENT_YEAR = 3019
USED_DISCOUNT = 0.5


def round2(value: float) -> float:
    """Round to two decimals, halves rounded up."""
    return math.floor(value * 100 + 0.5) / 100


def compute_rating(speed: float, is_used: bool, prod_date: datetime) -> float:
    """Compute the rating of a ship.

    ``80 * speed * k / (3019 - year + 1)`` rounded to two decimals, where
    ``k`` is 0.5 for used ships and 1 otherwise.  The production year
    must not exceed 3019, which validation guarantees.
    """
    factor = USED_DISCOUNT if is_used else 1
    age = CURRENT_YEAR - utc_year(prod_date) + 1
    return round2((80 * speed * factor) / age)
