"""Ordering of ship collections."""

from typing import Iterable, List, Optional

from ..schemas.ship import ShipOrder, ShipRead

SORT_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.SPEED: "speed",
    ShipOrder.DATE: "prod_date",
    ShipOrder.RATING: "rating",
}


def sort_ships(ships: Iterable[ShipRead], order: Optional[ShipOrder] = None) -> List[ShipRead]:
    """Return ``ships`` sorted ascending by the field behind ``order``.

    The sort is stable, so ships with equal keys keep their input
    order.  Without an order the input order is kept as is.
    """
    if order is None:
        return list(ships)
    field = SORT_FIELDS[order]
    return sorted(ships, key=lambda ship: getattr(ship, field))
