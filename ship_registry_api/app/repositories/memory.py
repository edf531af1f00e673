from itertools import count
from typing import Dict, Iterable, List, Optional

from ..core.errors import NotFound
from ..schemas.ship import ShipRead
from .base import ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Ship storage held in process memory.

    - Ships are kept in insertion order
    - Ids are assigned from a counter starting at 1 and never reused
    - Stored and returned ships are copies, so callers cannot mutate
      the store behind its back
    """

    def __init__(self, ships: Iterable[ShipRead] = ()) -> None:
        ships = list(ships)
        self._ships: Dict[int, ShipRead] = {ship.id: ship.model_copy() for ship in ships if ship.id is not None}
        self._ids = count(max(self._ships, default=0) + 1)
        for ship in ships:
            if ship.id is None:
                self.save(ship)

    def find_all(self) -> List[ShipRead]:
        return [ship.model_copy() for ship in self._ships.values()]

    def find_by_id(self, ship_id: int) -> Optional[ShipRead]:
        ship = self._ships.get(ship_id)
        return ship.model_copy() if ship is not None else None

    def save(self, ship: ShipRead) -> ShipRead:
        if ship.id is None:
            ship = ship.model_copy(update={"id": next(self._ids)})
        elif ship.id not in self._ships:
            raise NotFound(ship.id)
        self._ships[ship.id] = ship.model_copy()
        return ship

    def delete_by_id(self, ship_id: int) -> None:
        self._ships.pop(ship_id, None)
