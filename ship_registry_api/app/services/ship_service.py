"""
Business logic for ships.

``ShipService`` composes validation, rating, filtering, sorting,
pagination and partial updates on top of a ``ShipRepository``.  It
holds no per-request state: every call fetches fresh copies from the
repository and writes back at most once.
"""

import logging
from typing import List, Optional

from ..core.errors import InvalidField, InvalidIdentifier, NotFound
from ..repositories.base import ShipRepository
from ..schemas.ship import ShipCreate, ShipFilter, ShipOrder, ShipRead, ShipUpdate
from .filtering import filter_ships
from .pagination import paginate
from .rating import compute_rating
from .sorting import sort_ships
from .update import merge_update
from .validation import find_invalid_field, is_valid_ship_type

logger = logging.getLogger(__name__)


class ShipService:
    """Service for managing ships.

    The repository is injected so that the same logic runs against
    SQLite in production and against memory in tests.
    """

    def __init__(self, repository: ShipRepository) -> None:
        self.repository = repository

    @staticmethod
    def check_id(ship_id) -> int:
        """Return ``ship_id`` if it is a positive integer.

        Raises ``InvalidIdentifier`` otherwise.
        """
        if isinstance(ship_id, bool) or not isinstance(ship_id, int) or ship_id <= 0:
            raise InvalidIdentifier(ship_id)
        return ship_id

    async def get_ship(self, ship_id: int) -> ShipRead:
        """Retrieve a single ship by ID.

        Raises ``InvalidIdentifier`` for a non-positive id and
        ``NotFound`` if no ship is stored under it.
        """
        ship = self.repository.find_by_id(self.check_id(ship_id))
        if ship is None:
            raise NotFound(ship_id)
        return ship

    async def create_ship(self, data: ShipCreate) -> ShipRead:
        """Validate ``data``, compute its rating and store it.

        ``is_used`` defaults to ``False``.  The rating is always
        computed here, never taken from the caller.  Raises
        ``InvalidField`` naming the first field that fails validation.
        """
        invalid = find_invalid_field(data)
        if invalid is None and not is_valid_ship_type(data.ship_type):
            invalid = "ship_type"
        if invalid is not None:
            logger.warning("Rejected new ship: invalid %s", invalid)
            raise InvalidField(invalid)

        is_used = bool(data.is_used) if data.is_used is not None else False
        ship = ShipRead(
            name=data.name,
            planet=data.planet,
            ship_type=data.ship_type,
            prod_date=data.prod_date,
            is_used=is_used,
            speed=data.speed,
            crew_size=data.crew_size,
            rating=compute_rating(data.speed, is_used, data.prod_date),
        )
        saved = self.repository.save(ship)
        logger.info("Created ship %s '%s'", saved.id, saved.name)
        return saved

    async def update_ship(self, ship_id: int, updates: ShipUpdate) -> ShipRead:
        """Apply a partial update to an existing ship.

        The stored ship is only written once every supplied field has
        passed validation; on ``InvalidField`` nothing is persisted.
        """
        existing = await self.get_ship(ship_id)
        try:
            updated = merge_update(existing, updates)
        except InvalidField as e:
            logger.warning("Rejected update of ship %s: invalid %s", ship_id, e.field)
            raise
        saved = self.repository.save(updated)
        logger.info("Updated ship %s", ship_id)
        return saved

    async def delete_ship(self, ship_id: int) -> None:
        """Delete a ship.  Raises like ``get_ship`` if it does not exist."""
        await self.get_ship(ship_id)
        self.repository.delete_by_id(ship_id)
        logger.info("Deleted ship %s", ship_id)

    async def list_ships(
        self,
        criteria: Optional[ShipFilter] = None,
        order: Optional[ShipOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[ShipRead]:
        """Return one page of the ships matching ``criteria``.

        Ships are filtered first, then sorted by ``order`` and finally
        sliced into the requested page (defaults: page 0, 3 ships).
        """
        ships = filter_ships(self.repository.find_all(), criteria)
        return paginate(sort_ships(ships, order), page_number, page_size)

    async def count_ships(self, criteria: Optional[ShipFilter] = None) -> int:
        """Return the number of ships matching ``criteria``, unpaged."""
        return len(filter_ships(self.repository.find_all(), criteria))
