from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.ship import ShipRead


class ShipRepository(ABC):
    """
    Storage provider contract.

    The service layer hands fully validated ships to ``save`` and
    treats every returned ship as a copy it may freely discard.
    Failures of the underlying store are raised as ``StorageError``.
    """

    @abstractmethod
    def find_all(self) -> List[ShipRead]:
        """Return every stored ship, in an implementation-defined order."""

    @abstractmethod
    def find_by_id(self, ship_id: int) -> Optional[ShipRead]:
        """Return the ship stored under ``ship_id`` or ``None``."""

    @abstractmethod
    def save(self, ship: ShipRead) -> ShipRead:
        """Insert ``ship`` when its ``id`` is ``None``, otherwise overwrite it.

        Returns the stored ship with its id assigned.  Overwriting an id
        that is no longer stored raises ``NotFound`` instead of
        re-creating the ship.
        """

    @abstractmethod
    def delete_by_id(self, ship_id: int) -> None:
        """Remove the ship stored under ``ship_id``; no-op if absent."""
