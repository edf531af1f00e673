"""
Storage providers for ships.

``ShipRepository`` defines the contract the service layer relies on.
``SqliteShipRepository`` persists ships in the application database;
``InMemoryShipRepository`` keeps them in process memory.
"""

from .base import ShipRepository
from .memory import InMemoryShipRepository
from .sqlite import SqliteShipRepository

__all__ = ["ShipRepository", "InMemoryShipRepository", "SqliteShipRepository"]
