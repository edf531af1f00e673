"""
SQLite storage provider.

Ships live in the ``ships`` table created by ``core.db.init_db``.
Production dates are stored as ISO 8601 strings in UTC.  All queries
use parameterized statements.  Any ``sqlite3.Error`` is re-raised as
``StorageError`` so the API can report it as a server error.
"""

import logging
import sqlite3
from datetime import datetime
from typing import List, Optional

from ..core.db import get_connection
from ..core.errors import NotFound, StorageError
from ..schemas.ship import ShipRead
from .base import ShipRepository

logger = logging.getLogger(__name__)

COLUMNS = "id, name, planet, ship_type, prod_date, is_used, speed, crew_size, rating"


class SqliteShipRepository(ShipRepository):
    """Ship storage backed by the application's SQLite database."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        # ``None`` means the configured database from ``settings``.
        self.db_path = db_path

    @staticmethod
    def _row_to_ship(row: sqlite3.Row) -> ShipRead:
        return ShipRead(
            id=row["id"],
            name=row["name"],
            planet=row["planet"],
            ship_type=row["ship_type"],
            prod_date=datetime.fromisoformat(row["prod_date"]),
            is_used=bool(row["is_used"]),
            speed=row["speed"],
            crew_size=row["crew_size"],
            rating=row["rating"],
        )

    def find_all(self) -> List[ShipRead]:
        try:
            conn = get_connection(self.db_path)
            try:
                rows = conn.execute(f"SELECT {COLUMNS} FROM ships ORDER BY id").fetchall()
                return [self._row_to_ship(row) for row in rows]
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to list ships: {e}") from e

    def find_by_id(self, ship_id: int) -> Optional[ShipRead]:
        try:
            conn = get_connection(self.db_path)
            try:
                row = conn.execute(f"SELECT {COLUMNS} FROM ships WHERE id = ?", (ship_id,)).fetchone()
                return self._row_to_ship(row) if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to load ship {ship_id}: {e}") from e

    def save(self, ship: ShipRead) -> ShipRead:
        values = (
            ship.name,
            ship.planet,
            ship.ship_type.value,
            ship.prod_date.isoformat(),
            int(ship.is_used),
            ship.speed,
            ship.crew_size,
            ship.rating,
        )
        try:
            conn = get_connection(self.db_path)
            try:
                cursor = conn.cursor()
                if ship.id is None:
                    cursor.execute(
                        """
                        INSERT INTO ships (name, planet, ship_type, prod_date, is_used, speed, crew_size, rating)
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                        """,
                        values,
                    )
                    ship = ship.model_copy(update={"id": cursor.lastrowid})
                else:
                    cursor.execute(
                        """
                        UPDATE ships
                        SET name = ?, planet = ?, ship_type = ?, prod_date = ?, is_used = ?, speed = ?, crew_size = ?, rating = ?
                        WHERE id = ?
                        """,
                        (*values, ship.id),
                    )
                    if cursor.rowcount == 0:
                        raise NotFound(ship.id)
                conn.commit()
                logger.debug("Stored ship %s", ship.id)
                return ship
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save ship {ship.id}: {e}") from e

    def delete_by_id(self, ship_id: int) -> None:
        try:
            conn = get_connection(self.db_path)
            try:
                conn.execute("DELETE FROM ships WHERE id = ?", (ship_id,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to delete ship {ship_id}: {e}") from e
