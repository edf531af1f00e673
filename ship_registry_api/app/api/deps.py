"""
Shared FastAPI dependencies.

``get_ship_service`` returns the process-wide ``ShipService``.  The
storage backend is chosen from ``settings.storage_backend``.  Tests
replace the service through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Query

from ..core.config import settings
from ..core.errors import MalformedRequest
from ..core.timeutils import from_epoch_millis
from ..repositories import InMemoryShipRepository, SqliteShipRepository, ShipRepository
from ..schemas.ship import ShipFilter, ShipType
from ..services.ship_service import ShipService

logger = logging.getLogger(__name__)


def build_repository(backend: str) -> ShipRepository:
    if backend == "memory":
        return InMemoryShipRepository()
    if backend == "sqlite":
        return SqliteShipRepository()
    raise ValueError(f"Unknown storage backend: {backend!r}")


@lru_cache
def get_ship_service() -> ShipService:
    logger.info("Using %s ship storage", settings.storage_backend)
    return ShipService(build_repository(settings.storage_backend))


def _date_bound(name: str, millis: Optional[int]):
    if millis is None:
        return None
    try:
        return from_epoch_millis(millis)
    except (OverflowError, ValueError) as e:
        raise MalformedRequest(f"'{name}' is not a representable timestamp: {millis}") from e


def ship_filter(
    name: Optional[str] = Query(None, description="Substring of the ship name"),
    planet: Optional[str] = Query(None, description="Substring of the planet"),
    ship_type: Optional[ShipType] = Query(None),
    after: Optional[int] = Query(None, description="Earliest production date, epoch milliseconds"),
    before: Optional[int] = Query(None, description="Latest production date, epoch milliseconds"),
    is_used: Optional[bool] = Query(None),
    min_speed: Optional[float] = Query(None),
    max_speed: Optional[float] = Query(None),
    min_crew_size: Optional[int] = Query(None),
    max_crew_size: Optional[int] = Query(None),
    min_rating: Optional[float] = Query(None),
    max_rating: Optional[float] = Query(None),
) -> ShipFilter:
    """Collect the filter query parameters into a ``ShipFilter``."""
    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=_date_bound("after", after),
        before=_date_bound("before", before),
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )
