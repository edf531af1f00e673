"""
Ship endpoints for API v1.

These routes provide CRUD operations for ships plus filtered listing
and counting.  Client errors raised by ``ShipService`` are translated
to 400/404 responses here; storage failures are handled by the
application-level exception handler.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ship_registry_api.app.api.deps import get_ship_service, ship_filter
from ship_registry_api.app.core.errors import InvalidField, InvalidIdentifier, NotFound
from ship_registry_api.app.schemas.ship import ShipCreate, ShipFilter, ShipOrder, ShipRead, ShipUpdate
from ship_registry_api.app.services.ship_service import ShipService

router = APIRouter()


@router.get("", response_model=List[ShipRead])
async def list_ships(
    criteria: ShipFilter = Depends(ship_filter),
    order: Optional[ShipOrder] = Query(None),
    page_number: Optional[int] = Query(None, ge=0),
    page_size: Optional[int] = Query(None, ge=0),
    service: ShipService = Depends(get_ship_service),
) -> List[ShipRead]:
    """List ships matching the filters, sorted and paginated.

    - **name**, **planet** — substring match (case sensitive).
    - **after**, **before** — production date bounds in epoch milliseconds.
    - **min_*/max_*** — inclusive ranges on speed, crew size and rating.
    - **order** — `ID`, `SPEED`, `DATE` or `RATING`, ascending.
    - **page_number**, **page_size** — 0-indexed page, defaults 0 and 3.
    """
    return await service.list_ships(criteria, order, page_number, page_size)


@router.get("/count", response_model=int)
async def count_ships(
    criteria: ShipFilter = Depends(ship_filter),
    service: ShipService = Depends(get_ship_service),
) -> int:
    """Count all ships matching the filters, ignoring pagination."""
    return await service.count_ships(criteria)


@router.get("/{ship_id}", response_model=ShipRead)
async def get_ship(ship_id: int, service: ShipService = Depends(get_ship_service)) -> ShipRead:
    """Retrieve a single ship by its ID."""
    try:
        return await service.get_ship(ship_id)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", response_model=ShipRead)
async def create_ship(ship: ShipCreate, service: ShipService = Depends(get_ship_service)) -> ShipRead:
    """Create a new ship.

    The id is assigned by storage and the rating is computed from
    speed, condition and production date; values for either in the
    body are ignored.
    """
    try:
        return await service.create_ship(ship)
    except InvalidField as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.post("/{ship_id}", response_model=ShipRead)
async def update_ship(
    ship_id: int,
    updates: ShipUpdate,
    service: ShipService = Depends(get_ship_service),
) -> ShipRead:
    """Update an existing ship.

    Partial updates are supported; unspecified fields remain
    unchanged.  If any supplied field is invalid nothing is stored.
    """
    try:
        return await service.update_ship(ship_id, updates)
    except (InvalidIdentifier, InvalidField) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{ship_id}", status_code=status.HTTP_200_OK)
async def delete_ship(ship_id: int, service: ShipService = Depends(get_ship_service)) -> None:
    """Delete a ship by its ID."""
    try:
        await service.delete_ship(ship_id)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
