"""
Pydantic models for ship data.

``ShipCreate`` and ``ShipUpdate`` describe request bodies.  Their
fields are all optional at the schema level: range and length checks
are done by the service layer so that a failing field can be reported
by name.  ``ShipRead`` is the representation returned by the API and
``ShipFilter`` carries the optional criteria of list and count
queries.  Production dates are always normalised to UTC.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.timeutils import ensure_utc


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the ``order`` query parameter."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"


class ShipPayload(BaseModel):
    """Fields a client may send for a ship.

    ``id`` and ``rating`` are deliberately absent: ids are assigned by
    storage and the rating is always computed by the service.  Unknown
    keys in the body are ignored.
    """

    name: Optional[str] = Field(None, examples=["Eagle"])
    planet: Optional[str] = Field(None, examples=["Mars"])
    ship_type: Optional[ShipType] = Field(None, examples=["TRANSPORT"])
    prod_date: Optional[datetime] = Field(None, examples=["3000-01-01T00:00:00Z"])
    is_used: Optional[bool] = Field(None, examples=[False])
    speed: Optional[float] = Field(None, examples=[0.5])
    crew_size: Optional[int] = Field(None, examples=[10])

    @field_validator("prod_date")
    @classmethod
    def normalise_prod_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None


class ShipCreate(ShipPayload):
    """Schema for creating a ship.  ``is_used`` defaults to ``False``."""


class ShipUpdate(ShipPayload):
    """Schema for updating a ship.

    All fields are optional; only provided fields will be updated.
    """


class ShipRead(BaseModel):
    """Schema for reading a ship from the API."""

    # None until the ship has been stored.
    id: Optional[int] = None
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    model_config = {
        "from_attributes": True,
    }

    @field_validator("prod_date")
    @classmethod
    def normalise_prod_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class ShipFilter(BaseModel):
    """Criteria for list and count queries.

    Every field is optional; an absent field does not constrain the
    result.  All bounds are inclusive.
    """

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None

    @field_validator("after", "before")
    @classmethod
    def normalise_bounds(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value) if value is not None else None
