"""
Error kinds raised by the service layer.

Client errors (``InvalidIdentifier``, ``NotFound``, ``InvalidField``,
``MalformedRequest``) are raised where they are detected and
translated into HTTP responses by the endpoints.  ``StorageError``
wraps failures of the storage provider and maps to a server error.
"""

from typing import Optional


class ShipRegistryError(Exception):
    """Base class for all errors raised by the ship registry."""


class InvalidIdentifier(ShipRegistryError):
    """The ship id is not a positive integer."""

    def __init__(self, ship_id) -> None:
        super().__init__(f"Invalid ship id: {ship_id!r}")
        self.ship_id = ship_id


class NotFound(ShipRegistryError):
    """No ship is stored under the requested id."""

    def __init__(self, ship_id: int) -> None:
        super().__init__(f"Ship {ship_id} not found")
        self.ship_id = ship_id


class InvalidField(ShipRegistryError):
    """A field of a candidate ship failed validation."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Invalid value for field '{field}'")
        self.field = field


class MalformedRequest(ShipRegistryError):
    """The request body or query string could not be parsed."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or "Malformed request")


class StorageError(ShipRegistryError):
    """The storage provider failed to read or write ships."""
