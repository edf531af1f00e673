"""
Service layer.

The pure building blocks (validation, rating, filtering, sorting,
pagination, partial updates) live in their own modules and are
composed by ``ShipService``, which talks to a ship repository.
"""
