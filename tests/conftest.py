"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[1]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from fastapi.testclient import TestClient

from ship_registry_api.app.api.deps import get_ship_service
from ship_registry_api.app.core.db import init_db
from ship_registry_api.app.main import app
from ship_registry_api.app.repositories import InMemoryShipRepository
from ship_registry_api.app.schemas.ship import ShipRead, ShipType
from ship_registry_api.app.services.ship_service import ShipService


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def _make_ship(**overrides) -> ShipRead:
    fields = dict(
        id=1,
        name="Eagle",
        planet="Mars",
        ship_type=ShipType.TRANSPORT,
        prod_date=utc(3000),
        is_used=False,
        speed=0.5,
        crew_size=10,
        rating=2.0,
    )
    fields.update(overrides)
    return ShipRead(**fields)


@pytest.fixture
def make_ship():
    """Factory for ``ShipRead`` objects; keyword arguments override defaults."""
    return _make_ship


@pytest.fixture
def temp_db(tmp_path):
    """Path of a freshly migrated SQLite database."""
    path = str(tmp_path / "ships.db")
    init_db(path)
    return path


@pytest.fixture
def memory_repo():
    return InMemoryShipRepository()


@pytest.fixture
def service(memory_repo):
    return ShipService(memory_repo)


@pytest.fixture
def client(service):
    """Test client whose ship service runs on in-memory storage."""
    app.dependency_overrides[get_ship_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def eagle_payload():
    return {
        "name": "Eagle",
        "planet": "Mars",
        "ship_type": "TRANSPORT",
        "prod_date": "3000-01-01T00:00:00Z",
        "is_used": False,
        "speed": 0.5,
        "crew_size": 10,
    }
