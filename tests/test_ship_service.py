"""Tests for the ship service."""

from __future__ import annotations

import asyncio

import pytest

from ship_registry_api.app.core.errors import InvalidField, InvalidIdentifier, NotFound
from ship_registry_api.app.repositories import InMemoryShipRepository
from ship_registry_api.app.schemas.ship import ShipCreate, ShipFilter, ShipOrder, ShipUpdate
from ship_registry_api.app.services.ship_service import ShipService


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def eagle(eagle_payload):
    return ShipCreate(**eagle_payload)


class TestCreate:
    def test_assigns_id_and_rating(self, service, eagle):
        ship = run(service.create_ship(eagle))
        assert ship.id == 1
        assert ship.rating == 2.0

    def test_used_ship_rating(self, service, eagle_payload):
        ship = run(service.create_ship(ShipCreate(**{**eagle_payload, "is_used": True})))
        assert ship.rating == 1.0

    def test_is_used_defaults_to_false(self, service, eagle_payload):
        payload = dict(eagle_payload)
        del payload["is_used"]
        ship = run(service.create_ship(ShipCreate(**payload)))
        assert ship.is_used is False

    def test_caller_rating_is_ignored(self, service, eagle_payload):
        ship = run(service.create_ship(ShipCreate(**{**eagle_payload, "rating": 99.0, "id": 7})))
        assert ship.rating == 2.0
        assert ship.id == 1

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"name": None}, "name"),
            ({"speed": 0.0}, "speed"),
            ({"crew_size": 10000}, "crew_size"),
            ({"prod_date": "2799-12-31T00:00:00Z"}, "prod_date"),
            ({"ship_type": None}, "ship_type"),
        ],
    )
    def test_invalid_fields(self, service, eagle_payload, overrides, field):
        with pytest.raises(InvalidField) as exc_info:
            run(service.create_ship(ShipCreate(**{**eagle_payload, **overrides})))
        assert exc_info.value.field == field
        assert service.repository.find_all() == []


class TestGetAndDelete:
    def test_get_rejects_non_positive_ids(self, service):
        with pytest.raises(InvalidIdentifier):
            run(service.get_ship(0))
        with pytest.raises(InvalidIdentifier):
            run(service.get_ship(-3))

    def test_get_missing(self, service):
        with pytest.raises(NotFound):
            run(service.get_ship(5))

    def test_delete(self, service, eagle):
        ship = run(service.create_ship(eagle))
        run(service.delete_ship(ship.id))
        with pytest.raises(NotFound):
            run(service.get_ship(ship.id))

    def test_delete_missing(self, service):
        with pytest.raises(NotFound):
            run(service.delete_ship(1))


class TestUpdate:
    def test_persists_changes(self, service, eagle):
        ship = run(service.create_ship(eagle))
        run(service.update_ship(ship.id, ShipUpdate(is_used=True)))
        stored = run(service.get_ship(ship.id))
        assert stored.is_used is True
        assert stored.rating == 1.0

    def test_failed_update_is_not_persisted(self, service, eagle):
        ship = run(service.create_ship(eagle))
        with pytest.raises(InvalidField):
            run(service.update_ship(ship.id, ShipUpdate(name="Osprey", speed=1.5)))
        stored = run(service.get_ship(ship.id))
        assert stored == ship

    def test_ship_deleted_during_update_stays_deleted(self, eagle):
        class DeletingRepository(InMemoryShipRepository):
            """Removes a ship right after handing it out."""

            def find_by_id(self, ship_id):
                ship = super().find_by_id(ship_id)
                self.delete_by_id(ship_id)
                return ship

        service = ShipService(DeletingRepository())
        ship = run(service.create_ship(eagle))
        with pytest.raises(NotFound):
            run(service.update_ship(ship.id, ShipUpdate(name="Osprey")))
        assert service.repository.find_all() == []

    def test_missing_ship(self, service):
        with pytest.raises(NotFound):
            run(service.update_ship(3, ShipUpdate(name="Osprey")))


class TestListAndCount:
    @pytest.fixture
    def populated(self, service, eagle_payload):
        for name, speed in [("A", 0.9), ("B", 0.1), ("C", 0.5), ("D", 0.3), ("E", 0.7)]:
            run(service.create_ship(ShipCreate(**{**eagle_payload, "name": name, "speed": speed})))
        return service

    def test_default_page(self, populated):
        ships = run(populated.list_ships())
        assert [ship.name for ship in ships] == ["A", "B", "C"]

    def test_filter_sort_page(self, populated):
        ships = run(populated.list_ships(ShipFilter(min_speed=0.3), ShipOrder.SPEED, 0, 2))
        assert [ship.name for ship in ships] == ["D", "C"]

    def test_count_ignores_paging(self, populated):
        assert run(populated.count_ships()) == 5
        assert run(populated.count_ships(ShipFilter(max_speed=0.5))) == 3
