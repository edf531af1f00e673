"""Tests for partial updates."""

from __future__ import annotations

import pytest

from ship_registry_api.app.core.errors import InvalidField
from ship_registry_api.app.schemas.ship import ShipType, ShipUpdate
from ship_registry_api.app.services.update import merge_update

from conftest import utc


class TestMergeUpdate:
    def test_name_only_keeps_rating(self, make_ship):
        existing = make_ship(rating=7.77)
        updated = merge_update(existing, ShipUpdate(name="Osprey"))
        assert updated.name == "Osprey"
        assert updated.rating == 7.77

    def test_is_used_recomputes_rating(self, make_ship):
        existing = make_ship()
        updated = merge_update(existing, ShipUpdate(is_used=True))
        assert updated.is_used is True
        assert updated.rating == 1.0

    def test_rating_uses_merged_values(self, make_ship):
        existing = make_ship()
        updated = merge_update(existing, ShipUpdate(speed=0.8, prod_date=utc(3019)))
        assert updated.rating == 64.0

    def test_invalid_speed_leaves_existing_untouched(self, make_ship):
        existing = make_ship()
        before = existing.model_dump()
        with pytest.raises(InvalidField) as exc_info:
            merge_update(existing, ShipUpdate(name="Osprey", speed=1.5))
        assert exc_info.value.field == "speed"
        assert existing.model_dump() == before

    @pytest.mark.parametrize(
        "patch,field",
        [
            ({"name": ""}, "name"),
            ({"planet": "p" * 51}, "planet"),
            ({"prod_date": utc(3020)}, "prod_date"),
            ({"crew_size": 0}, "crew_size"),
        ],
    )
    def test_reports_failing_field(self, make_ship, patch, field):
        with pytest.raises(InvalidField) as exc_info:
            merge_update(make_ship(), ShipUpdate(**patch))
        assert exc_info.value.field == field

    def test_returns_copy_and_keeps_id(self, make_ship):
        existing = make_ship(id=42)
        updated = merge_update(existing, ShipUpdate(ship_type=ShipType.MILITARY, crew_size=50))
        assert updated is not existing
        assert updated.id == 42
        assert updated.ship_type == ShipType.MILITARY
        assert existing.ship_type == ShipType.TRANSPORT

    def test_empty_patch(self, make_ship):
        existing = make_ship()
        assert merge_update(existing, ShipUpdate()) == existing
