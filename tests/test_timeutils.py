"""Tests for production-date time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from ship_registry_api.app.core.timeutils import ensure_utc, from_epoch_millis, utc_year


class TestFromEpochMillis:
    def test_exact_milliseconds_far_from_epoch(self):
        assert from_epoch_millis(32503680000123) == datetime(3000, 1, 1, 0, 0, 0, 123000, tzinfo=timezone.utc)

    def test_negative(self):
        assert from_epoch_millis(-1) == datetime(1969, 12, 31, 23, 59, 59, 999000, tzinfo=timezone.utc)

    def test_out_of_range(self):
        with pytest.raises(OverflowError):
            from_epoch_millis(10**18)


class TestEnsureUtc:
    def test_naive_is_taken_as_utc(self):
        assert ensure_utc(datetime(3000, 1, 1)).tzinfo == timezone.utc

    def test_offset_is_converted(self):
        value = datetime(3000, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert ensure_utc(value) == datetime(2999, 12, 31, 23, 0, tzinfo=timezone.utc)
        assert utc_year(value) == 2999
