"""Helpers for the timezone handling of production dates."""

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def from_epoch_millis(millis: int) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Integer arithmetic keeps the millisecond exact.  Raises
    ``OverflowError`` when the result is outside ``datetime``'s range.
    """
    return EPOCH + timedelta(milliseconds=millis)


def utc_year(value: datetime) -> int:
    return ensure_utc(value).year
