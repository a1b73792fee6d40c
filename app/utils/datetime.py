"""Helpers for rendering stored timestamps in the application timezone."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone, falling back to UTC."""

    tz_name = (get_settings().app_timezone or "").strip()
    if not tz_name or tz_name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except ZoneInfoNotFoundError:
        return timezone.utc


def now_in_utc_naive_datetime() -> datetime:
    """Return the current UTC time without ``tzinfo``, as stored in the database."""

    return datetime.now(tz=timezone.utc).replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the application timezone.

    Naive values are assumed to be UTC, which is how notification timestamps
    are persisted.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(get_app_timezone())
