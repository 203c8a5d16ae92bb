"""Timezone handling for website timestamps.

Timestamps are produced in the zone named by ``APP_TIMEZONE``. The SQL backend
stores them naive, expressed in that zone, and re-attaches the zone on read.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

logger = logging.getLogger(__name__)

_FIXED_OFFSET = re.compile(r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE)


def get_app_timezone() -> tzinfo:
    """Return the zone named by the current settings.

    Only the name lookup is cached, so a ``reset_settings_cache`` followed by a
    new ``APP_TIMEZONE`` takes effect on the next call.
    """

    return timezone_from_name(get_settings().app_timezone.strip() or "UTC")


@lru_cache(maxsize=16)
def timezone_from_name(name: str) -> tzinfo:
    """Resolve an IANA name or a ``UTC+HH:MM`` offset; unknown names map to UTC."""

    try:
        offset = _FIXED_OFFSET.match(name)
        if offset is None:
            return ZoneInfo(name)
        sign, hours, minutes = offset.groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-delta if sign == "-" else delta)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app zone; naive values are taken to be in it already."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)
