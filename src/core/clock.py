"""
Clock helpers.

A draw belongs to a calendar day in the configured draw timezone, not UTC.
"""

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def draw_day(tz_name: str, at: Optional[datetime] = None) -> date:
    """
    Calendar day of the draw that `at` (default: now) falls into.

    Args:
        tz_name: IANA timezone name of the draw
        at: Aware datetime to convert; naive values are treated as UTC

    Returns:
        date: Local date in the draw timezone
    """
    moment = at or utcnow()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(ZoneInfo(tz_name)).date()
