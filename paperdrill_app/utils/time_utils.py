"""
Centralized time helpers for PaperDrill.
Goal: one place that knows what "today" means for the learner.
"""
from datetime import date, datetime, timezone, tzinfo
from typing import Optional

import pytz


def utcnow() -> datetime:
    """
    Get the current timezone-aware UTC datetime.
    Tests pin the clock by monkeypatching this function.
    """
    return datetime.now(timezone.utc)


def fixed_offset_zone(offset_hours: float) -> tzinfo:
    """Return a fixed-offset tzinfo ``offset_hours`` ahead of UTC."""
    return pytz.FixedOffset(int(round(offset_hours * 60)))


def local_today(offset_hours: float, now: Optional[datetime] = None) -> date:
    """
    Calendar date at a fixed UTC offset.

    Args:
        offset_hours: Hours ahead of UTC (9 for JST, may be negative or fractional).
        now: Instant to evaluate; naive values are read as UTC. Defaults to ``utcnow()``.
    """
    if now is None:
        now = utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(fixed_offset_zone(offset_hours)).date()
