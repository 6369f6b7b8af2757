from __future__ import annotations

import calendar
from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 timestamp (a trailing ``Z`` is accepted)."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_wall_clock(value: str) -> time:
    """Parse HH:MM wall-clock string into time."""
    return datetime.strptime(value, "%H:%M").time()


def at_wall_clock(moment: datetime, value: str) -> datetime:
    """Same calendar day (and tz) as ``moment``, at the HH:MM wall-clock ``value``."""
    t = parse_wall_clock(value)
    return moment.replace(hour=t.hour, minute=t.minute, second=0, microsecond=0)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def full_years_between(start: date, end: date) -> int:
    """Number of complete years from start to end (negative if end is earlier)."""
    years = end.year - start.year
    if years > 0 and (end.month, end.day) < (start.month, start.day):
        years -= 1
    elif years < 0 and (end.month, end.day) > (start.month, start.day):
        years += 1
    return years


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
