from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_date(value: Union[str, date, None]) -> Optional[date]:
    """Like parse_iso_date, but returns None for empty or malformed input."""
    if isinstance(value, date):
        return value
    if not value or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def months_between(start: date, end: date) -> int:
    """Whole calendar months elapsed from start to end."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
