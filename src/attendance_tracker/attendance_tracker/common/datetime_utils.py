from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional

from ..core.constants import DATE_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def day_key(value: datetime | date) -> str:
    return value.strftime(DATE_FORMAT)


def month_key(value: datetime | date) -> str:
    return value.strftime(MONTH_FORMAT)


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat(timespec="seconds")


def from_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def round_hours(value: float) -> float:
    """Round to 2 decimals, halves going up (same as Math.round(x * 100) / 100)."""
    return math.floor(value * 100 + 0.5) / 100


def hours_between(start: datetime, end: datetime) -> float:
    return round_hours((end - start).total_seconds() / 3600)
