# listify/core/normalize/window.py

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any

DEFAULT_TIMEFRAME_DAYS = 7


def coerce_timeframe_days(value: Any, default: int = DEFAULT_TIMEFRAME_DAYS) -> int:
    """
    Coerce a caller-supplied window size to a positive int.
    None, unparseable and non-positive values fall back to `default`; fractions truncate.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        days = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        return default
    return days if days >= 1 else default


def resolve_today(now: datetime | date | None = None) -> date:
    """Calendar date of `now` (local clock when None); time of day is dropped."""
    if now is None:
        return datetime.now().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def compute_cutoff(timeframe_days: int, *, now: datetime | date | None = None) -> date:
    """Earliest retained sold date: today − (timeframe_days − 1)."""
    return resolve_today(now) - timedelta(days=max(1, timeframe_days) - 1)


def is_within_window(date_sold: date, cutoff: date) -> bool:
    return date_sold >= cutoff
