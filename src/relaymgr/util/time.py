from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt


def format_clock(dt: datetime) -> str:
    """
    Format a history timestamp as a wall-clock string (HH:MM:SS, UTC).

    History entries keep the datetime; this is only for display.
    """
    return normalize_dt(dt).astimezone(timezone.utc).strftime("%H:%M:%S")
