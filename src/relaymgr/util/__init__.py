from .ids import new_plan_id, new_uuid
from .time import format_clock, normalize_dt, now_utc

__all__ = [
    "new_uuid",
    "new_plan_id",
    "now_utc",
    "normalize_dt",
    "format_clock",
]
