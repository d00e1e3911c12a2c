"""
DateTime utility functions - all timestamps are stored and returned in UTC.
Millisecond epoch values are used on the wire for order/delivery times.
"""
from datetime import datetime, timezone, timedelta
from typing import Optional

MS_PER_DAY = 24 * 60 * 60 * 1000


def now_utc() -> datetime:
    """
    Get current UTC datetime (timezone-aware).
    Used as the application-side default for createdAt/updatedAt columns.
    """
    return datetime.now(timezone.utc)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Ensure datetime is in UTC.
    SQLite drops tzinfo on the way back, so naive values are assumed to be UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_epoch_ms(dt: datetime) -> int:
    return int(to_utc(dt).timestamp() * 1000)


def now_epoch_ms() -> int:
    return to_epoch_ms(now_utc())


def offset_ms(base: datetime, milliseconds: int) -> datetime:
    """Return ``base`` shifted by a whole number of milliseconds."""
    return base + timedelta(milliseconds=milliseconds)


def add_days_ms(epoch_ms: int, days: int) -> int:
    return epoch_ms + days * MS_PER_DAY
