"""Timezone utilities. Ledger timestamps are stored and served in UTC."""

from datetime import datetime

import pytz

UTC_TZ = pytz.utc


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC_TZ)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # SQLite drops tzinfo; naive values were written as UTC
        return UTC_TZ.localize(dt)
    return dt.astimezone(UTC_TZ)
