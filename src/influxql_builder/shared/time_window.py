"""Default time-window computation for time filters.

All boundaries are UTC calendar days expressed as integer epoch seconds,
the unit InfluxQL expects when a literal is suffixed with ``s``.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    # Naive datetimes are taken to already be UTC.
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def start_of_day(moment: datetime) -> int:
    """Epoch seconds of 00:00:00 UTC on the day containing *moment*."""
    day = _as_utc(moment).date()
    return int(datetime.combine(day, time.min, tzinfo=timezone.utc).timestamp())


def end_of_day(moment: datetime) -> int:
    """Epoch seconds of 23:59:59 UTC on the day containing *moment*."""
    return start_of_day(moment) + int(timedelta(days=1).total_seconds()) - 1


def default_time_window(now: datetime, days: int) -> tuple[int, int]:
    """Compute a trailing window ending with the current UTC day.

    Args:
        now: The current instant.
        days: How many whole days before *now* the window starts.

    Returns:
        ``(start, end)`` epoch seconds: the start of the day *days* days
        before *now*, and the last second of *now*'s day.
    """
    return start_of_day(_as_utc(now) - timedelta(days=days)), end_of_day(now)
