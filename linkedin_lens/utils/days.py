"""Calendar-day helpers shared by the daily bucketers.

Buckets are matched on a canonical ``YYYY-MM-DD`` day key. The short
``"Oct 19"`` label is only used for display.
"""

from datetime import date, datetime, timedelta, timezone

RANGE_DAYS = {"7d": 7, "30d": 30, "90d": 90}
DEFAULT_RANGE = "30d"
_FALLBACK_DAYS = 90


def range_days(time_range: str | None) -> int:
    """Map a range selector to a day count. Unknown selectors mean 90 days."""
    if time_range is None:
        time_range = DEFAULT_RANGE
    return RANGE_DAYS.get(time_range, _FALLBACK_DAYS)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def ms_to_day(ts_ms: int | float | None) -> date | None:
    """Convert an epoch-milliseconds timestamp to its UTC calendar day."""
    if ts_ms is None:
        return None
    try:
        return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc).date()
    except (ValueError, OverflowError, OSError):
        return None


def day_key(day: date) -> str:
    return day.isoformat()


def day_label(day: date) -> str:
    """Display label, e.g. ``Oct 19``."""
    return f"{day:%b} {day.day}"


def day_range(days: int, today: date | None = None) -> list[date]:
    """Return ``days`` contiguous calendar days, oldest first, ending ``today``."""
    today = today or utc_today()
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
