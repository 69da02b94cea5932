"""Dense daily series built from changelog events.

Every day of the window gets a zero-filled bucket before any event is
counted, so quiet days show up as zeros instead of gaps.
"""
from collections.abc import Iterable
from datetime import date

from linkedin_lens.models import ActivityEvent, DayTrend, MessagePoint
from linkedin_lens.utils.days import day_key, day_label, day_range, ms_to_day, range_days

MESSAGES_WINDOW_DAYS = 30

# (resourceName, method) -> counter incremented on the day bucket
_TREND_COUNTERS = {
    ("ugcPosts", "CREATE"): "posts",
    ("socialActions/likes", "CREATE"): "likes",
    ("socialActions/comments", "CREATE"): "comments",
    ("socialActions/shares", "CREATE"): "shares",
}


def _empty_buckets(days: list[date], fields: tuple[str, ...]) -> dict[str, dict[str, int]]:
    return {day_key(d): dict.fromkeys(fields, 0) for d in days}


def posts_engagements_trend(
    events: Iterable[ActivityEvent] | None,
    time_range: str | None = "30d",
    today: date | None = None,
) -> list[DayTrend]:
    """Daily posts / likes / comments / shares for the selected window."""
    days = day_range(range_days(time_range), today)
    buckets = _empty_buckets(days, ("posts", "likes", "comments", "shares"))

    for event in events or ():
        counter = _TREND_COUNTERS.get((event.resource_name, event.method))
        day = ms_to_day(event.captured_at)
        if counter is None or day is None:
            continue
        bucket = buckets.get(day_key(day))
        if bucket is not None:
            bucket[counter] += 1

    trend = []
    for d in days:
        b = buckets[day_key(d)]
        trend.append(DayTrend(
            date=day_label(d),
            posts=b["posts"],
            likes=b["likes"],
            comments=b["comments"],
            shares=b["shares"],
            total_engagement=b["likes"] + b["comments"] + b["shares"],
        ))
    return trend


def infer_member_id(events: Iterable[ActivityEvent] | None) -> str | None:
    """Guess the current member as the owner of the first event that has one."""
    for event in events or ():
        if event.owner:
            return event.owner
    return None


def messages_sent_received(
    events: Iterable[ActivityEvent] | None,
    today: date | None = None,
    member_id: str | None = None,
) -> list[MessagePoint]:
    """Messages sent vs. received per day over the last 30 days.

    A message whose actor is ``member_id`` counts as sent, anything else as
    received. Without an explicit ``member_id`` it is inferred from the data.
    """
    events = list(events or ())
    if member_id is None:
        member_id = infer_member_id(events)

    days = day_range(MESSAGES_WINDOW_DAYS, today)
    buckets = _empty_buckets(days, ("sent", "received"))

    for event in events:
        if event.resource_name != "messages":
            continue
        day = ms_to_day(event.captured_at)
        bucket = buckets.get(day_key(day)) if day else None
        if bucket is None:
            continue
        if member_id is not None and event.actor == member_id:
            bucket["sent"] += 1
        else:
            bucket["received"] += 1

    return [
        MessagePoint(date=day_label(d), sent=buckets[day_key(d)]["sent"], received=buckets[day_key(d)]["received"])
        for d in days
    ]
