"""Assemble every analyzer output into the analytics report."""
from datetime import datetime, timezone

from linkedin_lens.analyzers.connections import audience_distribution, connections_growth
from linkedin_lens.analyzers.engagement import engagement_per_post
from linkedin_lens.analyzers.post_types import post_types_breakdown
from linkedin_lens.analyzers.ranking import top_hashtags
from linkedin_lens.analyzers.score_impacts import SCORE_IMPACTS
from linkedin_lens.analyzers.trends import messages_sent_received, posts_engagements_trend
from linkedin_lens.fetchers.linkedin import RawResources
from linkedin_lens.fetchers.parser import parse_changelog, parse_connections, parse_share_commentaries
from linkedin_lens.models import AnalyticsReport
from linkedin_lens.utils.days import DEFAULT_RANGE


def build_analytics(
    resources: RawResources,
    time_range: str = DEFAULT_RANGE,
    *,
    now: datetime | None = None,
    member_id: str | None = None,
) -> AnalyticsReport:
    """Build the report from raw upstream payloads.

    Missing resources (``None``) produce zero-filled or empty sections. The
    clock is only read for the day window and ``lastUpdated``.
    """
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    today = now.date()

    events = parse_changelog(resources.changelog)
    connections = parse_connections(resources.connections)
    commentaries = parse_share_commentaries(resources.posts)

    return AnalyticsReport(
        posts_engagements_trend=posts_engagements_trend(events, time_range, today),
        connections_growth=connections_growth(connections, time_range, today),
        post_types_breakdown=post_types_breakdown(events),
        top_hashtags=top_hashtags(commentaries, events),
        engagement_per_post=engagement_per_post(events),
        messages_sent_received=messages_sent_received(events, today, member_id),
        audience_distribution=audience_distribution(connections),
        score_impacts=dict(SCORE_IMPACTS),
        time_range=time_range,
        last_updated=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    )
