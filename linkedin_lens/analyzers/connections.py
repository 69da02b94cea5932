"""Connection growth and audience distribution from the CONNECTIONS snapshot."""
from collections import Counter
from collections.abc import Iterable
from datetime import date

from linkedin_lens.analyzers.ranking import rank_counts
from linkedin_lens.models import AudienceDistribution, Connection, GrowthPoint
from linkedin_lens.utils.days import day_key, day_label, day_range, range_days


def connections_growth(
    connections: Iterable[Connection] | None,
    time_range: str | None = "30d",
    today: date | None = None,
) -> list[GrowthPoint]:
    """Daily new connections and their running total within the window.

    Connections made before the window do not contribute to the total.
    """
    per_day = Counter(
        day_key(c.connected_on) for c in connections or () if c.connected_on is not None
    )

    growth = []
    cumulative = 0
    for d in day_range(range_days(time_range), today):
        new = per_day.get(day_key(d), 0)
        cumulative += new
        growth.append(GrowthPoint(date=day_label(d), total_connections=cumulative, new_connections=new))
    return growth


def audience_distribution(connections: Iterable[Connection] | None) -> AudienceDistribution:
    """Top industries, positions and locations across the member's connections."""
    connections = list(connections or ())
    return AudienceDistribution(
        industries=rank_counts(c.industry for c in connections),
        positions=rank_counts(c.position for c in connections),
        locations=rank_counts(c.location for c in connections),
    )
