from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Serializes field names in camelCase, the shape the dashboard reads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Inputs ────────────────────────────────────────────────────────────────────

class ActivityEvent(_CamelModel):
    """One changelog entry (post creation, reaction, comment, share, message)."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    resource_name: str = ""
    method: str = ""
    captured_at: int | None = None  # epoch ms
    actor: str | None = None
    owner: str | None = None
    resource_id: str | None = None
    activity: dict[str, Any] = Field(default_factory=dict)

    @field_validator("captured_at", mode="before")
    @classmethod
    def _lenient_timestamp(cls, value: Any) -> int | None:
        """Accept float or ISO-string timestamps; anything else becomes None."""
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            try:
                return int(value)
            except (ValueError, OverflowError):
                return None
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(float(text))
            except (ValueError, OverflowError):
                pass
            try:
                parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            except ValueError:
                return None
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return int(parsed.timestamp() * 1000)
        return None


class Connection(BaseModel):
    """A CONNECTIONS snapshot row after synonym keys are folded together."""

    model_config = ConfigDict(frozen=True)

    connected_on: date | None = None
    industry: str = "Unknown"
    position: str = "Unknown"
    location: str = "Unknown"


# ── Outputs ───────────────────────────────────────────────────────────────────

class DayTrend(_CamelModel):
    date: str
    posts: int = 0
    likes: int = 0
    comments: int = 0
    shares: int = 0
    total_engagement: int = 0


class GrowthPoint(_CamelModel):
    date: str
    total_connections: int = 0
    new_connections: int = 0


class MessagePoint(_CamelModel):
    date: str
    sent: int = 0
    received: int = 0


class RankedEntry(_CamelModel):
    name: str
    value: int


class HashtagCount(_CamelModel):
    hashtag: str
    count: int


class PostEngagementSummary(_CamelModel):
    post_id: str
    content: str
    likes: int = 0
    comments: int = 0
    shares: int = 0
    total_engagement: int = 0
    created_at: int | None = None


class AudienceDistribution(_CamelModel):
    industries: list[RankedEntry] = []
    positions: list[RankedEntry] = []
    locations: list[RankedEntry] = []


class ScoreImpact(_CamelModel):
    model_config = ConfigDict(frozen=True)

    description: str
    impact: str
    tips: tuple[str, ...]


class AnalyticsReport(_CamelModel):
    posts_engagements_trend: list[DayTrend]
    connections_growth: list[GrowthPoint]
    post_types_breakdown: list[RankedEntry]
    top_hashtags: list[HashtagCount]
    engagement_per_post: list[PostEngagementSummary]
    messages_sent_received: list[MessagePoint]
    audience_distribution: AudienceDistribution
    score_impacts: dict[str, ScoreImpact]
    time_range: str
    last_updated: str
