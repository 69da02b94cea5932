"""Per-post engagement ranking from changelog events."""
from collections.abc import Iterable

from linkedin_lens.analyzers.ranking import TOP_N
from linkedin_lens.fetchers.parser import commentary_text
from linkedin_lens.models import ActivityEvent, PostEngagementSummary

CONTENT_PREVIEW_CHARS = 50
DEFAULT_CONTENT = "Post content"

_ENGAGEMENT_COUNTERS = {
    ("socialActions/likes", "CREATE"): "likes",
    ("socialActions/comments", "CREATE"): "comments",
    ("socialActions/shares", "CREATE"): "shares",
}


def truncate_content(text: str, limit: int = CONTENT_PREVIEW_CHARS) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def engagement_per_post(
    events: Iterable[ActivityEvent] | None,
    limit: int = TOP_N,
) -> list[PostEngagementSummary]:
    """Rank the member's posts by likes + comments + shares.

    Engagement is only attributed to posts whose creation event is in the
    changelog; reactions to unknown posts are dropped.
    """
    events = list(events or ())

    posts: dict[str, dict] = {}
    for event in events:
        if event.resource_name == "ugcPosts" and event.method == "CREATE" and event.resource_id:
            posts[event.resource_id] = {
                "content": commentary_text(event) or DEFAULT_CONTENT,
                "created_at": event.captured_at,
                "likes": 0,
                "comments": 0,
                "shares": 0,
            }

    for event in events:
        counter = _ENGAGEMENT_COUNTERS.get((event.resource_name, event.method))
        post_id = event.activity.get("object")
        if counter is None or not isinstance(post_id, str):
            continue
        post = posts.get(post_id)
        if post is not None:
            post[counter] += 1

    summaries = [
        PostEngagementSummary(
            post_id=post_id,
            content=truncate_content(p["content"]),
            likes=p["likes"],
            comments=p["comments"],
            shares=p["shares"],
            total_engagement=p["likes"] + p["comments"] + p["shares"],
            created_at=p["created_at"],
        )
        for post_id, p in posts.items()
    ]
    summaries.sort(key=lambda s: s.total_engagement, reverse=True)
    return summaries[:limit]
