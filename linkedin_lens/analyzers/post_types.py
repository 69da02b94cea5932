"""Post type classification."""
from collections import Counter
from collections.abc import Iterable
from typing import Any

from linkedin_lens.fetchers.parser import share_content
from linkedin_lens.models import ActivityEvent, RankedEntry

TEXT_ONLY = "Text Only"
IMAGE = "Image"
VIDEO = "Video"
ARTICLE = "Article"
EXTERNAL_LINK = "External Link"

POST_TYPES = (TEXT_ONLY, IMAGE, VIDEO, ARTICLE, EXTERNAL_LINK)


def classify_post(content: dict[str, Any] | None) -> str:
    """Assign a ShareContent payload to exactly one post type."""
    content = content or {}
    media = content.get("media")
    if isinstance(media, list) and media:
        first = media[0] if isinstance(media[0], dict) else {}
        media_type = str(first.get("mediaType") or "IMAGE")
        if "VIDEO" in media_type:
            return VIDEO
        if "IMAGE" in media_type:
            return IMAGE
        return EXTERNAL_LINK

    commentary = content.get("shareCommentary")
    text = commentary.get("text") if isinstance(commentary, dict) else None
    if isinstance(text, str) and "http" in text:
        return EXTERNAL_LINK
    return TEXT_ONLY


def post_types_breakdown(events: Iterable[ActivityEvent] | None) -> list[RankedEntry]:
    """Count created posts per type. Types with no posts are left out."""
    counts = Counter(
        classify_post(share_content(e))
        for e in events or ()
        if e.resource_name == "ugcPosts" and e.method == "CREATE"
    )
    return [RankedEntry(name=t, value=counts[t]) for t in POST_TYPES if counts[t] > 0]
