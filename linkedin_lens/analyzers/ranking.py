"""Frequency counting and top-N ranking."""
import re
from collections import Counter
from collections.abc import Iterable

from linkedin_lens.fetchers.parser import commentary_text
from linkedin_lens.models import ActivityEvent, HashtagCount, RankedEntry

TOP_N = 10
HASHTAG_RE = re.compile(r"#\w+")


def top_counts(values: Iterable[str], limit: int = TOP_N) -> list[tuple[str, int]]:
    """Count values and return the ``limit`` most frequent.

    Ties keep the order in which values were first seen.
    """
    counts = Counter(values)
    # Counter preserves insertion order and sorted() is stable.
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]


def rank_counts(values: Iterable[str], limit: int = TOP_N) -> list[RankedEntry]:
    return [RankedEntry(name=name, value=count) for name, count in top_counts(values, limit)]


def extract_hashtags(text: str | None) -> list[str]:
    """Every ``#word`` occurrence in ``text``; repeats are kept."""
    return HASHTAG_RE.findall(text or "")


def top_hashtags(
    share_commentaries: Iterable[str] | None,
    events: Iterable[ActivityEvent] | None,
    limit: int = TOP_N,
) -> list[HashtagCount]:
    """Top hashtags across snapshot shares and changelog post creations."""
    tags: list[str] = []
    for text in share_commentaries or ():
        tags.extend(extract_hashtags(text))
    for event in events or ():
        if event.resource_name == "ugcPosts" and event.method == "CREATE":
            tags.extend(extract_hashtags(commentary_text(event)))
    return [HashtagCount(hashtag=tag, count=count) for tag, count in top_counts(tags, limit)]
