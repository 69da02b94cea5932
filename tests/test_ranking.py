from linkedin_lens.analyzers.ranking import extract_hashtags, rank_counts, top_counts, top_hashtags
from linkedin_lens.models import ActivityEvent


def _post(text: str, resource: str = "ugcPosts") -> ActivityEvent:
    return ActivityEvent(
        resource_name=resource,
        method="CREATE",
        activity={"specificContent": {"com.linkedin.ugc.ShareContent": {"shareCommentary": {"text": text}}}},
    )


def test_top_counts_sorted_and_truncated():
    values = [f"v{i}" for i in range(15) for _ in range(i + 1)]
    ranked = top_counts(values)
    assert len(ranked) == 10
    assert ranked[0] == ("v14", 15)
    counts = [c for _, c in ranked]
    assert counts == sorted(counts, reverse=True)


def test_top_counts_ties_keep_first_seen_order():
    assert top_counts(["b", "a", "c", "a", "b"]) == [("b", 2), ("a", 2), ("c", 1)]


def test_rank_counts_empty():
    assert rank_counts([]) == []


def test_extract_hashtags_keeps_repeats():
    assert extract_hashtags("#ai is #AI and #ai_2024! #") == ["#ai", "#AI", "#ai_2024"]
    assert extract_hashtags(None) == []


def test_top_hashtags_merges_snapshot_and_changelog():
    snapshot = ["#python #data", "#python"]
    events = [_post("more #data #data"), _post("#ignored", resource="socialActions/comments")]
    ranked = top_hashtags(snapshot, events)
    assert [(h.hashtag, h.count) for h in ranked] == [("#data", 3), ("#python", 2)]


def test_top_hashtags_empty_inputs():
    assert top_hashtags(None, None) == []


def test_extract_hashtags_keeps_unicode_letters():
    assert extract_hashtags("#café #Künstliche") == ["#café", "#Künstliche"]
