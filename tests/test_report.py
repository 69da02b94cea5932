import json
from datetime import datetime, timedelta, timezone

from linkedin_lens.analyzers.report import build_analytics
from linkedin_lens.analyzers.score_impacts import SCORE_IMPACTS
from linkedin_lens.fetchers.linkedin import RawResources

NOW = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)
TODAY_MS = int(NOW.timestamp() * 1000)
YESTERDAY_MS = int((NOW - timedelta(days=1)).timestamp() * 1000)

TOP_LEVEL_KEYS = {
    "postsEngagementsTrend", "connectionsGrowth", "postTypesBreakdown", "topHashtags",
    "engagementPerPost", "messagesSentReceived", "audienceDistribution", "scoreImpacts",
    "timeRange", "lastUpdated",
}

CHANGELOG = {"elements": [
    {
        "resourceName": "ugcPosts", "method": "CREATE", "capturedAt": YESTERDAY_MS,
        "owner": "urn:li:person:me", "actor": "urn:li:person:me", "resourceId": "urn:li:share:1",
        "activity": {"specificContent": {"com.linkedin.ugc.ShareContent": {
            "shareCommentary": {"text": "Shipping #python today"},
        }}},
    },
    {"resourceName": "socialActions/likes", "method": "CREATE", "capturedAt": TODAY_MS,
     "actor": "urn:li:person:a", "activity": {"object": "urn:li:share:1"}},
    {"resourceName": "socialActions/likes", "method": "CREATE", "capturedAt": TODAY_MS,
     "actor": "urn:li:person:b", "activity": {"object": "urn:li:share:1"}},
    {"resourceName": "messages", "method": "CREATE", "capturedAt": TODAY_MS,
     "actor": "urn:li:person:me", "activity": {}},
]}

CONNECTIONS = {"elements": [{"snapshotData": [
    {"Connected On": "18 Oct 2026", "Industry": "Software"},
    {"Connected On": "17 Oct 2026", "Industry": "Software"},
    {"connectedOn": "2026-10-01"},
    {"Connected On": "01 Jan 2020"},
    {"Connected On": "01 Feb 2021"},
]}]}

POSTS = {"elements": [{"snapshotData": [{"ShareCommentary": "Old post #python #career"}]}]}


def _full() -> RawResources:
    return RawResources(changelog=CHANGELOG, connections=CONNECTIONS, posts=POSTS)


def test_report_has_all_sections():
    report = build_analytics(_full(), "30d", now=NOW).model_dump(mode="json", by_alias=True)
    assert set(report) == TOP_LEVEL_KEYS
    assert report["timeRange"] == "30d"
    assert report["lastUpdated"] == "2026-10-19T15:00:00.000Z"


def test_report_end_to_end_values():
    report = build_analytics(_full(), "30d", now=NOW)
    assert report.posts_engagements_trend[-2].posts == 1
    assert report.posts_engagements_trend[-1].likes == 2
    [post] = report.engagement_per_post
    assert (post.likes, post.total_engagement) == (2, 2)
    assert report.connections_growth[-1].total_connections == 3
    assert [(h.hashtag, h.count) for h in report.top_hashtags] == [("#python", 2), ("#career", 1)]
    assert report.messages_sent_received[-1].sent == 1
    assert report.post_types_breakdown[0].name == "Text Only"
    assert report.audience_distribution.industries[0].name == "Unknown"


def test_all_resources_missing_gives_empty_report():
    report = build_analytics(RawResources(), "7d", now=NOW)
    assert len(report.posts_engagements_trend) == 7
    assert len(report.connections_growth) == 7
    assert len(report.messages_sent_received) == 30
    assert report.post_types_breakdown == []
    assert report.top_hashtags == []
    assert report.engagement_per_post == []
    assert report.audience_distribution.industries == []
    assert len(report.score_impacts) == len(SCORE_IMPACTS)


def test_explicit_member_id_overrides_inference():
    report = build_analytics(_full(), "30d", now=NOW, member_id="urn:li:person:other")
    today = report.messages_sent_received[-1]
    assert (today.sent, today.received) == (0, 1)


def test_repeated_builds_are_identical_apart_from_timestamp():
    first = build_analytics(_full(), "90d", now=NOW).model_dump(mode="json", by_alias=True)
    second = build_analytics(_full(), "90d", now=NOW + timedelta(minutes=5)).model_dump(mode="json", by_alias=True)
    first.pop("lastUpdated")
    second.pop("lastUpdated")
    assert json.dumps(first, sort_keys=True) == json.dumps(second, sort_keys=True)


def test_score_impacts_serialize_tips_as_lists():
    report = build_analytics(RawResources(), now=NOW).model_dump(mode="json", by_alias=True)
    entry = report["scoreImpacts"]["postingActivity"]
    assert entry["tips"][0] == "Post 3-5 times per week"
    assert set(entry) == {"description", "impact", "tips"}
