"""Static reference table explaining what drives each profile score."""
from types import MappingProxyType

from linkedin_lens.models import ScoreImpact

SCORE_IMPACTS = MappingProxyType({
    "profileCompleteness": ScoreImpact(
        description="A complete profile increases visibility and credibility",
        impact="Affects profile visibility and professional brand scores",
        tips=("Add a professional headline", "Complete work experience", "Add relevant skills"),
    ),
    "postingActivity": ScoreImpact(
        description="Regular posting keeps you visible in your network's feed",
        impact="Directly affects engagement quality and professional brand",
        tips=("Post 3-5 times per week", "Share industry insights", "Engage with others' content"),
    ),
    "engagementQuality": ScoreImpact(
        description="High engagement indicates valuable content and strong network",
        impact="Influences audience relevance and mutual interactions",
        tips=("Ask questions in posts", "Share personal experiences", "Respond to comments quickly"),
    ),
    "networkGrowth": ScoreImpact(
        description="Growing your network expands your reach and opportunities",
        impact="Affects audience relevance and engagement rate calculations",
        tips=("Connect with industry peers", "Attend virtual events", "Engage before connecting"),
    ),
    "audienceRelevance": ScoreImpact(
        description="A relevant audience is more likely to engage with your content",
        impact="Improves engagement rate and professional brand perception",
        tips=("Connect with industry professionals", "Join relevant groups", "Share industry-specific content"),
    ),
    "contentDiversity": ScoreImpact(
        description="Varied content types keep your audience engaged",
        impact="Enhances engagement quality and professional brand",
        tips=("Mix text, images, and videos", "Share articles and insights", "Use polls and questions"),
    ),
    "engagementRate": ScoreImpact(
        description="High engagement relative to network size shows content quality",
        impact="Key metric for LinkedIn algorithm and visibility",
        tips=("Post when audience is active", "Create conversation-starting content", "Use relevant hashtags"),
    ),
    "mutualInteractions": ScoreImpact(
        description="Engaging with others builds relationships and visibility",
        impact="Improves network growth and audience relevance",
        tips=("Like and comment on others' posts", "Share valuable content", "Start conversations"),
    ),
    "profileVisibility": ScoreImpact(
        description="High visibility indicates strong personal brand",
        impact="Affects all other scores through increased exposure",
        tips=("Optimize profile for search", "Use keywords in headline", "Stay active and consistent"),
    ),
    "professionalBrand": ScoreImpact(
        description="Strong professional brand attracts the right opportunities",
        impact="Influences all engagement and growth metrics",
        tips=("Define your expertise area", "Share thought leadership", "Maintain consistent messaging"),
    ),
})
