from __future__ import annotations

from .formatting import to_fixed, with_thousands
from .stats import DerivedStats


LOW_DAILY_GROWTH = 5
LOW_ENGAGEMENT_RATE = 1.0
HIGH_ENGAGEMENT_RATE = 5.0
LOW_COMMENT_LIKE_RATIO = 10.0

GROWTH_FLAT = (
    "Growth is flat or declining. Increase posting frequency and experiment with "
    "varied content types (videos, stories) to reignite growth."
)
GROWTH_MODEST = (
    "Growth is positive but modest. Leverage trending topics and hashtags to expand "
    "reach and attract new followers."
)
GROWTH_STRONG = (
    "Growth is strong. Maintain your current posting cadence and continue engaging "
    "with your audience to sustain momentum."
)
ENGAGEMENT_LOW = (
    "Low engagement rate. Encourage interaction by asking questions in captions and "
    "responding promptly to comments."
)
ENGAGEMENT_HIGH = (
    "High engagement rate. Capitalize on this by collaborating with influencers or "
    "hosting contests to further boost engagement."
)
COMMENTS_LOW = (
    "Comments are relatively low compared to likes. Inspire discussion by inviting "
    "followers to share their thoughts or experiences."
)
COMMENTS_BALANCED = (
    "Good balance between comments and likes. Keep fostering conversations to "
    "strengthen your community."
)
REVIEW_TOP_CONTENT = (
    "Regularly review your top performing content to identify themes that resonate "
    "with your audience, and iterate on these successes."
)


def growth_advice(growth_slope: float, daily_growth: float) -> str:
    if growth_slope <= 0:
        return GROWTH_FLAT
    if daily_growth < LOW_DAILY_GROWTH:
        return GROWTH_MODEST
    return GROWTH_STRONG


def engagement_advice(engagement_rate: float) -> str | None:
    if engagement_rate < LOW_ENGAGEMENT_RATE:
        return ENGAGEMENT_LOW
    if engagement_rate > HIGH_ENGAGEMENT_RATE:
        return ENGAGEMENT_HIGH
    return None


def comment_ratio_advice(comment_like_ratio: float) -> str:
    if comment_like_ratio < LOW_COMMENT_LIKE_RATIO:
        return COMMENTS_LOW
    return COMMENTS_BALANCED


def build_recommendations(stats: DerivedStats) -> list[str]:
    """Apply every rule in order; all that apply are returned."""
    recommendations = [growth_advice(stats.growth_slope, stats.daily_growth)]
    engagement = engagement_advice(stats.engagement_rate)
    if engagement:
        recommendations.append(engagement)
    recommendations.append(comment_ratio_advice(stats.comment_like_ratio))
    recommendations.append(REVIEW_TOP_CONTENT)
    return recommendations


def build_key_takeaways(stats: DerivedStats) -> list[str]:
    return [
        f"Average daily follower growth: {to_fixed(stats.daily_growth, 1)} per day.",
        f"Engagement rate: {to_fixed(stats.engagement_rate, 2)}% "
        "(likes + comments relative to reach).",
        f"Comment-to-like ratio: {to_fixed(stats.comment_like_ratio, 2)}%.",
        f"Projected followers in 30 days: {with_thousands(stats.forecast_30)}.",
        f"Projected followers in 90 days: {with_thousands(stats.forecast_90)}.",
    ]
