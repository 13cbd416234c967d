"""Tests for recommendation rules and key takeaways."""

from __future__ import annotations

import dataclasses

import pytest

from social_report.analytics import recommendations as rec
from social_report.analytics.stats import DerivedStats, compute_stats
from social_report.core.models import MetricsBundle


def _stats(**overrides: float) -> DerivedStats:
    return dataclasses.replace(compute_stats(MetricsBundle()), **overrides)


@pytest.mark.parametrize(
    "slope,daily,expected",
    [
        (0.0, 0.0, rec.GROWTH_FLAT),
        (-3.0, 10.0, rec.GROWTH_FLAT),
        (2.0, 2.0, rec.GROWTH_MODEST),
        (4.99, 4.99, rec.GROWTH_MODEST),
        (5.0, 5.0, rec.GROWTH_STRONG),
        (50.0, 50.0, rec.GROWTH_STRONG),
    ],
)
def test_growth_advice_exactly_one(slope: float, daily: float, expected: str) -> None:
    """Exactly one growth-cadence message fires for any slope/daily pair."""
    recs = rec.build_recommendations(_stats(growth_slope=slope, daily_growth=daily))
    growth_messages = {rec.GROWTH_FLAT, rec.GROWTH_MODEST, rec.GROWTH_STRONG}

    assert [r for r in recs if r in growth_messages] == [expected]
    assert recs[0] == expected


@pytest.mark.parametrize(
    "rate,expected",
    [(0.5, rec.ENGAGEMENT_LOW), (6.0, rec.ENGAGEMENT_HIGH), (3.0, None), (1.0, None), (5.0, None)],
)
def test_engagement_advice(rate: float, expected: str | None) -> None:
    """Engagement advice is silent between 1% and 5% inclusive."""
    recs = rec.build_recommendations(_stats(engagement_rate=rate))

    fired = [r for r in recs if r in (rec.ENGAGEMENT_LOW, rec.ENGAGEMENT_HIGH)]
    assert fired == ([expected] if expected else [])


@pytest.mark.parametrize(
    "ratio,expected", [(0.0, rec.COMMENTS_LOW), (9.99, rec.COMMENTS_LOW), (10.0, rec.COMMENTS_BALANCED)]
)
def test_comment_ratio_advice(ratio: float, expected: str) -> None:
    recs = rec.build_recommendations(_stats(comment_like_ratio=ratio))
    assert expected in recs
    assert len({rec.COMMENTS_LOW, rec.COMMENTS_BALANCED} & set(recs)) == 1


def test_closing_recommendation_always_last() -> None:
    """The review-your-content advice is always appended."""
    for stats in (_stats(), _stats(engagement_rate=3.0, growth_slope=9.0, daily_growth=9.0)):
        assert rec.build_recommendations(stats)[-1] == rec.REVIEW_TOP_CONTENT


def test_recommendation_count() -> None:
    """Growth + comment ratio + closing always fire; engagement only at the extremes."""
    assert len(rec.build_recommendations(_stats(engagement_rate=3.0))) == 3
    assert len(rec.build_recommendations(_stats(engagement_rate=0.2))) == 4


def test_key_takeaways_text() -> None:
    """Five takeaway lines with fixed decimals and grouped forecasts."""
    stats = _stats(
        daily_growth=11.25,
        engagement_rate=4.0816,
        comment_like_ratio=7.33,
        forecast_30=3200,
        forecast_90=9200,
    )

    assert rec.build_key_takeaways(stats) == [
        "Average daily follower growth: 11.3 per day.",
        "Engagement rate: 4.08% (likes + comments relative to reach).",
        "Comment-to-like ratio: 7.33%.",
        "Projected followers in 30 days: 3,200.",
        "Projected followers in 90 days: 9,200.",
    ]
