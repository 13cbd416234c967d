from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.models import MetricsBundle


dataclass_kwargs = {"slots": True, "frozen": True}

FORECAST_HORIZONS = (30, 90)


@dataclass(**dataclass_kwargs)
class DerivedStats:
    start_count: int
    end_count: int
    growth_percent: float
    total_new_followers: int
    daily_growth: float
    total_likes: int
    total_comments: int
    avg_likes: float
    avg_comments: float
    engagement_rate: float  # percent
    comment_like_ratio: float  # percent
    growth_slope: float  # followers per day
    forecast_30: int
    forecast_90: int


def round_half_up(x: float) -> int:
    """Round like JavaScript's Math.round: halves go toward +infinity."""
    return math.floor(x + 0.5)


def growth_percent(start_count: int, end_count: int) -> float:
    if start_count == 0:
        return 0.0
    return (end_count - start_count) / start_count * 100


def engagement_rate(
    total_likes: int, total_comments: int, post_count: int, end_count: int
) -> float:
    if end_count <= 0 or post_count <= 0:
        return 0.0
    return (total_likes + total_comments) / (post_count * end_count) * 100


def comment_like_ratio(total_likes: int, total_comments: int) -> float:
    if total_likes <= 0:
        return 0.0
    return total_comments / total_likes * 100


def growth_slope(start_count: int, end_count: int, samples: int) -> float:
    num_days = max(1, samples - 1)
    return (end_count - start_count) / num_days


def forecast(end_count: int, slope: float, days: int) -> int:
    return round_half_up(end_count + slope * days)


def compute_stats(metrics: MetricsBundle) -> DerivedStats:
    counts = [sample.count for sample in metrics.follower_history]
    samples = len(counts)
    start_count = counts[0] if counts else 0
    end_count = counts[-1] if counts else 0
    total_new = end_count - start_count

    posts = metrics.top_posts
    post_count = len(posts)
    total_likes = sum(p.likes or 0 for p in posts)
    total_comments = sum(p.comments or 0 for p in posts)

    slope = growth_slope(start_count, end_count, samples)
    forecast_30, forecast_90 = (forecast(end_count, slope, n) for n in FORECAST_HORIZONS)

    return DerivedStats(
        start_count=start_count,
        end_count=end_count,
        growth_percent=growth_percent(start_count, end_count),
        total_new_followers=total_new,
        daily_growth=total_new / (samples - 1) if samples > 1 else 0.0,
        total_likes=total_likes,
        total_comments=total_comments,
        avg_likes=total_likes / post_count if post_count else 0.0,
        avg_comments=total_comments / post_count if post_count else 0.0,
        engagement_rate=engagement_rate(total_likes, total_comments, post_count, end_count),
        comment_like_ratio=comment_like_ratio(total_likes, total_comments),
        growth_slope=slope,
        forecast_30=forecast_30,
        forecast_90=forecast_90,
    )
