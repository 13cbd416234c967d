"""Synthetic metrics used when no platform data can be fetched.

This is a degraded mode: the numbers are random and only keep the report
readable. Pass a seeded ``numpy.random.Generator`` for repeatable output.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import numpy as np

from ..core.enums import Platform
from ..core.models import FollowerSample, MetricsBundle, PostSample
from .base import MetricsProvider, resolve_window, window_days

SAMPLE_TITLES = (
    "Behind the scenes of our latest product",
    "5 tips for increasing productivity",
    "Our journey to 10K followers",
    "Customer spotlight: Meet Jane",
    "How we give back to the community",
)

TIKTOK_SAMPLE_TITLES = (
    "Our latest dance challenge",
    "Behind the scenes",
    "Q&A with the team",
    "Top 5 moments of the week",
    "Fun facts about our brand",
)


def random_history(
    start: datetime,
    total_days: int,
    *,
    start_count: int,
    gain_low: int,
    gain_high: int,
    rng: np.random.Generator,
    grow_first_day: bool = False,
) -> list[FollowerSample]:
    """Daily samples growing by a random amount in ``[gain_low, gain_high)``."""
    gains = rng.integers(gain_low, gain_high, size=total_days + 1)
    if not grow_first_day:
        gains[0] = 0
    counts = start_count + np.cumsum(gains)
    return [
        FollowerSample(date=start + timedelta(days=i), count=int(c))
        for i, c in enumerate(counts)
    ]


def random_posts(
    titles: tuple[str, ...],
    *,
    likes: tuple[int, int],
    comments: tuple[int, int],
    rng: np.random.Generator,
) -> list[PostSample]:
    like_counts = rng.integers(likes[0], likes[1], size=len(titles))
    comment_counts = rng.integers(comments[0], comments[1], size=len(titles))
    return [
        PostSample(title=t, likes=int(lk), comments=int(cm))
        for t, lk, cm in zip(titles, like_counts, comment_counts, strict=True)
    ]


class SyntheticProvider(MetricsProvider):
    """Random but plausible metrics: ~1000 followers growing 5-14 a day."""

    platform = Platform.SYNTHETIC

    def __init__(self, rng: np.random.Generator | None = None, default_days: int = 30):
        self.rng = rng or np.random.default_rng()
        self.default_days = default_days

    def fetch_metrics(
        self,
        profile_url: str | None = None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        start, end = resolve_window(since, until, self.default_days)
        history = random_history(
            start,
            window_days(start, end),
            start_count=1000,
            gain_low=5,
            gain_high=15,
            rng=self.rng,
        )
        posts = random_posts(SAMPLE_TITLES, likes=(100, 600), comments=(10, 60), rng=self.rng)
        return MetricsBundle(follower_history=history, top_posts=posts)
