"""TikTok metrics scraped from the public profile page."""

from __future__ import annotations

import re
from datetime import datetime

import numpy as np
import requests

from ..core.config import DEFAULT_REQUEST_TIMEOUT
from ..core.enums import Platform
from ..core.errors import ProviderError
from ..core.logging_config import get_logger
from ..core.models import FollowerSample, MetricsBundle, PostSample
from .base import (
    TOP_POSTS_LIMIT,
    MetricsProvider,
    linear_history,
    resolve_window,
    username_from_url,
    window_days,
)
from .synthetic import TIKTOK_SAMPLE_TITLES, random_history, random_posts

logger = get_logger(__name__)

FOLLOWER_COUNT_RE = re.compile(r'followerCount":(\d+)')
TIKTOK_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Referer": "https://www.tiktok.com/",
}
ASSUMED_DAILY_GAIN = 50


def parse_tiktok_username(url: str | None) -> str | None:
    """Username from ``https://www.tiktok.com/@<username>``, without the ``@``."""
    return username_from_url(url, strip_at=True)


def extract_follower_count(html: str) -> int | None:
    match = FOLLOWER_COUNT_RE.search(html)
    return int(match.group(1)) if match else None


class TikTokProvider(MetricsProvider):
    """Follower count from the profile page's embedded JSON.

    Post data is not exposed on the page, so posts are synthesized. When the
    follower count cannot be found the history comes back empty and a
    synthetic TikTok-scale history is used instead. Only an empty history
    triggers that fallback; a found count of 0 is kept as is.
    """

    platform = Platform.TIKTOK
    BASE_URL = "https://www.tiktok.com"

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        rng: np.random.Generator | None = None,
        default_days: int = 30,
    ):
        self.timeout = timeout
        self.rng = rng or np.random.default_rng()
        self.default_days = default_days

    def _fetch_page(self, username: str) -> str:
        try:
            resp = requests.get(
                f"{self.BASE_URL}/@{username}",
                headers=TIKTOK_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"TikTok request failed: {e}") from e
        if resp.status_code != 200:
            raise ProviderError(f"Failed to fetch TikTok page: {resp.status_code}")
        return resp.text

    def _synthetic_history(self, start: datetime, end: datetime) -> list[FollowerSample]:
        return random_history(
            start,
            window_days(start, end),
            start_count=500,
            gain_low=20,
            gain_high=70,
            rng=self.rng,
            grow_first_day=True,
        )

    def _synthetic_posts(self) -> list[PostSample]:
        posts = random_posts(
            TIKTOK_SAMPLE_TITLES, likes=(500, 5500), comments=(20, 220), rng=self.rng
        )
        return posts[:TOP_POSTS_LIMIT]

    def fetch_metrics(
        self,
        profile_url: str | None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        username = parse_tiktok_username(profile_url)
        if not username:
            raise ProviderError(f"Invalid TikTok URL: {profile_url!r}")

        start, end = resolve_window(since, until, self.default_days)
        follower_count = extract_follower_count(self._fetch_page(username))
        history = (
            linear_history(follower_count, start, end, ASSUMED_DAILY_GAIN)
            if follower_count is not None
            else []
        )
        if not history:
            logger.warning(
                "TikTok follower count not found, using synthetic history",
                extra={"username": username},
            )
            history = self._synthetic_history(start, end)

        logger.info(
            "Fetched TikTok metrics",
            extra={"username": username, "follower_count": follower_count},
        )
        return MetricsBundle(follower_history=history, top_posts=self._synthetic_posts())

    def fallback_metrics(
        self,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        """TikTok-scale synthetic data: ~500 followers growing 20-69 a day."""
        start, end = resolve_window(since, until, self.default_days)
        return MetricsBundle(
            follower_history=self._synthetic_history(start, end),
            top_posts=self._synthetic_posts(),
        )
