"""Instagram metrics via the public web profile endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import numpy as np
import requests

from ..core.config import DEFAULT_REQUEST_TIMEOUT
from ..core.enums import Platform
from ..core.errors import ProviderError
from ..core.logging_config import get_logger
from ..core.models import MetricsBundle, PostSample
from .base import (
    TOP_POSTS_LIMIT,
    MetricsProvider,
    linear_history,
    resolve_window,
    username_from_url,
    window_days,
)
from .synthetic import SAMPLE_TITLES, random_history, random_posts

logger = get_logger(__name__)

# The endpoint answers 400 ("useragent mismatch") without a mobile client UA
IG_HEADERS = {
    "User-Agent": "Instagram 155.0.0.37.107 Android",
    "X-IG-App-ID": "936619743392459",
}
ASSUMED_DAILY_GAIN = 10


def parse_instagram_username(url: str | None) -> str | None:
    """Username from ``https://www.instagram.com/<username>/``."""
    return username_from_url(url)


class InstagramProvider(MetricsProvider):
    """Fetch follower count and recent posts for a public Instagram profile.

    Instagram only exposes the current follower count, so the history is a
    straight line assuming +10 followers a day over the window.
    """

    platform = Platform.INSTAGRAM
    BASE_URL = "https://www.instagram.com/api/v1/users/web_profile_info/"

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        rng: np.random.Generator | None = None,
        default_days: int = 30,
    ):
        self.timeout = timeout
        self.rng = rng or np.random.default_rng()
        self.default_days = default_days

    def _fetch_user(self, username: str) -> dict[str, Any]:
        try:
            resp = requests.get(
                self.BASE_URL,
                params={"username": username},
                headers=IG_HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(f"Instagram request failed: {e}") from e
        if resp.status_code != 200:
            raise ProviderError(f"Failed to fetch Instagram data: {resp.status_code}")
        try:
            payload = resp.json() or {}
        except ValueError as e:
            raise ProviderError("Instagram returned invalid JSON") from e
        user = (payload.get("data") or {}).get("user")
        if not user:
            raise ProviderError("Instagram user data not found")
        return user

    def _parse_posts(self, user: dict[str, Any]) -> list[PostSample]:
        edges = (user.get("edge_owner_to_timeline_media") or {}).get("edges") or []
        posts = []
        for edge in edges:
            node = edge.get("node") or {}
            caption_edges = (node.get("edge_media_to_caption") or {}).get("edges") or []
            caption = (caption_edges[0].get("node") or {}).get("text") if caption_edges else ""
            title = caption or node.get("accessibility_caption") or ""
            posts.append(
                PostSample(
                    title=title,
                    likes=self._safe_int((node.get("edge_liked_by") or {}).get("count")),
                    comments=self._safe_int(
                        (node.get("edge_media_to_comment") or {}).get("count")
                    ),
                )
            )
        posts.sort(key=lambda p: p.likes, reverse=True)
        return posts[:TOP_POSTS_LIMIT]

    def fetch_metrics(
        self,
        profile_url: str | None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        username = parse_instagram_username(profile_url)
        if not username:
            raise ProviderError(f"Invalid Instagram URL: {profile_url!r}")

        start, end = resolve_window(since, until, self.default_days)
        user = self._fetch_user(username)

        follower_count = (user.get("edge_followed_by") or {}).get("count")
        history = (
            linear_history(follower_count, start, end, ASSUMED_DAILY_GAIN)
            if isinstance(follower_count, int)
            else []
        )
        posts = self._parse_posts(user)
        logger.info(
            "Fetched Instagram metrics",
            extra={"username": username, "samples": len(history), "posts": len(posts)},
        )
        return MetricsBundle(follower_history=history, top_posts=posts)

    def fallback_metrics(
        self,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        """Sample-account data: ~1000 followers growing 5-14 a day, three posts."""
        start, end = resolve_window(since, until, self.default_days)
        history = random_history(
            start,
            window_days(start, end),
            start_count=1000,
            gain_low=5,
            gain_high=15,
            rng=self.rng,
            grow_first_day=True,
        )
        posts = random_posts(SAMPLE_TITLES, likes=(100, 600), comments=(10, 60), rng=self.rng)
        return MetricsBundle(follower_history=history, top_posts=posts[:TOP_POSTS_LIMIT])
