"""Base provider interface for social media metrics acquisition."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import urlparse

from ..core.config import DEFAULT_WINDOW_DAYS
from ..core.enums import Platform
from ..core.models import FollowerSample, MetricsBundle

TOP_POSTS_LIMIT = 3


class MetricsProvider(ABC):
    """Abstract base class for metrics providers.

    Every provider returns a complete ``MetricsBundle``. Providers own their
    network timeouts; the renderer only ever sees finished data.

    Attributes:
        platform: Platform this provider serves
    """

    platform: Platform

    @abstractmethod
    def fetch_metrics(
        self,
        profile_url: str | None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle:
        """Fetch follower history and top posts for a profile.

        Args:
            profile_url: Public profile URL
            since: Start of the reporting window (default: ``until`` - 30 days)
            until: End of the reporting window (default: now)

        Returns:
            MetricsBundle with chronological follower history

        Raises:
            ProviderError: When the platform data cannot be retrieved or parsed
        """
        pass

    def fallback_metrics(
        self,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> MetricsBundle | None:
        """Platform-scale synthetic metrics used when ``fetch_metrics`` fails.

        Returns None when the provider has no degraded mode of its own.
        """
        return None

    def _safe_int(self, value: Any, default: int = 0) -> int:
        """Safely convert value to int, returning default on failure."""
        try:
            return int(value)
        except (TypeError, ValueError):
            return default


def resolve_window(
    since: datetime | None,
    until: datetime | None,
    default_days: int = DEFAULT_WINDOW_DAYS,
) -> tuple[datetime, datetime]:
    end = until or datetime.now(UTC)
    start = since or end - timedelta(days=default_days)
    return start, end


def window_days(start: datetime, end: datetime) -> int:
    """Whole days covered by the window, at least one."""
    return max(1, math.ceil((end - start).total_seconds() / 86400))


def linear_history(
    follower_count: int, start: datetime, end: datetime, daily_gain: int
) -> list[FollowerSample]:
    """Approximate a history from the current count assuming steady daily growth.

    The estimated starting count never drops below zero.
    """
    total_days = window_days(start, end)
    start_count = max(0, follower_count - total_days * daily_gain)
    increment = (follower_count - start_count) / total_days
    return [
        FollowerSample(
            date=start + timedelta(days=i),
            count=math.floor(start_count + increment * i + 0.5),
        )
        for i in range(total_days + 1)
    ]


def username_from_url(url: str | None, strip_at: bool = False) -> str | None:
    """First path segment of a profile URL, or None if there is none."""
    if not url:
        return None
    try:
        parsed = urlparse(url)
    except ValueError:
        return None
    if not parsed.scheme or not parsed.netloc:
        return None
    parts = [p for p in parsed.path.split("/") if p]
    if not parts:
        return None
    first = parts[0]
    if strip_at and first.startswith("@"):
        first = first[1:]
    return first or None
