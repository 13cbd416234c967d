"""Metrics providers for the platforms a report can be built from.

Each provider turns a public profile URL into a ``MetricsBundle``. Scraped
data is unreliable, so ``fetch_metrics`` falls back to the synthetic provider
whenever a platform provider fails.

Main Components:
    - MetricsProvider: abstract provider contract
    - InstagramProvider: web profile endpoint (follower count + recent posts)
    - TikTokProvider: profile page scrape (follower count only)
    - SyntheticProvider: random degraded-mode data
    - fetch_metrics: platform dispatch with synthetic fallback
"""

from __future__ import annotations

from .base import MetricsProvider
from .instagram import InstagramProvider
from .service import fetch_metrics, get_provider
from .synthetic import SyntheticProvider
from .tiktok import TikTokProvider

__all__ = [
    "InstagramProvider",
    "MetricsProvider",
    "SyntheticProvider",
    "TikTokProvider",
    "fetch_metrics",
    "get_provider",
]
