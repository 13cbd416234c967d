"""Provider selection with synthetic fallback."""

from __future__ import annotations

from datetime import datetime

from ..core.config import Settings, get_settings
from ..core.enums import Platform
from ..core.logging_config import get_logger
from ..core.models import MetricsBundle
from .base import MetricsProvider
from .instagram import InstagramProvider
from .synthetic import SyntheticProvider
from .tiktok import TikTokProvider

logger = get_logger(__name__)


def get_provider(platform: Platform, settings: Settings | None = None) -> MetricsProvider:
    settings = settings or get_settings()
    if platform is Platform.INSTAGRAM:
        return InstagramProvider(
            timeout=settings.request_timeout, default_days=settings.default_window_days
        )
    if platform is Platform.TIKTOK:
        return TikTokProvider(
            timeout=settings.request_timeout, default_days=settings.default_window_days
        )
    return SyntheticProvider(default_days=settings.default_window_days)


def fetch_metrics(
    since: datetime | None = None,
    until: datetime | None = None,
    platform: str | Platform | None = None,
    profile_url: str | None = None,
    *,
    settings: Settings | None = None,
    fallback: MetricsProvider | None = None,
) -> MetricsBundle:
    """Fetch metrics for a profile, falling back to synthetic data.

    The platform provider is used only when both ``platform`` and
    ``profile_url`` are given. When that provider fails, an explicit
    ``fallback`` is used if given, otherwise the provider's own
    platform-scale synthetic data. Unknown platforms and providers without
    a degraded mode fall back to a ``SyntheticProvider``.
    """
    settings = settings or get_settings()

    if platform and profile_url:
        try:
            resolved = platform if isinstance(platform, Platform) else Platform(platform.lower())
        except ValueError:
            logger.warning("Unsupported platform, using synthetic metrics", extra={"platform": platform})
        else:
            if resolved is not Platform.SYNTHETIC:
                provider = get_provider(resolved, settings)
                try:
                    return provider.fetch_metrics(profile_url, since, until)
                except Exception as e:
                    logger.error(
                        "Error fetching metrics from provider, using synthetic metrics",
                        extra={"platform": resolved.value, "error": str(e)},
                        exc_info=True,
                    )
                if fallback is None:
                    degraded = provider.fallback_metrics(since, until)
                    if degraded is not None:
                        return degraded

    fallback = fallback or SyntheticProvider(default_days=settings.default_window_days)
    return fallback.fetch_metrics(profile_url, since, until)
