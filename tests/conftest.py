"""Shared fixtures for social_report tests."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from unittest.mock import MagicMock

import pytest

from social_report.core.config import Settings
from social_report.core.models import FollowerSample, MetricsBundle, PostSample, ReportOptions


def make_history(counts: list[int], start: datetime | None = None) -> list[FollowerSample]:
    start = start or datetime(2025, 3, 1)
    return [FollowerSample(date=start + timedelta(days=i), count=c) for i, c in enumerate(counts)]


@pytest.fixture
def sample_metrics() -> MetricsBundle:
    """Ten days of growth and three posts."""
    return MetricsBundle(
        follower_history=make_history([1000, 1010, 1025, 1030, 1042, 1055, 1061, 1070, 1085, 1100]),
        top_posts=[
            PostSample(title="Behind the scenes of our latest product", likes=540, comments=42),
            PostSample(title="5 tips for increasing productivity", likes=410, comments=38),
            PostSample(title="Our journey to 10K followers", likes=305, comments=12),
        ],
    )


@pytest.fixture
def empty_metrics() -> MetricsBundle:
    return MetricsBundle(follower_history=[], top_posts=[])


@pytest.fixture
def options() -> ReportOptions:
    return ReportOptions(since=date(2025, 3, 1), until=date(2025, 3, 10))


@pytest.fixture
def settings() -> Settings:
    return Settings(logo_path=None)


@pytest.fixture
def fake_exporter() -> MagicMock:
    """Exporter stand-in that returns fixed PDF bytes without WeasyPrint."""
    exporter = MagicMock()
    exporter.html_to_pdf.return_value = b"%PDF-1.7 fake"
    exporter.is_available.return_value = True
    return exporter
