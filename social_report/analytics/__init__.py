"""Derived analytics for social media reports.

Turns a raw ``MetricsBundle`` into the numbers and sentences the report shows:
growth and engagement statistics, a linear follower forecast, key takeaway
lines and rule-based recommendations. Everything here is a pure function of
its input and never raises for sparse data.
"""

from __future__ import annotations

from .recommendations import build_key_takeaways, build_recommendations
from .stats import DerivedStats, compute_stats

__all__ = ["DerivedStats", "build_key_takeaways", "build_recommendations", "compute_stats"]
