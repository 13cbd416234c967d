"""Vector visuals for social media reports.

This package turns follower history and post engagement into immutable draw
commands (lines, polylines, rectangles, ellipses, text) that the HTML
renderer flattens into inline SVG. Nothing here touches a PDF canvas
directly, so every function is a pure mapping from data to coordinates.

Main Components:
    - geometry: line chart (follower growth) and grouped bar chart (likes vs comments)
    - drawing: the draw command types and the ``Drawing`` container
    - palette: brand colors shared by charts and page frames

Usage:
    from social_report.visuals import build_line_chart

    chart = build_line_chart(metrics.follower_history)
    if chart is None:
        ...  # fewer than two samples, skip the section
"""

from __future__ import annotations

from .drawing import Box, Drawing
from .geometry import build_bar_chart, build_line_chart

__all__ = ["Box", "Drawing", "build_bar_chart", "build_line_chart"]
