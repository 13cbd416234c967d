"""Chart geometry for the report's vector charts.

Both charts are pure mappings from data onto a caller-supplied ``Box``. The
``build_*`` functions wrap that mapping with axes, labels and a legend and
return a ``Drawing``, or ``None`` when there is not enough data to draw.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..analytics.formatting import format_date
from ..core.logging_config import get_logger
from ..core.models import FollowerSample, PostSample
from .drawing import Box, Drawing, DrawCommand, Line, Point, Polyline, Rect, Text
from .palette import AXIS, AXIS_LIGHT, BODY_TEXT, PRIMARY, SECONDARY

logger = get_logger(__name__)

LINE_CHART_WIDTH = 450
LINE_CHART_HEIGHT = 220
LINE_CHART_GUTTER = 50  # room for the value labels left of the y axis
LINE_CHART_TOP = 6
LINE_WIDTH = 1.5

BAR_WIDTH = 30
BAR_GAP = 20
BAR_CHART_HEIGHT = 180
BAR_CHART_TOP = 6
LEGEND_OFFSET = 20
LEGEND_SWATCH = 10
LEGEND_SPACING = 60

LABEL_SIZE = 8


def line_points(values: Sequence[float], box: Box) -> list[Point]:
    """Map values to chart coordinates; fewer than two values map to nothing."""
    n = len(values)
    if n < 2:
        return []
    lo = min(values)
    hi = max(values)
    y_range = (hi - lo) or 1
    x_step = box.width / (n - 1)
    return [
        Point(
            x=box.x + i * x_step,
            y=box.y + box.height - ((v - lo) / y_range) * box.height,
        )
        for i, v in enumerate(values)
    ]


def build_line_chart(
    history: Sequence[FollowerSample], box: Box | None = None
) -> Drawing | None:
    """Follower growth line chart, or ``None`` with fewer than two samples.

    ``box`` is the plot area; min/max value labels sit in the
    ``LINE_CHART_GUTTER`` to its left and dates sit under its bottom edge.
    """
    if len(history) < 2:
        logger.debug("Not enough follower samples for a growth chart", extra={"samples": len(history)})
        return None

    if box is None:
        box = Box(LINE_CHART_GUTTER, LINE_CHART_TOP, LINE_CHART_WIDTH, LINE_CHART_HEIGHT)

    counts = [s.count for s in history]
    points = line_points(counts, box)

    label_baseline = box.bottom + 4 + LABEL_SIZE
    value_x = box.x - LINE_CHART_GUTTER + 5
    commands: list[DrawCommand] = [
        Line(box.x, box.y, box.x, box.bottom, stroke=AXIS_LIGHT),
        Line(box.x, box.bottom, box.right, box.bottom, stroke=AXIS_LIGHT),
        Text(value_x, box.y + 4, str(max(counts)), LABEL_SIZE, BODY_TEXT),
        Text(value_x, box.bottom, str(min(counts)), LABEL_SIZE, BODY_TEXT),
        Text(box.x, label_baseline, format_date(history[0].date), LABEL_SIZE, BODY_TEXT),
        Text(
            box.right,
            label_baseline,
            format_date(history[-1].date),
            LABEL_SIZE,
            BODY_TEXT,
            anchor="end",
        ),
        Polyline(tuple(points), stroke=PRIMARY, width=LINE_WIDTH),
    ]
    return Drawing(
        width=box.right + 2,
        height=label_baseline + 4,
        commands=tuple(commands),
    )


def bar_chart_width(post_count: int) -> float:
    return post_count * (2 * BAR_WIDTH + BAR_GAP)


def bar_rects(posts: Sequence[PostSample], box: Box) -> list[tuple[Rect, Rect]]:
    """Likes/comments bar pairs anchored to the bottom edge of ``box``."""
    max_metric = max(
        [p.likes or 0 for p in posts] + [p.comments or 0 for p in posts], default=0
    ) or 1

    pairs = []
    for idx, post in enumerate(posts):
        likes_height = (post.likes or 0) / max_metric * box.height
        comments_height = (post.comments or 0) / max_metric * box.height
        base_x = box.x + idx * (2 * BAR_WIDTH + BAR_GAP)
        pairs.append(
            (
                Rect(base_x, box.bottom - likes_height, BAR_WIDTH, likes_height, fill=PRIMARY),
                Rect(
                    base_x + BAR_WIDTH,
                    box.bottom - comments_height,
                    BAR_WIDTH,
                    comments_height,
                    fill=SECONDARY,
                ),
            )
        )
    return pairs


def build_bar_chart(
    posts: Sequence[PostSample], box: Box | None = None
) -> Drawing | None:
    """Grouped likes/comments bar chart, or ``None`` when there are no posts."""
    if not posts:
        logger.debug("No posts to chart")
        return None

    if box is None:
        box = Box(1, BAR_CHART_TOP, bar_chart_width(len(posts)), BAR_CHART_HEIGHT)

    commands: list[DrawCommand] = [
        Line(box.x, box.y, box.x, box.bottom, stroke=AXIS),
        Line(box.x, box.bottom, box.right, box.bottom, stroke=AXIS),
    ]
    for idx, (likes, comments) in enumerate(bar_rects(posts, box)):
        commands.extend([likes, comments])
        # index label centered under the pair
        commands.append(
            Text(
                likes.x + BAR_WIDTH,
                box.bottom + 2 + LABEL_SIZE,
                str(idx + 1),
                LABEL_SIZE,
                BODY_TEXT,
                anchor="middle",
            )
        )

    legend_y = box.bottom + LEGEND_OFFSET
    legend_x = box.x
    second_x = legend_x + LEGEND_SPACING
    commands.extend(
        [
            Rect(legend_x, legend_y, LEGEND_SWATCH, LEGEND_SWATCH, fill=PRIMARY),
            Text(legend_x + 14, legend_y + LABEL_SIZE, "Likes", LABEL_SIZE, BODY_TEXT),
            Rect(second_x, legend_y, LEGEND_SWATCH, LEGEND_SWATCH, fill=SECONDARY),
            Text(second_x + 14, legend_y + LABEL_SIZE, "Comments", LABEL_SIZE, BODY_TEXT),
        ]
    )
    legend_right = second_x + 14 + 45
    return Drawing(
        width=max(box.right, legend_right) + 1,
        height=legend_y + LEGEND_SWATCH + 4,
        commands=tuple(commands),
    )
