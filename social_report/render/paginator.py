"""Fixed four-page layout of a social media report.

The paginator turns metrics and derived stats into a ``ReportDocument``: an
immutable description of every page (frame, header, sections, tables and
charts). It always emits the same four pages. A section whose data is too
sparse (one follower sample, no posts) is left out of its page, but the page
itself is still produced.

    1. header + summary + follower growth chart
    2. follower history table + top posts bar chart
    3. key takeaways + recommendations
    4. top posts table
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..analytics.formatting import format_date, to_fixed
from ..analytics.recommendations import build_key_takeaways, build_recommendations
from ..analytics.stats import DerivedStats, compute_stats
from ..core.logging_config import get_logger
from ..core.models import MetricsBundle, ReportOptions
from ..visuals.drawing import Drawing, Ellipse, LinearGradient, Rect
from ..visuals.geometry import build_bar_chart, build_line_chart
from ..visuals.palette import GRADIENT_END, GRADIENT_START, WHITE

logger = get_logger(__name__)

# A4 in points
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
CARD_MARGIN_X = 50
CARD_MARGIN_Y = 50
CARD_RADIUS = 20
CARD_OPACITY = 0.9
CARD_PADDING_X = 20
CARD_PADDING_Y = 40

TITLE = "Social Media Report"
SUBTITLE = "Performance & Growth Insights"
DEFAULT_RANGE_LABEL = "Last 30 days"

SUMMARY_HEADING = "Summary"
GROWTH_HEADING = "Follower Growth"
HISTORY_HEADING = "Follower History"
ENGAGEMENT_HEADING = "Top Posts Engagement (Likes vs Comments)"
TAKEAWAYS_HEADING = "Key Takeaways & Growth Forecast"
RECOMMENDATIONS_HEADING = "Recommendations"
TOP_POSTS_HEADING = "Top Posts"
TOP_POSTS_COLUMNS = ("Title", "Likes", "Comments")

TITLE_LIMIT = 50
ELLIPSIS = "…"

HISTORY_ROWS_PER_COLUMN = 24
HISTORY_MAX_COLUMNS = 4
HISTORY_CAPACITY = HISTORY_ROWS_PER_COLUMN * HISTORY_MAX_COLUMNS


dataclass_kwargs = {"slots": True, "frozen": True}


@dataclass(**dataclass_kwargs)
class Table:
    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    flow_columns: int = 1  # long tables wrap into side-by-side columns

    @property
    def flow_chunks(self) -> list[tuple[tuple[str, ...], ...]]:
        """Rows split top-to-bottom into ``flow_columns`` columns."""
        per_column = max(1, math.ceil(len(self.rows) / self.flow_columns))
        return [
            self.rows[i : i + per_column] for i in range(0, len(self.rows), per_column)
        ] or [()]


@dataclass(**dataclass_kwargs)
class Section:
    heading: str
    style: str = "section"  # section | chart | subsection
    paragraphs: tuple[str, ...] = ()
    bullets: tuple[str, ...] = ()
    table: Table | None = None
    chart: Drawing | None = None


@dataclass(**dataclass_kwargs)
class Header:
    date_range: str
    title: str = TITLE
    subtitle: str = SUBTITLE
    logo_uri: str | None = None


@dataclass(**dataclass_kwargs)
class Page:
    number: int
    frame: Drawing
    sections: tuple[Section, ...]
    header: Header | None = None

    def section(self, heading: str) -> Section | None:
        return next((s for s in self.sections if s.heading == heading), None)

    @property
    def headings(self) -> list[str]:
        return [s.heading for s in self.sections]


@dataclass(**dataclass_kwargs)
class ReportDocument:
    pages: tuple[Page, ...]
    stats: DerivedStats
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    title: str = TITLE
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def text_content(self) -> list[str]:
        """All text the document shows, in page order."""
        texts: list[str] = []
        for page in self.pages:
            if page.header:
                texts.extend([page.header.date_range, page.header.title, page.header.subtitle])
            for section in page.sections:
                texts.append(section.heading)
                texts.extend(section.paragraphs)
                texts.extend(section.bullets)
                if section.table:
                    texts.extend(section.table.columns)
                    for row in section.table.rows:
                        texts.extend(row)
                if section.chart:
                    texts.extend(section.chart.texts)
        return texts


def truncate_title(title: str, limit: int = TITLE_LIMIT) -> str:
    if len(title) > limit:
        return title[: limit - 3] + ELLIPSIS
    return title


def date_range_label(options: ReportOptions) -> str:
    since = format_date(options.since) if options.since else DEFAULT_RANGE_LABEL
    if options.until:
        return f"{since} – {format_date(options.until)}"
    return since


def build_frame() -> Drawing:
    """Gradient background, soft ellipse and translucent card shared by every page."""
    gradient = LinearGradient(
        id="page-gradient",
        x1=0,
        y1=0,
        x2=PAGE_WIDTH,
        y2=PAGE_HEIGHT,
        stops=((0.0, GRADIENT_START), (1.0, GRADIENT_END)),
    )
    commands = (
        Rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, fill=gradient.ref),
        Ellipse(
            cx=PAGE_WIDTH * 0.7,
            cy=PAGE_HEIGHT * 0.1,
            rx=PAGE_WIDTH * 0.8,
            ry=PAGE_HEIGHT * 0.6,
            fill=WHITE,
            opacity=0.05,
        ),
        Rect(
            CARD_MARGIN_X,
            CARD_MARGIN_Y,
            PAGE_WIDTH - CARD_MARGIN_X * 2,
            PAGE_HEIGHT - CARD_MARGIN_Y * 2,
            fill=WHITE,
            opacity=CARD_OPACITY,
            radius=CARD_RADIUS,
        ),
    )
    return Drawing(PAGE_WIDTH, PAGE_HEIGHT, commands, gradients=(gradient,))


def summary_lines(stats: DerivedStats) -> list[str]:
    return [
        f"Follower count changed from {stats.start_count} to {stats.end_count}, "
        f"a {to_fixed(stats.growth_percent, 1)}% change.",
        f"Total new followers: {stats.total_new_followers} "
        f"(~{to_fixed(stats.daily_growth, 1)} per day)",
        f"Average likes: {to_fixed(stats.avg_likes, 0)}, "
        f"Average comments: {to_fixed(stats.avg_comments, 1)} per post",
    ]


def _summary_page(
    metrics: MetricsBundle, stats: DerivedStats, header: Header, frame: Drawing
) -> Page:
    sections = [Section(SUMMARY_HEADING, paragraphs=tuple(summary_lines(stats)))]
    chart = build_line_chart(metrics.follower_history)
    if chart is not None:
        sections.append(Section(GROWTH_HEADING, style="chart", chart=chart))
    return Page(1, frame, tuple(sections), header=header)


def _history_rows(metrics: MetricsBundle) -> tuple[tuple[str, ...], ...]:
    rows = tuple(
        (format_date(sample.date), str(sample.count)) for sample in metrics.follower_history
    )
    if len(rows) > HISTORY_CAPACITY:
        logger.warning(
            "Follower history longer than page 2 can hold; later rows are left out",
            extra={"rows": len(rows), "capacity": HISTORY_CAPACITY},
        )
        rows = rows[:HISTORY_CAPACITY]
    return rows


def _history_page(metrics: MetricsBundle, frame: Drawing) -> Page:
    rows = _history_rows(metrics)
    columns = max(1, math.ceil(len(rows) / HISTORY_ROWS_PER_COLUMN))
    table = Table(columns=(), rows=rows, flow_columns=columns)
    sections = [Section(HISTORY_HEADING, table=table)]
    chart = build_bar_chart(metrics.top_posts)
    if chart is not None:
        sections.append(Section(ENGAGEMENT_HEADING, style="chart", chart=chart))
    return Page(2, frame, tuple(sections))


def _insights_page(stats: DerivedStats, frame: Drawing) -> Page:
    sections = (
        Section(TAKEAWAYS_HEADING, bullets=tuple(build_key_takeaways(stats))),
        Section(
            RECOMMENDATIONS_HEADING,
            style="subsection",
            bullets=tuple(build_recommendations(stats)),
        ),
    )
    return Page(3, frame, sections)


def _posts_page(metrics: MetricsBundle, frame: Drawing) -> Page:
    rows = tuple(
        (truncate_title(post.title), str(post.likes), str(post.comments))
        for post in metrics.top_posts
    )
    table = Table(columns=TOP_POSTS_COLUMNS, rows=rows)
    return Page(4, frame, (Section(TOP_POSTS_HEADING, table=table),))


def build_document(
    metrics: MetricsBundle,
    options: ReportOptions | None = None,
    *,
    stats: DerivedStats | None = None,
    logo_uri: str | None = None,
) -> ReportDocument:
    """Lay out the four report pages.

    Args:
        metrics: Follower history and top posts
        options: Date range for the header label
        stats: Precomputed stats; computed from ``metrics`` when omitted
        logo_uri: Optional image URI (data: or file:) for the header logo

    Returns:
        ReportDocument with exactly four pages

    Raises:
        TypeError/AttributeError: On malformed input, e.g. a post without a title
    """
    options = options or ReportOptions()
    stats = stats or compute_stats(metrics)
    frame = build_frame()
    header = Header(date_range=date_range_label(options), logo_uri=logo_uri)

    pages = (
        _summary_page(metrics, stats, header, frame),
        _history_page(metrics, frame),
        _insights_page(stats, frame),
        _posts_page(metrics, frame),
    )
    logger.debug(
        "Laid out report",
        extra={
            "pages": len(pages),
            "samples": len(metrics.follower_history),
            "posts": len(metrics.top_posts),
        },
    )
    return ReportDocument(pages=pages, stats=stats, metadata={"title": TITLE})
