"""Report facade: metrics in, PDF bytes out.

Each call builds its own stats, document and renderer, so concurrent calls
share nothing. Layout and HTML rendering run inline; the WeasyPrint pass runs
in a worker thread and is awaited, so a failure there fails the whole call.
Either the complete PDF is returned or ``ReportGenerationError`` is raised.
"""

from __future__ import annotations

import asyncio
import base64
import mimetypes
from pathlib import Path

from ..analytics.stats import compute_stats
from ..core.config import Settings, get_settings
from ..core.errors import ReportGenerationError
from ..core.logging_config import get_logger
from ..core.models import MetricsBundle, ReportOptions
from .paginator import ReportDocument, build_document
from .pdf import PDF_CONTENT_TYPE
from .renderer import ReportRenderer

logger = get_logger(__name__)

__all__ = [
    "PDF_CONTENT_TYPE",
    "build_report_document",
    "generate_report",
    "generate_report_sync",
    "load_logo",
]


def load_logo(path: Path | None) -> str | None:
    """Read the header logo as a data URI; a missing or unreadable file yields None."""
    if path is None:
        return None
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.debug("Logo not loaded, header will omit it", extra={"path": str(path), "error": str(e)})
        return None
    mime = mimetypes.guess_type(path.name)[0] or "image/png"
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


def build_report_document(
    metrics: MetricsBundle,
    options: ReportOptions | None = None,
    *,
    settings: Settings | None = None,
) -> ReportDocument:
    """Compute stats and lay out the four pages without producing a PDF."""
    settings = settings or get_settings()
    stats = compute_stats(metrics)
    return build_document(
        metrics, options, stats=stats, logo_uri=load_logo(settings.logo_path)
    )


async def generate_report(
    metrics: MetricsBundle,
    options: ReportOptions | None = None,
    *,
    settings: Settings | None = None,
    renderer: ReportRenderer | None = None,
) -> bytes:
    """Generate the PDF report for one profile.

    Args:
        metrics: Follower history and top posts from a provider
        options: Date range shown in the header
        settings: Optional settings override (logo path)
        renderer: Optional renderer override

    Returns:
        PDF document bytes (content type ``application/pdf``)

    Raises:
        ReportGenerationError: On malformed input or any rendering/export failure
    """
    try:
        document = build_report_document(metrics, options, settings=settings)
        renderer = renderer or ReportRenderer()
        html = renderer.render_html(document)
        pdf_bytes = await asyncio.to_thread(renderer.exporter.html_to_pdf, html)
    except Exception as e:
        logger.error(
            "Report generation failed",
            extra={"error": str(e), "error_type": type(e).__name__},
            exc_info=True,
        )
        raise ReportGenerationError(f"Failed to generate report: {e}") from e

    logger.info(
        "Report generated",
        extra={
            "pages": document.page_count,
            "samples": len(metrics.follower_history),
            "posts": len(metrics.top_posts),
            "size": len(pdf_bytes),
        },
    )
    return pdf_bytes


def generate_report_sync(
    metrics: MetricsBundle,
    options: ReportOptions | None = None,
    *,
    settings: Settings | None = None,
    renderer: ReportRenderer | None = None,
) -> bytes:
    """Blocking wrapper around ``generate_report`` for callers without a loop."""
    return asyncio.run(
        generate_report(metrics, options, settings=settings, renderer=renderer)
    )
