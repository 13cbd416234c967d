"""Report rendering: four-page layout, HTML templates and PDF export.

Usage:
    from social_report.render import generate_report

    pdf_bytes = await generate_report(metrics, ReportOptions(since=..., until=...))
"""

from __future__ import annotations

from .paginator import ReportDocument, build_document
from .report import PDF_CONTENT_TYPE, build_report_document, generate_report, generate_report_sync

__all__ = [
    "PDF_CONTENT_TYPE",
    "ReportDocument",
    "build_document",
    "build_report_document",
    "generate_report",
    "generate_report_sync",
]
