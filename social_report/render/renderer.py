from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from .. import __version__
from ..core.logging_config import get_logger
from ..visuals import palette
from .paginator import (
    CARD_MARGIN_X,
    CARD_MARGIN_Y,
    CARD_PADDING_X,
    CARD_PADDING_Y,
    ReportDocument,
)
from .pdf import PDFExporter

logger = get_logger(__name__)

REPORT_TEMPLATE = "report.html.j2"


def _num(value: float) -> str:
    return f"{value:.2f}"


def _pt(value: float) -> str:
    return f"{value:.2f}pt"


def _layout(document: ReportDocument) -> dict[str, float]:
    left = CARD_MARGIN_X + CARD_PADDING_X
    top = CARD_MARGIN_Y + CARD_PADDING_Y
    return {
        "content_left": left,
        "content_top": top,
        "content_width": document.width - 2 * left,
        "content_height": document.height - 2 * top,
    }


class ReportRenderer:
    """Renders a laid-out ``ReportDocument`` to HTML and PDF."""

    def __init__(
        self, templates_dir: Path | None = None, exporter: PDFExporter | None = None
    ):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=lambda name: name is not None and name.endswith(".html.j2"),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["num"] = _num
        self.env.filters["pt"] = _pt
        self.exporter = exporter or PDFExporter()

    def render_html(self, document: ReportDocument) -> str:
        """Render the four report pages as a single HTML document.

        Args:
            document: Laid-out report from ``build_document``

        Returns:
            HTML string with inline SVG frames and charts

        Raises:
            RuntimeError: If the template is missing or rendering fails
        """
        context: dict[str, Any] = {
            "document": document,
            "layout": _layout(document),
            "palette": palette,
            "version": __version__,
        }
        try:
            template = self.env.get_template(REPORT_TEMPLATE)
            logger.debug("Rendering HTML report", extra={"pages": document.page_count})
            return template.render(**context)
        except TemplateNotFound as e:
            logger.error("HTML template not found", extra={"error": str(e)})
            raise RuntimeError(
                f"HTML template not found: {e}. "
                f"Ensure social_report/render/templates/{REPORT_TEMPLATE} exists."
            ) from e
        except Exception as e:
            logger.error("Failed to render HTML report", extra={"error": str(e)})
            raise RuntimeError(f"Failed to render HTML report: {e}") from e

    def render_pdf(self, document: ReportDocument) -> bytes:
        """Render the document straight to PDF bytes."""
        html = self.render_html(document)
        return self.exporter.html_to_pdf(html)


def write_text(path: str, content: str) -> None:
    """Write text content to file."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
