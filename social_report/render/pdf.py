"""PDF export for social media reports.

Converts the rendered report HTML (inline SVG frames and charts) to PDF with
WeasyPrint and returns the bytes; nothing is written to disk unless the
caller asks for it with ``write_pdf``.

Usage:
    from social_report.render.pdf import PDFExporter

    exporter = PDFExporter()
    pdf_bytes = exporter.html_to_pdf(html_content)

System Dependencies:
    WeasyPrint requires system libraries:
    - macOS: brew install pango libffi
    - Ubuntu: apt-get install libpango-1.0-0 libpangoft2-1.0-0
    - Other systems: See WeasyPrint documentation
"""

from __future__ import annotations

from pathlib import Path

from ..core.errors import PDFExportError
from ..core.logging_config import get_logger

logger = get_logger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


class PDFExporter:
    """Export HTML reports to PDF format using WeasyPrint."""

    def __init__(self) -> None:
        """Initialize PDF exporter.

        Checks for WeasyPrint availability and logs errors if dependencies are missing.
        """
        self._weasyprint_available = self._check_weasyprint()

    def _check_weasyprint(self) -> bool:
        """Check if WeasyPrint is available and properly configured.

        Returns:
            True if WeasyPrint can be imported and used, False otherwise
        """
        try:
            import weasyprint  # type: ignore  # noqa: F401

            return True
        except ImportError as e:
            logger.error(
                "WeasyPrint not installed. Install with: pip install weasyprint",
                extra={"error": str(e)},
            )
            return False
        except OSError as e:
            logger.error(
                "WeasyPrint system dependencies missing. "
                "On macOS: brew install pango libffi. "
                "On Ubuntu: apt-get install libpango-1.0-0 libpangoft2-1.0-0",
                extra={"error": str(e)},
            )
            return False

    def html_to_pdf(self, html_content: str, base_url: str | None = None) -> bytes:
        """Convert HTML content to PDF.

        Args:
            html_content: HTML string to convert to PDF
            base_url: Optional base URL for resolving relative paths in HTML

        Returns:
            PDF content as bytes

        Raises:
            PDFExportError: If WeasyPrint is not available or conversion fails
        """
        if not self._weasyprint_available:
            raise PDFExportError(
                "WeasyPrint is not available. Please install system dependencies and "
                "reinstall weasyprint."
            )

        try:
            from weasyprint import HTML

            logger.debug("Converting HTML to PDF", extra={"html_length": len(html_content)})
            pdf_bytes: bytes = HTML(string=html_content, base_url=base_url).write_pdf()
        except Exception as e:
            logger.error(
                "Failed to convert HTML to PDF",
                extra={"error": str(e), "error_type": type(e).__name__},
                exc_info=True,
            )
            raise PDFExportError(f"PDF conversion failed: {e}") from e

        if not pdf_bytes:
            raise PDFExportError("PDF conversion produced no output")

        logger.info(
            "PDF generated successfully",
            extra={"pdf_size": len(pdf_bytes), "html_size": len(html_content)},
        )
        return pdf_bytes

    def is_available(self) -> bool:
        """Check if PDF export is available.

        Returns:
            True if WeasyPrint is properly configured, False otherwise
        """
        return self._weasyprint_available


def write_pdf(path: str, pdf_bytes: bytes) -> None:
    """Write PDF bytes to file.

    Args:
        path: File path to write PDF to
        pdf_bytes: PDF content as bytes

    Raises:
        OSError: If file writing fails
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    try:
        p.write_bytes(pdf_bytes)
        logger.info(f"PDF written to {path}", extra={"size": len(pdf_bytes)})
    except OSError as e:
        logger.error(f"Failed to write PDF to {path}", extra={"error": str(e)}, exc_info=True)
        raise
