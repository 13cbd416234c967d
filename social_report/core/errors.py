"""Exception taxonomy for report generation.

Sparse metrics (empty history, no posts, zero followers) are never errors;
these exceptions cover acquisition failures and broken renders only.
"""


class SocialReportError(Exception):
    """Base exception for social_report."""

    pass


class ProviderError(SocialReportError):
    """A metrics provider could not produce data (network, parsing, bad URL)."""

    pass


class PDFExportError(SocialReportError, RuntimeError):
    """WeasyPrint is unavailable or failed to write the PDF."""

    pass


class ReportGenerationError(SocialReportError):
    """The report could not be generated; no partial output exists."""

    pass
