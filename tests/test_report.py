"""Tests for the report facade."""

from __future__ import annotations

import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from social_report.core.config import Settings
from social_report.core.errors import PDFExportError, ReportGenerationError
from social_report.core.models import MetricsBundle, PostSample, ReportOptions
from social_report.render.renderer import ReportRenderer
from social_report.render.report import (
    PDF_CONTENT_TYPE,
    build_report_document,
    generate_report,
    generate_report_sync,
    load_logo,
)


@pytest.fixture
def renderer(fake_exporter: MagicMock) -> ReportRenderer:
    return ReportRenderer(exporter=fake_exporter)


@pytest.mark.asyncio
async def test_generate_report_returns_pdf_bytes(
    sample_metrics: MetricsBundle,
    options: ReportOptions,
    settings: Settings,
    renderer: ReportRenderer,
    fake_exporter: MagicMock,
) -> None:
    """The facade renders HTML and returns the exporter's bytes."""
    pdf = await generate_report(sample_metrics, options, settings=settings, renderer=renderer)

    assert pdf == b"%PDF-1.7 fake"
    html = fake_exporter.html_to_pdf.call_args.args[0]
    assert html.count('<div class="page page-') == 4


@pytest.mark.asyncio
async def test_generate_report_with_empty_metrics(
    empty_metrics: MetricsBundle, settings: Settings, renderer: ReportRenderer
) -> None:
    """Sparse metrics still produce a complete document."""
    pdf = await generate_report(empty_metrics, settings=settings, renderer=renderer)
    assert pdf.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_export_failure_fails_the_whole_report(
    sample_metrics: MetricsBundle, settings: Settings, renderer: ReportRenderer, fake_exporter: MagicMock
) -> None:
    """A finalization error propagates; no partial output is returned."""
    fake_exporter.html_to_pdf.side_effect = PDFExportError("stream closed")

    with pytest.raises(ReportGenerationError, match="stream closed") as exc_info:
        await generate_report(sample_metrics, settings=settings, renderer=renderer)

    assert isinstance(exc_info.value.__cause__, PDFExportError)


@pytest.mark.asyncio
async def test_malformed_post_fails_the_report(
    settings: Settings, renderer: ReportRenderer, fake_exporter: MagicMock
) -> None:
    metrics = MetricsBundle(top_posts=[PostSample(title=None, likes=1, comments=2)])  # type: ignore[arg-type]

    with pytest.raises(ReportGenerationError):
        await generate_report(metrics, settings=settings, renderer=renderer)

    fake_exporter.html_to_pdf.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_reports_are_independent(
    sample_metrics: MetricsBundle, empty_metrics: MetricsBundle, settings: Settings, fake_exporter: MagicMock
) -> None:
    """Parallel calls each render their own document."""
    results = await asyncio.gather(
        generate_report(sample_metrics, settings=settings, renderer=ReportRenderer(exporter=fake_exporter)),
        generate_report(empty_metrics, settings=settings, renderer=ReportRenderer(exporter=fake_exporter)),
    )

    assert results == [b"%PDF-1.7 fake", b"%PDF-1.7 fake"]
    rendered = [call.args[0] for call in fake_exporter.html_to_pdf.call_args_list]
    assert sum("<polyline" in html for html in rendered) == 1


def test_generate_report_sync(
    sample_metrics: MetricsBundle, settings: Settings, renderer: ReportRenderer
) -> None:
    assert generate_report_sync(sample_metrics, settings=settings, renderer=renderer) == b"%PDF-1.7 fake"


def test_identical_inputs_give_identical_text(
    sample_metrics: MetricsBundle, options: ReportOptions, settings: Settings
) -> None:
    first = build_report_document(sample_metrics, options, settings=settings)
    second = build_report_document(sample_metrics, options, settings=settings)

    assert first.text_content() == second.text_content()
    assert first.stats == second.stats


def test_content_type() -> None:
    assert PDF_CONTENT_TYPE == "application/pdf"


class TestLogo:
    """Header logo loading."""

    def test_logo_embedded_as_data_uri(self, tmp_path: Path, sample_metrics: MetricsBundle) -> None:
        logo = tmp_path / "logo.png"
        logo.write_bytes(b"\x89PNG")

        doc = build_report_document(sample_metrics, settings=Settings(logo_path=logo))

        assert doc.pages[0].header.logo_uri == "data:image/png;base64,iVBORw=="

    def test_missing_logo_is_omitted(self, tmp_path: Path) -> None:
        assert load_logo(tmp_path / "missing.png") is None

    def test_no_logo_configured(self) -> None:
        assert load_logo(None) is None
