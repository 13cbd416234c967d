from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path

import typer

from .. import __version__
from ..core.config import get_settings
from ..core.enums import Platform
from ..core.errors import ReportGenerationError
from ..core.logging_config import get_logger, setup_logging
from ..core.models import MetricsBundle, ReportOptions
from ..providers import fetch_metrics
from ..render.pdf import write_pdf
from ..render.renderer import ReportRenderer, write_text
from ..render.report import build_report_document, generate_report_sync
from . import output as cli_output

app = typer.Typer(help="Social media PDF report generator")

logger = get_logger(__name__)


@app.callback()
def callback(
    json_logs: bool = typer.Option(False, "--json-logs", help="Output logs in JSON format"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
) -> None:
    """Configure global CLI options."""
    setup_logging(json_output=json_logs, log_level=log_level)
    logger.debug("CLI initialized", extra={"json_logs": json_logs, "log_level": log_level})


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(__version__)


def _parse_dates(since: str | None, until: str | None) -> tuple[date | None, date | None]:
    parsed: list[date | None] = []
    for flag, value in (("--since", since), ("--until", until)):
        if value is None:
            parsed.append(None)
            continue
        try:
            parsed.append(date.fromisoformat(value))
        except ValueError:
            cli_output.error(f"{flag} must be in YYYY-MM-DD format.")
            raise typer.Exit(code=1) from None
    start, end = parsed
    if start and end and start > end:
        cli_output.error("--since cannot be after --until.")
        raise typer.Exit(code=1)
    return start, end


def _as_datetime(d: date | None) -> datetime | None:
    return datetime(d.year, d.month, d.day, tzinfo=UTC) if d else None


def _write_report(metrics: MetricsBundle, options: ReportOptions, output: str) -> None:
    try:
        pdf_bytes = generate_report_sync(metrics, options)
    except ReportGenerationError as e:
        cli_output.error(str(e))
        cli_output.warning("Ensure WeasyPrint is properly installed if the PDF step failed.")
        raise typer.Exit(code=1) from None

    write_pdf(output, pdf_bytes)
    cli_output.success(f"Report written to {output}")
    cli_output.detail("Follower samples", len(metrics.follower_history))
    cli_output.detail("Top posts", len(metrics.top_posts))


@app.command()
def generate(
    platform: Platform | None = typer.Option(  # noqa: B008
        None, case_sensitive=False, help="Social platform: instagram|tiktok|synthetic"
    ),
    profile_url: str | None = typer.Option(None, help="Full public profile URL"),  # noqa: B008
    since: str | None = typer.Option(None, help="Start date YYYY-MM-DD"),  # noqa: B008
    until: str | None = typer.Option(None, help="End date YYYY-MM-DD"),  # noqa: B008
    output: str = typer.Option("report.pdf", help="Output path for the PDF report"),
    metrics_output: str | None = typer.Option(
        None, help="Optional path to save the fetched metrics as JSON"
    ),
) -> None:
    """Fetch metrics for a profile and write the PDF report.

    Without --platform and --profile-url, or when the platform cannot be
    reached, synthetic metrics are used.

    Example:
        socialreport generate --platform instagram --profile-url https://www.instagram.com/nasa/
    """
    start, end = _parse_dates(since, until)
    settings = get_settings()

    if platform and not profile_url:
        cli_output.warning("--platform given without --profile-url; using synthetic metrics.")

    logger.info("Fetching metrics", extra={"platform": platform.value if platform else None})
    metrics = fetch_metrics(
        _as_datetime(start),
        _as_datetime(end),
        platform,
        profile_url,
        settings=settings,
    )
    if metrics_output:
        write_text(metrics_output, json.dumps(metrics.to_dict(), indent=2))
        cli_output.info(f"Metrics saved to {metrics_output}")

    _write_report(metrics, ReportOptions(since=start, until=end), output)


@app.command()
def render(
    metrics_file: str = typer.Option(..., "--metrics", help="Path to metrics JSON"),  # noqa: B008
    since: str | None = typer.Option(None, help="Start date YYYY-MM-DD (header only)"),  # noqa: B008
    until: str | None = typer.Option(None, help="End date YYYY-MM-DD (header only)"),  # noqa: B008
    output: str = typer.Option("report.pdf", help="Output path for the PDF report"),
    html_output: str | None = typer.Option(
        None, help="Optional output path for the intermediate HTML"
    ),
) -> None:
    """Render a report from a stored metrics JSON file."""
    start, end = _parse_dates(since, until)

    try:
        raw = json.loads(Path(metrics_file).read_text(encoding="utf-8"))
    except FileNotFoundError:
        cli_output.error(f"Metrics file not found: {metrics_file}")
        raise typer.Exit(code=1) from None
    except json.JSONDecodeError as e:
        cli_output.error(f"Invalid JSON in metrics file: {e}")
        raise typer.Exit(code=1) from None

    try:
        metrics = MetricsBundle.from_dict(raw)
    except (KeyError, TypeError, ValueError) as e:
        cli_output.error(f"Malformed metrics: {e}")
        raise typer.Exit(code=1) from None

    options = ReportOptions(since=start, until=end)
    if html_output:
        try:
            document = build_report_document(metrics, options)
            html = ReportRenderer().render_html(document)
        except (AttributeError, TypeError, RuntimeError) as e:
            cli_output.error(f"HTML rendering failed: {e}")
            raise typer.Exit(code=1) from None
        write_text(html_output, html)
        cli_output.success(f"HTML written to {html_output}")

    _write_report(metrics, options, output)
