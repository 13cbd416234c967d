"""Tests for the socialreport CLI."""

from __future__ import annotations

import json
from datetime import UTC, date, datetime
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from social_report import __version__
from social_report.cli.main import app
from social_report.core.enums import Platform
from social_report.core.errors import ReportGenerationError
from social_report.core.models import MetricsBundle

runner = CliRunner()


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Log files and relative outputs land in the temp directory
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def metrics_file(workdir: Path, sample_metrics: MetricsBundle) -> Path:
    path = workdir / "metrics.json"
    path.write_text(json.dumps(sample_metrics.to_dict()), encoding="utf-8")
    return path


def test_version() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestGenerate:
    def test_generate_writes_pdf(self, workdir: Path, sample_metrics: MetricsBundle) -> None:
        with (
            patch("social_report.cli.main.fetch_metrics", return_value=sample_metrics) as fetch,
            patch("social_report.cli.main.generate_report_sync", return_value=b"%PDF-1.7") as generate,
        ):
            result = runner.invoke(
                app,
                [
                    "generate",
                    "--platform",
                    "instagram",
                    "--profile-url",
                    "https://www.instagram.com/nasa/",
                    "--since",
                    "2025-03-01",
                    "--until",
                    "2025-03-10",
                    "--output",
                    "out/report.pdf",
                    "--metrics-output",
                    "out/metrics.json",
                ],
            )

        assert result.exit_code == 0, result.output
        assert (workdir / "out" / "report.pdf").read_bytes() == b"%PDF-1.7"
        saved = json.loads((workdir / "out" / "metrics.json").read_text(encoding="utf-8"))
        assert len(saved["topPosts"]) == 3

        args = fetch.call_args.args
        assert args[0] == datetime(2025, 3, 1, tzinfo=UTC)
        assert args[2] is Platform.INSTAGRAM
        assert args[3] == "https://www.instagram.com/nasa/"
        options = generate.call_args.args[1]
        assert (options.since, options.until) == (date(2025, 3, 1), date(2025, 3, 10))
        assert "Report written to out/report.pdf" in result.output

    def test_generate_without_platform_uses_synthetic(self, workdir: Path) -> None:
        with patch("social_report.cli.main.generate_report_sync", return_value=b"%PDF") as generate:
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0, result.output
        metrics = generate.call_args.args[0]
        assert metrics.follower_history[0].count == 1000
        assert (workdir / "report.pdf").exists()

    def test_bad_date(self) -> None:
        result = runner.invoke(app, ["generate", "--since", "03/01/2025"])

        assert result.exit_code == 1
        assert "YYYY-MM-DD" in result.output

    def test_since_after_until(self) -> None:
        result = runner.invoke(app, ["generate", "--since", "2025-03-10", "--until", "2025-03-01"])

        assert result.exit_code == 1
        assert "cannot be after" in result.output

    def test_report_failure_exits_nonzero(self, workdir: Path, sample_metrics: MetricsBundle) -> None:
        with (
            patch("social_report.cli.main.fetch_metrics", return_value=sample_metrics),
            patch(
                "social_report.cli.main.generate_report_sync",
                side_effect=ReportGenerationError("Failed to generate report: boom"),
            ),
        ):
            result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "boom" in result.output
        assert not (workdir / "report.pdf").exists()


class TestRender:
    def test_render_from_metrics_file(self, workdir: Path, metrics_file: Path) -> None:
        with patch("social_report.cli.main.generate_report_sync", return_value=b"%PDF") as generate:
            result = runner.invoke(
                app,
                ["render", "--metrics", str(metrics_file), "--html-output", "report.html"],
            )

        assert result.exit_code == 0, result.output
        html = (workdir / "report.html").read_text(encoding="utf-8")
        assert html.count('<div class="page page-') == 4
        assert len(generate.call_args.args[0].follower_history) == 10
        assert (workdir / "report.pdf").read_bytes() == b"%PDF"

    def test_missing_metrics_file(self) -> None:
        result = runner.invoke(app, ["render", "--metrics", "nope.json"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_json(self, workdir: Path) -> None:
        (workdir / "bad.json").write_text("{not json", encoding="utf-8")

        result = runner.invoke(app, ["render", "--metrics", "bad.json"])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_malformed_metrics(self, workdir: Path) -> None:
        (workdir / "bad.json").write_text(json.dumps({"followerHistory": [{"count": 1}]}), encoding="utf-8")

        result = runner.invoke(app, ["render", "--metrics", "bad.json"])

        assert result.exit_code == 1
        assert "Malformed metrics" in result.output

    @pytest.mark.parametrize("content", ["[]", '"x"', '{"topPosts": [1, 2]}'])
    def test_metrics_not_an_object(self, workdir: Path, content: str) -> None:
        """Valid JSON of the wrong shape is reported, not raised."""
        (workdir / "m.json").write_text(content, encoding="utf-8")

        result = runner.invoke(app, ["render", "--metrics", "m.json"])

        assert result.exit_code == 1
        assert "Malformed metrics" in result.output
        assert not isinstance(result.exception, TypeError)
