from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from social_report.core.logging_config import LOGGING_CONFIG, get_logger, setup_logging


@pytest.fixture
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path / "logs" / "social_report.log"


def _flush() -> None:
    for handler in logging.getLogger("social_report").handlers:
        handler.flush()


def test_file_log_is_json_with_extra_fields(log_file: Path) -> None:
    """Structured fields land in the JSON log so degraded reports can be traced."""
    setup_logging()

    get_logger("social_report.providers.service").warning(
        "Error fetching metrics from provider, using synthetic metrics",
        extra={"platform": "tiktok", "samples": 31},
    )
    _flush()

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "Error fetching metrics from provider, using synthetic metrics"
    assert record["platform"] == "tiktok"
    assert record["samples"] == 31
    assert record["levelname"] == "WARNING"


def test_debug_records_reach_the_file(log_file: Path) -> None:
    setup_logging(log_level="DEBUG")

    get_logger("social_report.render.paginator").debug("Laid out report", extra={"pages": 4})
    _flush()

    assert '"pages": 4' in log_file.read_text(encoding="utf-8")


def test_setup_does_not_mutate_defaults(log_file: Path) -> None:
    setup_logging(json_output=True, log_level="ERROR")

    assert LOGGING_CONFIG["handlers"]["console"]["formatter"] == "console"
    assert LOGGING_CONFIG["handlers"]["console"]["level"] == "INFO"
