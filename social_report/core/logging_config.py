"""Centralized logging configuration for social_report.

The console shows what the operator needs while a report runs: provider
fallbacks, clipped history rows, PDF export failures. Every record, including
DEBUG layout details, also goes to ``logs/social_report.log`` as JSON lines
with the structured ``extra`` fields (platform, username, samples, posts,
pdf_size), so a degraded or failed report can be traced after the fact.
"""

import copy
import logging
import logging.config
import os
from typing import Any


LOG_DIR = "logs"

# Default logging configuration
LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
        "console": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "console",
            "stream": "ext://sys.stderr",
        },
        "json_file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "json",
            "filename": f"{LOG_DIR}/social_report.log",
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        },
    },
    "loggers": {
        "social_report": {
            "level": "DEBUG",
            "handlers": ["console", "json_file"],
            "propagate": False,
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def setup_logging(json_output: bool = False, log_level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, use JSON formatter for console output (for production)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    os.makedirs(LOG_DIR, exist_ok=True)

    config = copy.deepcopy(LOGGING_CONFIG)

    if json_output:
        config["handlers"]["console"]["formatter"] = "json"

    if log_level:
        config["handlers"]["console"]["level"] = log_level
        config["loggers"]["social_report"]["level"] = log_level

    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("Fetched metrics", extra={"platform": "instagram", "samples": 31})
    """
    return logging.getLogger(name)
