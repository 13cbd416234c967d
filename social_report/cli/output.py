"""Console output helpers for the socialreport CLI.

User-facing messages go through these helpers; diagnostics go through the
structured logger. Messages are short and prefixed so they stand out from
log lines on stderr.
"""

from __future__ import annotations

import typer


def success(message: str, *, prefix: bool = True) -> None:
    """Green message with a check mark, e.g. ``✅ Report written to report.pdf``."""
    typer.secho(f"✅ {message}" if prefix else message, fg=typer.colors.GREEN)


def error(message: str, *, prefix: bool = True, err: bool = True) -> None:
    """Red message with a cross, written to stderr by default.

    Args:
        message: The error message to display
        prefix: Whether to include the cross emoji prefix (default: True)
        err: Whether to write to stderr instead of stdout (default: True)
    """
    typer.secho(f"❌ {message}" if prefix else message, fg=typer.colors.RED, err=err)


def info(message: str, *, prefix: bool = True) -> None:
    typer.secho(f"ℹ️  {message}" if prefix else message, fg=typer.colors.CYAN)


def warning(message: str, *, prefix: bool = True) -> None:
    typer.secho(f"⚠️  {message}" if prefix else message, fg=typer.colors.YELLOW)


def detail(label: str, value: object) -> None:
    """Indented ``label: value`` line under a previous message."""
    typer.echo(f"  {label}: {value}")
