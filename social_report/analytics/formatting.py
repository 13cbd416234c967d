"""Number and date formatting used in report text."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int) -> str:
    """Format with a fixed number of decimals, rounding exact halves up.

    ``format(0.5, ".0f")`` gives ``"0"``; report text expects ``"1"``.
    Unlike JavaScript's ``toFixed``, a value that rounds to zero never
    keeps its sign: ``to_fixed(-0.01, 1)`` is ``"0.0"``, not ``"-0.0"``.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:.{digits}f}"


def with_thousands(value: int) -> str:
    return f"{value:,}"


def format_date(value: date | datetime) -> str:
    """US short date, e.g. ``3/7/2025``."""
    return f"{value.month}/{value.day}/{value.year}"
