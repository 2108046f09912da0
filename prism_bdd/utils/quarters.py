"""Calendar quarter helpers for the dashboard quarter selector and charts.

The dashboard labels quarters as ``"Q2 April - June 2026"`` and its usage
charts only plot months that have already started, abbreviated as ``"APR"``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_LABELS = tuple(name[:3].upper() for name in MONTH_NAMES)

_QUARTER_TEXT = re.compile(
    r"^Q(?P<quarter>[1-4])\s+(?P<first>[A-Za-z]+)\s*-\s*(?P<last>[A-Za-z]+)\s+(?P<year>\d{4})$"
)


def quarter_for_month(month: int) -> int:
    """Map a month number (1-12) to its calendar quarter (1-4)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return (month - 1) // 3 + 1


def quarter_months(quarter: int) -> range:
    """Month numbers belonging to ``quarter``."""
    if not 1 <= quarter <= 4:
        raise ValueError(f"Quarter must be between 1 and 4, got {quarter}")
    first = (quarter - 1) * 3 + 1
    return range(first, first + 3)


def get_current_quarter_text(today: Optional[date] = None) -> str:
    """Return the quarter label for ``today``, e.g. ``"Q2 April - June 2026"``."""
    today = today or date.today()
    quarter = quarter_for_month(today.month)
    months = quarter_months(quarter)
    return (
        f"Q{quarter} {MONTH_NAMES[months[0] - 1]} - "
        f"{MONTH_NAMES[months[-1] - 1]} {today.year}"
    )


def _parse_quarter_text(quarter_text: str) -> tuple[int, int]:
    """Return ``(quarter, year)`` for a label such as ``"Q2 April - June 2026"``."""
    match = _QUARTER_TEXT.match(quarter_text.strip())
    if not match:
        raise ValueError(f"Unrecognized quarter text: {quarter_text!r}")

    quarter = int(match["quarter"])
    months = quarter_months(quarter)
    if (
        match["first"].lower() != MONTH_NAMES[months[0] - 1].lower()
        or match["last"].lower() != MONTH_NAMES[months[-1] - 1].lower()
    ):
        raise ValueError(f"Month range does not match Q{quarter}: {quarter_text!r}")
    return quarter, int(match["year"])


def quarter_month_labels(quarter_text: str) -> list[str]:
    """All three month labels of ``quarter_text``, e.g. ``["APR", "MAY", "JUN"]``."""
    quarter, _ = _parse_quarter_text(quarter_text)
    return [MONTH_LABELS[month - 1] for month in quarter_months(quarter)]


def calculate_expected_months(
    quarter_text: str, today: Optional[date] = None
) -> list[str]:
    """Month labels the chart should show for ``quarter_text``.

    Past quarters show all three months, future quarters none, and the
    current quarter every month up to and including the current one.

    Raises:
        ValueError: If ``quarter_text`` is not a quarter label or its month
            names do not belong to the quarter.
    """
    quarter, year = _parse_quarter_text(quarter_text)
    months = quarter_months(quarter)

    today = today or date.today()
    if year < today.year:
        elapsed = list(months)
    elif year > today.year:
        elapsed = []
    else:
        elapsed = [month for month in months if month <= today.month]

    return [MONTH_LABELS[month - 1] for month in elapsed]
