"""Lenient date parsing for upload payloads."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

CSV_DATE_FORMATS: tuple[str, ...] = (
    "%Y.%m.%d",
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%Y/%m/%d",
)

JSON_DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%Y.%m.%d")


def parse_date(value: str | None, formats: Sequence[str], iso_fallback: bool = False) -> date | None:
    """Parse ``value`` against ``formats`` in order; first match wins.

    Returns None for blank or unparseable input instead of raising.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    if iso_fallback:
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass
    return None
