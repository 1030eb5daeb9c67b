from __future__ import annotations

from datetime import datetime
from typing import Optional


def is_valid_input_string(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def is_valid_numeric_input(value: int) -> bool:
    """Ids are 1-based; zero and negatives are never valid."""
    return value > 0


def is_valid_end_time(start_time: datetime, end_time: datetime) -> bool:
    return end_time > start_time


def is_valid_date_string(value: Optional[str], date_format: str) -> bool:
    """Exact-match parse: the string must round-trip through ``date_format``.

    ``strptime`` alone accepts unpadded fields such as ``1-2-2024 8:00``;
    re-formatting the parsed value rejects those.
    """
    if value is None:
        return False
    try:
        parsed = datetime.strptime(value, date_format)
    except ValueError:
        return False
    return parsed.strftime(date_format) == value
