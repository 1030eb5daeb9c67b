from __future__ import annotations

from datetime import datetime, timedelta

from ..core.constants import WIRE_DATETIME_FORMAT


def to_wire(value: datetime) -> str:
    """Serialize a timestamp for JSON bodies (seconds precision)."""
    return value.strftime(WIRE_DATETIME_FORMAT)


def from_wire(value: str) -> datetime:
    """Parse a timestamp from a JSON body.

    Accepts any ISO-8601 form ``datetime.fromisoformat`` understands so the
    service is lenient with clients that send fractional seconds.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO-8601 string, got {type(value).__name__}")
    return datetime.fromisoformat(value)


def format_duration(value: timedelta) -> str:
    """Format as ``H:MM:SS`` with total hours (``26:30:00`` rather than days)."""
    total_seconds = int(value.total_seconds())
    sign = "-" if total_seconds < 0 else ""
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"


def parse_duration(value: str) -> timedelta:
    if not isinstance(value, str):
        raise TypeError(f"Expected a duration string, got {type(value).__name__}")
    negative = value.startswith("-")
    parts = value.lstrip("-").split(":")
    if len(parts) != 3:
        raise ValueError(f"Invalid duration: {value!r}")
    hours, minutes, seconds = (int(p) for p in parts)
    duration = timedelta(hours=hours, minutes=minutes, seconds=seconds)
    return -duration if negative else duration
