"""Helpers for reading JSON payloads into DTOs.

Every helper raises ``ValidationError`` with a message naming the field, so
controllers can answer 400 and the client can report a parse error.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import from_wire


def require_object(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string")
    return value


def optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string or null")
    return value


def require_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Field '{key}' must be an integer")
    return value


def require_datetime(data: Mapping[str, Any], key: str) -> datetime:
    value = data.get(key)
    try:
        parsed = from_wire(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Field '{key}' must be an ISO-8601 date and time")
    # Shifts are stored as naive local time.
    if parsed.tzinfo is not None:
        raise ValidationError(f"Field '{key}' must not carry a UTC offset")
    return parsed
