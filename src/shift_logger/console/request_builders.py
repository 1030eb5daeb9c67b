"""Turn raw console input into validated request DTOs.

Each builder returns a successful result carrying the request, or a failed
result with a corrective message. Nothing here talks to the network.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.validators import (
    is_valid_date_string,
    is_valid_end_time,
    is_valid_input_string,
    is_valid_numeric_input,
)
from ..core.constants import DATE_FORMAT, DATE_FORMAT_DISPLAY
from ..core.result import ValueResult
from ..shifts.dto import CreateShiftRequest, UpdateShiftRequest
from ..workers.dto import CreateWorkerRequest, UpdateWorkerRequest


def _optional(value: Optional[str]) -> Optional[str]:
    return value.strip() if is_valid_input_string(value) else None


def build_date_time(value: str, date_format: str = DATE_FORMAT) -> ValueResult[datetime]:
    value = (value or "").strip()
    if not is_valid_date_string(value, date_format):
        display = DATE_FORMAT_DISPLAY if date_format == DATE_FORMAT else date_format
        return ValueResult.fail(f"Invalid date, date must match format: {display}")
    return ValueResult.ok(datetime.strptime(value, date_format))


def build_worker_request(
    name: Optional[str],
    department: Optional[str],
    email: Optional[str] = None,
    phone_number: Optional[str] = None,
) -> ValueResult[CreateWorkerRequest]:
    if not is_valid_input_string(name):
        return ValueResult.fail("Worker name must be provided")
    if not is_valid_input_string(department):
        return ValueResult.fail("Worker department must be provided")

    return ValueResult.ok(
        CreateWorkerRequest(
            name=name.strip(),
            department=department.strip(),
            email=_optional(email),
            phone_number=_optional(phone_number),
        )
    )


def build_update_worker_request(
    name: Optional[str],
    department: Optional[str],
    email: Optional[str],
    phone_number: Optional[str],
) -> ValueResult[UpdateWorkerRequest]:
    if not any(is_valid_input_string(v) for v in (name, department, email, phone_number)):
        return ValueResult.fail("In order to update there must be at least one field provided")

    return ValueResult.ok(
        UpdateWorkerRequest(
            name=_optional(name),
            department=_optional(department),
            email=_optional(email),
            phone_number=_optional(phone_number),
        )
    )


def _check_shift(worker_id: int, start_time: datetime, end_time: datetime) -> Optional[str]:
    if not is_valid_numeric_input(worker_id):
        return "Worker id must be greater than 0"
    if not is_valid_end_time(start_time, end_time):
        return "End time must come after start time"
    return None


def build_create_shift_request(worker_id: int, start_time: datetime, end_time: datetime) -> ValueResult[CreateShiftRequest]:
    error = _check_shift(worker_id, start_time, end_time)
    if error:
        return ValueResult.fail(error)
    return ValueResult.ok(CreateShiftRequest(worker_id=worker_id, start_time=start_time, end_time=end_time))


def build_update_shift_request(worker_id: int, start_time: datetime, end_time: datetime) -> ValueResult[UpdateShiftRequest]:
    error = _check_shift(worker_id, start_time, end_time)
    if error:
        return ValueResult.fail(error)
    return ValueResult.ok(UpdateShiftRequest(worker_id=worker_id, start_time=start_time, end_time=end_time))
