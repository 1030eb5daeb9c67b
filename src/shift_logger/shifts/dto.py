from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from ..common.datetime_utils import format_duration, parse_duration, to_wire
from ..common.payload import require_datetime, require_int, require_object, require_str
from ..core.exceptions import ValidationError
from ..workers.model import Worker
from .model import Shift


@dataclass(frozen=True)
class CreateShiftRequest:
    worker_id: int
    start_time: datetime
    end_time: datetime

    def to_dict(self) -> dict:
        return {
            "worker_id": self.worker_id,
            "start_time": to_wire(self.start_time),
            "end_time": to_wire(self.end_time),
        }

    @classmethod
    def from_dict(cls, data: Any):
        data = require_object(data)
        return cls(
            worker_id=require_int(data, "worker_id"),
            start_time=require_datetime(data, "start_time"),
            end_time=require_datetime(data, "end_time"),
        )


@dataclass(frozen=True)
class UpdateShiftRequest(CreateShiftRequest):
    """Full replace of the worker reference and both timestamps."""


@dataclass(frozen=True)
class ShiftResponse:
    """Read projection of a shift joined with its worker's name and department."""

    id: int
    worker_id: int
    worker_name: str
    worker_department: str
    start_time: datetime
    end_time: datetime
    duration: timedelta

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "worker_department": self.worker_department,
            "start_time": to_wire(self.start_time),
            "end_time": to_wire(self.end_time),
            "duration": format_duration(self.duration),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ShiftResponse":
        data = require_object(data)
        try:
            duration = parse_duration(require_str(data, "duration"))
        except ValueError:
            raise ValidationError("Field 'duration' must look like H:MM:SS")
        return cls(
            id=require_int(data, "id"),
            worker_id=require_int(data, "worker_id"),
            worker_name=require_str(data, "worker_name"),
            worker_department=require_str(data, "worker_department"),
            start_time=require_datetime(data, "start_time"),
            end_time=require_datetime(data, "end_time"),
            duration=duration,
        )

    @classmethod
    def from_model(cls, shift: Shift, worker: Worker) -> "ShiftResponse":
        return cls(
            id=shift.id,
            worker_id=worker.id,
            worker_name=worker.name,
            worker_department=worker.department,
            start_time=shift.start_time,
            end_time=shift.end_time,
            duration=shift.end_time - shift.start_time,
        )
