from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..common.payload import optional_str, require_int, require_object, require_str
from .model import Worker


@dataclass(frozen=True)
class CreateWorkerRequest:
    name: str
    department: str
    email: Optional[str] = None
    phone_number: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "CreateWorkerRequest":
        data = require_object(data)
        return cls(
            name=optional_str(data, "name") or "",
            department=optional_str(data, "department") or "",
            email=optional_str(data, "email"),
            phone_number=optional_str(data, "phone_number"),
        )


@dataclass(frozen=True)
class UpdateWorkerRequest:
    """Partial update: blank or missing fields are left unchanged."""

    name: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "UpdateWorkerRequest":
        data = require_object(data)
        return cls(
            name=optional_str(data, "name"),
            department=optional_str(data, "department"),
            email=optional_str(data, "email"),
            phone_number=optional_str(data, "phone_number"),
        )


@dataclass(frozen=True)
class WorkerResponse:
    id: int
    name: str
    department: str
    email: Optional[str] = None
    phone_number: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "WorkerResponse":
        data = require_object(data)
        return cls(
            id=require_int(data, "id"),
            name=require_str(data, "name"),
            department=require_str(data, "department"),
            email=optional_str(data, "email"),
            phone_number=optional_str(data, "phone_number"),
        )

    @classmethod
    def from_model(cls, worker: Worker) -> "WorkerResponse":
        return cls(
            id=worker.id,
            name=worker.name,
            department=worker.department,
            email=worker.email,
            phone_number=worker.phone_number,
        )
