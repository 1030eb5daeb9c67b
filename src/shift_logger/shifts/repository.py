from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def list_by_worker(self, worker_id: int) -> Sequence[Shift]:
        raise NotImplementedError

    def add(self, shift: Shift) -> Shift:
        raise NotImplementedError

    def save(self, shift: Shift) -> Shift:
        raise NotImplementedError

    def delete(self, shift: Shift) -> None:
        raise NotImplementedError
