from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for Worker.

    Note (DIP): services depend on this interface, never on the concrete
    SQLAlchemy implementation. Write methods commit, and roll back then
    re-raise when the store rejects the change.
    """

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def search_by_name(self, fragment: str) -> Sequence[Worker]:
        raise NotImplementedError

    def add(self, worker: Worker) -> Worker:
        raise NotImplementedError

    def save(self, worker: Worker) -> Worker:
        raise NotImplementedError

    def delete(self, worker: Worker) -> None:
        raise NotImplementedError
