from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..database.session import committing
from .model import Worker
from .repository import WorkerRepository


class SQLAlchemyWorkerRepository(WorkerRepository):
    def __init__(self, session: Session):
        self._session = session

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        return self._session.get(Worker, worker_id)

    def list_all(self) -> Sequence[Worker]:
        return self._session.execute(select(Worker).order_by(Worker.id)).scalars().all()

    def search_by_name(self, fragment: str) -> Sequence[Worker]:
        stmt = (
            select(Worker)
            .where(func.lower(Worker.name).contains(fragment.lower(), autoescape=True))
            .order_by(Worker.id)
        )
        return self._session.execute(stmt).scalars().all()

    def add(self, worker: Worker) -> Worker:
        with committing(self._session) as session:
            session.add(worker)
        return worker

    def save(self, worker: Worker) -> Worker:
        with committing(self._session):
            pass
        return worker

    def delete(self, worker: Worker) -> None:
        with committing(self._session) as session:
            session.delete(worker)
